"""Directory traversal and bounded file reading.

This module provides functionality to:
- Walk files and directories in pre-order, skipping symbolic links,
  hidden directories and binary files
- Read at most a fixed number of bytes from each text file
- Scan the files found, optionally on a thread pool
"""

import os
import stat
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from strixt.config import ScanOptions
from strixt.models import FileReport
from strixt.scanner import scan


BINARY_SNIFF_SIZE = 100

SKIP_SYMLINK = "symbolic link"
SKIP_HIDDEN_DIRECTORY = "hidden directory"
SKIP_BINARY_FILE = "binary file"


@dataclass(frozen=True)
class WalkEntry:
    """A file reached by the walk, or an entry it decided to skip."""

    path: str
    depth: int = 0
    skipped_reason: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.depth < 1


def read_up_to_n_bytes(path: str, n: int) -> bytes:
    """Read at most ``n`` bytes; unreadable files read as empty."""
    try:
        with open(path, "rb") as f:
            return f.read(n)
    except OSError:
        return b""


def is_binary_file(path: str) -> bool:
    """A file is binary if its first bytes contain a null byte."""
    return b"\x00" in read_up_to_n_bytes(path, BINARY_SNIFF_SIZE)


def _join(dirpath: str, name: str) -> str:
    if dirpath == os.curdir:
        return name
    return os.path.join(dirpath, name)


def _walk_dir(dirpath: str, depth: int) -> Iterator[WalkEntry]:
    for name in sorted(os.listdir(dirpath)):
        yield from _walk_entry(_join(dirpath, name), depth + 1)


def _walk_entry(path: str, depth: int) -> Iterator[WalkEntry]:
    mode = os.lstat(path).st_mode
    name = os.path.basename(os.path.normpath(path))

    if stat.S_ISLNK(mode):
        yield WalkEntry(path, depth, SKIP_SYMLINK)
    elif stat.S_ISDIR(mode):
        if depth < 1 or not name.startswith("."):
            yield from _walk_dir(path, depth)
        else:
            yield WalkEntry(path, depth, SKIP_HIDDEN_DIRECTORY)
    elif is_binary_file(path):
        yield WalkEntry(path, depth, SKIP_BINARY_FILE)
    else:
        yield WalkEntry(path, depth)


def walk(path: str) -> Iterator[WalkEntry]:
    """Walk ``path`` in pre-order.

    Raises OSError if the root or any directory below it cannot be read.
    """
    return _walk_entry(path, 0)


def check_entry(entry: WalkEntry, options: ScanOptions) -> FileReport:
    """Scan one walk entry, passing skipped entries straight through."""
    if entry.skipped_reason is not None:
        return FileReport(entry.path, skipped_reason=entry.skipped_reason, depth=entry.depth)
    data = read_up_to_n_bytes(entry.path, options.max_text_file_size)
    return FileReport(entry.path, scan(data, options.tabs_allowed), depth=entry.depth)


def iter_entries(paths: Iterable[str]) -> Iterator[WalkEntry]:
    for path in paths:
        yield from walk(path)


def check_paths(
    paths: Iterable[str],
    options: ScanOptions,
    jobs: int = 1,
) -> Iterator[FileReport]:
    """Yield a report per walk entry, in walk order.

    Args:
        paths: Files or directories to check
        options: Scan options shared by every file
        jobs: Number of worker threads; 1 scans inline

    Raises:
        OSError: A path or directory could not be traversed
    """
    if jobs <= 1:
        for entry in iter_entries(paths):
            yield check_entry(entry, options)
        return

    entries = list(iter_entries(paths))
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = [executor.submit(check_entry, entry, options) for entry in entries]
        for future in futures:
            yield future.result()

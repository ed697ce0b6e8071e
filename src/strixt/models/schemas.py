"""Data models for strixt peeves and scan results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ByteClass(str, Enum):
    """Categories a single byte can fall into."""

    CONTROL = "control"
    TAB = "tab"
    NEWLINE = "newline"
    FORM_FEED = "form-feed"
    CARRIAGE_RETURN = "carriage-return"
    SPACE = "space"
    VISIBLE = "visible"  # 0x21-0x7e
    HIGH_BIT = "high-bit"  # >= 0x80, left alone


class PeeveMessage(str, Enum):
    """Fixed reasons a peeve can be reported for."""

    ASCII_CONTROL = "ASCII control character"
    ASCII_FORM_FEED = "ASCII page separator"
    CARRIAGE_RETURN = "file contains carriage return"
    TABS_NOT_ALLOWED = "tabs not allowed (use -t to allow)"
    TAB_FOR_ALIGNMENT = "tab after non-tab"
    BLANK_LINE_AT_START = "blank line at start of file"
    BLANK_LINE_AT_END = "blank line at end of file"
    TOO_MANY_BLANK_LINES = "too many blank lines"
    LINE_TOO_LONG = "line too long"
    WHITESPACE_ON_BLANK_LINE = "whitespace on blank line"
    WHITESPACE_AT_END_OF_LINE = "whitespace at end of line"
    NO_NEWLINE_AT_END = "no newline at end of file"


@dataclass(frozen=True)
class Peeve:
    """One style violation at a 1-based line and tab-expanded column."""

    line: int
    column: int
    message: PeeveMessage

    def format(self, path: str) -> str:
        return f"{path}:{self.line}:{self.column}: error: {self.message.value}"

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "column": self.column,
            "message": self.message.value,
        }


@dataclass
class FileReport:
    """Outcome of checking one walk entry."""

    path: str
    peeves: list[Peeve] = field(default_factory=list)
    skipped_reason: Optional[str] = None  # symbolic link, hidden directory, binary file
    depth: int = 0

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @property
    def is_clean(self) -> bool:
        return not self.peeves

    def shown_peeves(self, limit: int) -> list[Peeve]:
        """Peeves to print, in emission order, capped at ``limit``."""
        return self.peeves[:limit]

    def hidden_count(self, limit: int) -> int:
        return max(0, len(self.peeves) - limit)


@dataclass
class ScanSummary:
    """Totals over every report of a run."""

    files_checked: int = 0
    files_with_peeves: int = 0
    peeves: int = 0
    skipped: int = 0

    def add(self, report: FileReport) -> None:
        if report.skipped:
            self.skipped += 1
            return
        self.files_checked += 1
        if report.peeves:
            self.files_with_peeves += 1
            self.peeves += len(report.peeves)

    @property
    def is_clean(self) -> bool:
        return self.peeves == 0

    def to_dict(self) -> dict:
        return {
            "files_checked": self.files_checked,
            "files_with_peeves": self.files_with_peeves,
            "peeves": self.peeves,
            "skipped": self.skipped,
        }

    def __str__(self) -> str:
        parts = [f"Checked: {self.files_checked}"]
        if self.files_with_peeves:
            parts.append(f"With peeves: {self.files_with_peeves}")
        if self.peeves:
            parts.append(f"Peeves: {self.peeves}")
        if self.skipped:
            parts.append(f"Skipped: {self.skipped}")
        return " | ".join(parts)

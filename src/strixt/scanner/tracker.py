"""Per-line and per-file state carried through a scan pass.

A line's whitespace prefix is split into three consecutive runs, always in
this order:

- leading tabs: tabs from the very start of the line
- leading spaces: spaces directly after the leading tabs
- misc leading white: any further tabs/spaces still in the prefix

A tab after a leading space is therefore "misc", never a leading tab.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LineState:
    """Accumulator for the line currently being scanned."""

    start_offset: int = 0
    leading_tabs: int = 0
    leading_spaces: int = 0
    misc_leading_white: int = 0
    column: int = 1
    last_byte: Optional[int] = None

    def reset(self, offset: int) -> None:
        """Start a new line whose first byte is at buffer ``offset``."""
        self.start_offset = offset
        self.leading_tabs = 0
        self.leading_spaces = 0
        self.misc_leading_white = 0
        self.column = 1
        self.last_byte = None

    def offset_on_line(self, offset: int) -> int:
        return offset - self.start_offset

    @property
    def leading_white(self) -> int:
        return self.leading_tabs + self.leading_spaces + self.misc_leading_white

    @property
    def width(self) -> int:
        """Rendered width of the line so far, tabs expanded."""
        return self.column - 1

    def add_tab(self, offset_on_line: int) -> bool:
        """Classify a tab byte.

        Returns True when the tab extends the run of leading tabs, False
        when it follows something other than leading tabs.
        """
        if offset_on_line == self.leading_tabs:
            self.leading_tabs += 1
            return True
        if offset_on_line == self.leading_tabs + self.leading_spaces:
            self.misc_leading_white += 1
        return False

    def add_space(self, offset_on_line: int) -> None:
        if offset_on_line == self.leading_tabs + self.leading_spaces:
            self.leading_spaces += 1
        elif offset_on_line == self.leading_white:
            self.misc_leading_white += 1

    def advance(self, width: int) -> None:
        self.column += width

    def is_blank(self, length: int) -> bool:
        """A line is blank when all ``length`` bytes are leading whitespace."""
        return length == self.leading_white


@dataclass
class FileState:
    """State that spans lines within one file."""

    line: int = 0
    consecutive_blank_lines: int = 0
    had_nonblank_line: bool = False
    at_line_start: bool = True

    def start_line(self) -> None:
        self.line += 1
        self.at_line_start = False

    def blank_line(self) -> None:
        self.consecutive_blank_lines += 1

    def nonblank_line(self) -> None:
        self.consecutive_blank_lines = 0
        self.had_nonblank_line = True

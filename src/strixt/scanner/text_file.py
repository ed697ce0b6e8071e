"""Single-pass scanner turning a text file's bytes into peeves.

Usage:
    peeves = scan(data, tabs_allowed=True)

    # Or, keeping the scanner around for inspection:
    scanner = TextFileScanner(tabs_allowed=False)
    peeves = scanner.scan(data)

The scanner never performs I/O and never raises; every byte buffer yields a
(possibly empty) list of peeves in the order they were discovered.
"""

from strixt.models import ByteClass, Peeve, PeeveMessage
from strixt.scanner.classifier import classify_byte, column_width, is_whitespace, peeve_for
from strixt.scanner.tracker import FileState, LineState


MAX_LINE_WIDTH = 79
MAX_CONSECUTIVE_BLANK_LINES = 2


class PeeveList(list):
    """Ordered, append-only list of peeves."""

    def emit(self, line: int, column: int, message: PeeveMessage) -> None:
        self.append(Peeve(line, column, message))


class TextFileScanner:
    """Scans one byte buffer, carrying line and file state forward."""

    def __init__(self, tabs_allowed: bool = False):
        self.tabs_allowed = tabs_allowed
        self._reset()

    def _reset(self) -> None:
        self.peeves = PeeveList()
        self.line = LineState()
        self.file = FileState()

    def scan(self, data: bytes) -> list[Peeve]:
        """Scan ``data`` from scratch and return its peeves."""
        self._reset()

        for offset, byte in enumerate(data):
            if self.file.at_line_start:
                self.line.reset(offset)
                self.file.start_line()
            self._scan_byte(offset, byte)

        if data and data[-1] != 0x0A:
            self._end_of_line(len(data) - self.line.start_offset)
        self._end_of_file(data)

        return list(self.peeves)

    def _scan_byte(self, offset: int, byte: int) -> None:
        line = self.line
        offset_on_line = line.offset_on_line(offset)
        byte_class = classify_byte(byte)

        message = peeve_for(byte_class)
        if message is not None:
            self.peeves.emit(self.file.line, line.column, message)

        if byte_class is ByteClass.NEWLINE:
            self._end_of_line(offset_on_line)
            self.file.at_line_start = True
            return

        if byte_class is ByteClass.TAB:
            self._scan_tab(offset_on_line)
        elif byte_class is ByteClass.SPACE:
            line.add_space(offset_on_line)

        line.advance(column_width(byte_class, line.column))
        line.last_byte = byte

    def _scan_tab(self, offset_on_line: int) -> None:
        if not self.tabs_allowed:
            self.peeves.emit(self.file.line, self.line.column, PeeveMessage.TABS_NOT_ALLOWED)
        leading = self.line.add_tab(offset_on_line)
        if not leading and self.tabs_allowed:
            self.peeves.emit(self.file.line, self.line.column, PeeveMessage.TAB_FOR_ALIGNMENT)

    def _end_of_line(self, length: int) -> None:
        """Check a finished line of ``length`` bytes, LF excluded.

        Every peeve here sits at the column just past the last character.
        """
        line = self.line
        state = self.file
        here = (state.line, line.column)
        blank = line.is_blank(length)

        if blank:
            if not state.had_nonblank_line and state.consecutive_blank_lines == 0:
                self.peeves.emit(*here, PeeveMessage.BLANK_LINE_AT_START)
            elif state.consecutive_blank_lines > MAX_CONSECUTIVE_BLANK_LINES:
                self.peeves.emit(*here, PeeveMessage.TOO_MANY_BLANK_LINES)
            state.blank_line()
        else:
            state.nonblank_line()

        if line.width > MAX_LINE_WIDTH:
            self.peeves.emit(*here, PeeveMessage.LINE_TOO_LONG)

        if blank and length > 0:
            self.peeves.emit(*here, PeeveMessage.WHITESPACE_ON_BLANK_LINE)
        elif not blank and line.last_byte is not None and is_whitespace(line.last_byte):
            self.peeves.emit(*here, PeeveMessage.WHITESPACE_AT_END_OF_LINE)

    def _end_of_file(self, data: bytes) -> None:
        if not data:
            return
        here = (self.file.line, self.line.column)
        if self.file.consecutive_blank_lines > 0:
            self.peeves.emit(*here, PeeveMessage.BLANK_LINE_AT_END)
        if data[-1] != 0x0A:
            self.peeves.emit(*here, PeeveMessage.NO_NEWLINE_AT_END)


def scan(data: bytes, tabs_allowed: bool = False) -> list[Peeve]:
    """Scan a byte buffer and return its peeves in discovery order."""
    return TextFileScanner(tabs_allowed=tabs_allowed).scan(data)

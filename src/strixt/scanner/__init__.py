"""Byte-level style scanner for strixt."""

from .classifier import TAB_STOP, classify_byte, column_width, tab_width
from .text_file import (
    MAX_CONSECUTIVE_BLANK_LINES,
    MAX_LINE_WIDTH,
    PeeveList,
    TextFileScanner,
    scan,
)
from .tracker import FileState, LineState

__all__ = [
    "FileState",
    "LineState",
    "MAX_CONSECUTIVE_BLANK_LINES",
    "MAX_LINE_WIDTH",
    "PeeveList",
    "TAB_STOP",
    "TextFileScanner",
    "classify_byte",
    "column_width",
    "scan",
    "tab_width",
]

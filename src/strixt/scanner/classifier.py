"""Byte classification and column arithmetic."""

from typing import Optional

from strixt.models import ByteClass, PeeveMessage


TAB_STOP = 8

TAB = 0x09
NEWLINE = 0x0A
FORM_FEED = 0x0C
CARRIAGE_RETURN = 0x0D
SPACE = 0x20
DEL = 0x7F


def classify_byte(byte: int) -> ByteClass:
    """Map one byte to its category."""
    if byte == TAB:
        return ByteClass.TAB
    if byte == NEWLINE:
        return ByteClass.NEWLINE
    if byte == FORM_FEED:
        return ByteClass.FORM_FEED
    if byte == CARRIAGE_RETURN:
        return ByteClass.CARRIAGE_RETURN
    if byte < SPACE or byte == DEL:
        return ByteClass.CONTROL
    if byte == SPACE:
        return ByteClass.SPACE
    if byte < DEL:
        return ByteClass.VISIBLE
    return ByteClass.HIGH_BIT


# Classes that are a violation wherever they appear
BYTE_CLASS_PEEVES: dict[ByteClass, PeeveMessage] = {
    ByteClass.CONTROL: PeeveMessage.ASCII_CONTROL,
    ByteClass.FORM_FEED: PeeveMessage.ASCII_FORM_FEED,
    ByteClass.CARRIAGE_RETURN: PeeveMessage.CARRIAGE_RETURN,
}


def peeve_for(byte_class: ByteClass) -> Optional[PeeveMessage]:
    return BYTE_CLASS_PEEVES.get(byte_class)


def tab_width(column: int) -> int:
    """Columns a tab at 1-based ``column`` occupies up to the next tab stop."""
    return TAB_STOP - ((column - 1) % TAB_STOP)


def column_width(byte_class: ByteClass, column: int) -> int:
    if byte_class is ByteClass.TAB:
        return tab_width(column)
    return 1


def is_whitespace(byte: int) -> bool:
    return byte == TAB or byte == SPACE

"""Data models for strixt."""

from .schemas import (
    ByteClass,
    FileReport,
    Peeve,
    PeeveMessage,
    ScanSummary,
)

__all__ = [
    "ByteClass",
    "FileReport",
    "Peeve",
    "PeeveMessage",
    "ScanSummary",
]

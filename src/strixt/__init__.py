"""strixt - whitespace and formatting style checker."""

__version__ = "0.1.0"

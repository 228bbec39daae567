"""Align whitespace-separated columns, right-justifying numbers."""

from columnize.errors import ColumnizeError, ConfigurationError, InputReadError, PhaseError
from columnize.process import Columnizer, columnize
from columnize.settings import Justification, Settings, Strategy

__all__ = [
    "ColumnizeError",
    "Columnizer",
    "ConfigurationError",
    "InputReadError",
    "Justification",
    "PhaseError",
    "Settings",
    "Strategy",
    "columnize",
]

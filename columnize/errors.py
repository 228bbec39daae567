"""Exception types raised by columnize."""


class ColumnizeError(Exception):
    """Base class for every error columnize raises on purpose."""


class ConfigurationError(ColumnizeError, ValueError):
    """Settings that cannot be used, rejected before any input is read."""


class InputReadError(ColumnizeError):
    """The input stream failed while lines were still being read."""


class PhaseError(ColumnizeError, RuntimeError):
    """An operation was attempted after processing already finished."""

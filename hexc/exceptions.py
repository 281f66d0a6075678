"""
Custom exceptions for hexc.
"""


class HexcError(Exception):
    """Base exception for all hexc errors."""
    pass


class UsageError(HexcError):
    """Exception raised for wrong command-line usage (argument count, bad option values)."""
    pass


class ConfigError(HexcError):
    """Exception raised for invalid dump options or color configuration."""
    pass


class SourceError(HexcError):
    """Exception raised when the input file cannot be opened, stat'ed or read."""
    pass


class RangeError(HexcError):
    """Exception raised when the start offset or byte limit falls outside the file."""
    pass

"""
hexc - colored hex dumping utility

Renders files as an offset column, a grid of byte values (hex or decimal)
and an optional text listing, with bytes colored by category.
"""

from .categories import ByteCategory, classify, listing_char
from .config import DumpConfig, ColorConfig
from .models import Span, SourceInfo
from .source import load_source
from .hex_dump import HexDumper, render
from .formatters import SpanFormatter
from .exceptions import HexcError, UsageError, ConfigError, SourceError, RangeError
from .logging_config import LoggingManager, setup_logging, get_logger

__all__ = [
    # Classification
    'ByteCategory',
    'classify',
    'listing_char',
    # Configuration
    'DumpConfig',
    'ColorConfig',
    # Models
    'Span',
    'SourceInfo',
    'load_source',
    # Rendering
    'HexDumper',
    'render',
    'SpanFormatter',
    # Exceptions
    'HexcError',
    'UsageError',
    'ConfigError',
    'SourceError',
    'RangeError',
    # Logging
    'LoggingManager',
    'setup_logging',
    'get_logger',
]

__version__ = '1.0.0'

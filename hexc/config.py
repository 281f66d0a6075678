"""
Configuration dataclasses for hexc.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import ClassVar

from .categories import ByteCategory
from .exceptions import ConfigError


@dataclass(frozen=True)
class DumpConfig:
    """
    Options controlling a single dump.

    Attributes:
        start: Byte offset into the file where the dump begins
        width: Bytes per row (1 to MAX_WIDTH)
        decimal: Render offsets and bytes in decimal instead of hex
        limit: Maximum number of bytes to render (0 = no limit)
        text: Show the text listing next to the byte grid
        verbose: Print a metadata header before the dump
        legend: Print the color legend before the dump
        compat: Render full rows with the original hexc bound of width - 1 bytes
    """
    start: int = 0
    width: int = 16
    decimal: bool = False
    limit: int = 0
    text: bool = False
    verbose: bool = False
    legend: bool = False
    compat: bool = False

    MAX_WIDTH: ClassVar[int] = 65536

    def __post_init__(self):
        if not 1 <= self.width <= self.MAX_WIDTH:
            raise ConfigError(f"Width must be between 1 and {self.MAX_WIDTH} bytes. Got: {self.width}")
        if self.start < 0:
            raise ConfigError(f"Start position must not be negative. Got: {self.start}")
        if self.limit < 0:
            raise ConfigError(f"Limit must not be negative (0 = no limit). Got: {self.limit}")

    @property
    def column_width(self) -> int:
        """Digits in one formatted byte."""
        return 3 if self.decimal else 2

    @property
    def byte_format(self) -> str:
        return '03d' if self.decimal else '02x'

    @property
    def base_suffix(self) -> str:
        return 'd' if self.decimal else 'h'


@dataclass
class ColorConfig:
    """Color names for each byte category, plus a master switch."""
    punctuation: str = 'on_yellow'
    digit: str = 'magenta'
    newline: str = 'on_red'
    control: str = 'on_blue'
    printable: str = 'green'
    error: str = 'red'
    enabled: bool = True

    def __post_init__(self):
        """Validate color names against the known ANSI styles."""
        from .formatters import ANSI_STYLES

        if not isinstance(self.enabled, bool):
            raise ConfigError(f"'enabled' must be true or false. Got: {self.enabled!r}")

        for f in fields(self):
            if f.name == 'enabled':
                continue
            value = getattr(self, f.name)
            if not isinstance(value, str) or value not in ANSI_STYLES:
                raise ConfigError(
                    f"Unknown color {value!r} for {f.name}. "
                    f"Choose from: {', '.join(sorted(ANSI_STYLES))}"
                )

    def color_for(self, category: ByteCategory) -> str:
        """Get the color name configured for a byte category."""
        return getattr(self, category.value)

    @classmethod
    def from_json(cls, path: str | Path) -> 'ColorConfig':
        """Load ColorConfig from JSON file, ignoring keys starting with '_'."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Color config file not found: {path}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read color config {path}: {e.strerror or e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(f"Color config {path} is not valid UTF-8: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Color config in {path} must be a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = [k for k in data if not k.startswith('_') and k not in known]
        if unknown:
            raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

        return cls(**{k: v for k, v in data.items() if not k.startswith('_')})

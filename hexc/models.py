"""
Data models for hexc dumps.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import NamedTuple, Optional

from .categories import ByteCategory


class Span(NamedTuple):
    """A piece of output text, tagged with a byte category when it can be colored."""
    text: str
    category: Optional[ByteCategory] = None


@dataclass(frozen=True)
class SourceInfo:
    """Bytes of the file being dumped plus its metadata."""
    name: str
    size: int
    mtime: datetime
    data: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, data: bytes, name: str = '<bytes>', mtime: Optional[datetime] = None) -> 'SourceInfo':
        """Wrap an in-memory buffer, using the current time when no mtime is given."""
        return cls(name=name, size=len(data), mtime=mtime or datetime.now(), data=bytes(data))

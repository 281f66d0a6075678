"""
Colored hex/decimal dump renderer.

The renderer produces lines of category-tagged spans and never writes
anything itself; see formatters.SpanFormatter for turning spans into
terminal output.
"""

from typing import Iterator, List

from .categories import ByteCategory, classify, listing_char
from .config import DumpConfig
from .exceptions import RangeError
from .logging_config import get_logger
from .models import SourceInfo, Span

logger = get_logger('hex_dump')

Line = List[Span]


class HexDumper:
    """Offset column, byte grid and optional text listing, one row per line."""

    LEGEND_SAMPLES = (
        (ByteCategory.PUNCTUATION, 'punctuation'),
        (ByteCategory.DIGIT, 'digit'),
        (ByteCategory.NEWLINE_CONTROL, 'newline'),
        (ByteCategory.OTHER_CONTROL, 'control'),
        (ByteCategory.PRINTABLE, 'printable'),
    )

    def __init__(self, config: DumpConfig):
        """
        Initialize HexDumper.

        Args:
            config: Validated dump options
        """
        self.config = config

    def render(self, source: SourceInfo) -> Iterator[Line]:
        """
        Render a dump of source as lines of spans.

        Range checks run before the iterator is returned, so on error no
        line has been produced.

        Args:
            source: File bytes and metadata

        Returns:
            Iterator over output lines (lists of Span, without line breaks)

        Raises:
            RangeError: If the start offset or limit lies outside the data
        """
        view = self._select(source.data)
        logger.debug(f"Rendering {len(view)} of {source.size} bytes from {source.name}")
        return self._lines(source, view)

    def _select(self, data: bytes) -> memoryview:
        """Apply start offset and limit, checking both against the data."""
        start, limit = self.config.start, self.config.limit

        if start > 0 and start >= len(data):
            logger.warning(f"Start {start} is beyond end of data ({len(data)} bytes)")
            raise RangeError("start position beyond end of file")

        view = memoryview(data)[start:]
        if limit > 0:
            if limit > len(view):
                logger.warning(f"Limit {limit} exceeds {len(view)} available bytes")
                raise RangeError("limit exceeds available bytes")
            view = view[:limit]
        return view

    def _lines(self, source: SourceInfo, view: memoryview) -> Iterator[Line]:
        config = self.config
        width = config.width

        if config.verbose:
            yield self.header(source, len(view))
        if config.legend:
            yield self.legend()

        full_rows, remainder = divmod(len(view), width)
        # Original hexc stopped one byte short of each full row
        shown = width - 1 if config.compat else width

        for row in range(full_rows):
            begin = row * width
            yield self._row(begin, view[begin:begin + shown], padding=0)

        if remainder:
            begin = full_rows * width
            yield self._row(begin, view[begin:], padding=shown - remainder)

    def _row(self, begin: int, chunk: memoryview, padding: int) -> Line:
        """Build one row: offset label, byte cells, padding groups, optional listing."""
        config = self.config
        line = [Span(self.format_offset(config.start + begin) + '\t')]

        for byte in chunk:
            line.append(Span(format(byte, config.byte_format), classify(byte)))
            line.append(Span(' '))

        if padding > 0:
            line.append(Span(' ' * (config.column_width + 1) * padding))

        if config.text:
            line.append(Span('\t'))
            line.extend(Span(listing_char(byte), classify(byte)) for byte in chunk)

        return line

    def format_offset(self, offset: int) -> str:
        """Six-digit zero-padded offset with its base suffix, e.g. 000010h."""
        base = 'd' if self.config.decimal else 'x'
        return f"{offset:06{base}}{self.config.base_suffix}"

    @staticmethod
    def header(source: SourceInfo, effective_length: int) -> Line:
        """Metadata line shown in verbose mode."""
        return [Span(
            f"{source.mtime:%Y-%m-%d %H:%M:%S}, {source.name}, "
            f"{source.size} bytes, showing {effective_length}"
        )]

    @classmethod
    def legend(cls) -> Line:
        """One line with a sample span in each category's color."""
        line = [Span('Legend:')]
        for category, label in cls.LEGEND_SAMPLES:
            line.append(Span(' '))
            line.append(Span(label, category))
        return line


def render(source: SourceInfo, config: DumpConfig) -> Iterator[Line]:
    """
    Render a dump of source with the given options.

    Convenience wrapper around HexDumper.render().
    """
    return HexDumper(config).render(source)

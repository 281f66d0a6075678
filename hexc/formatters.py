"""
Terminal formatting of rendered dump lines.
"""

from typing import Iterable, Optional, TextIO

from .categories import ByteCategory
from .config import ColorConfig
from .models import Span


def _build_styles() -> dict[str, str]:
    """ANSI escape sequences by color name (foreground, bright_ and on_ variants)."""
    names = ['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']
    styles = {'default': '', 'bold': '\033[1m'}
    for i, name in enumerate(names):
        styles[name] = f'\033[{30 + i}m'
        styles[f'bright_{name}'] = f'\033[{90 + i}m'
        styles[f'on_{name}'] = f'\033[{40 + i}m'
    return styles


ANSI_STYLES = _build_styles()
RESET = '\033[0m'


class SpanFormatter:
    """Turns category-tagged spans into (optionally) ANSI-colored text."""

    def __init__(self, colors: Optional[ColorConfig] = None):
        """
        Initialize SpanFormatter.

        Args:
            colors: Color configuration (defaults to ColorConfig())
        """
        self.colors = colors or ColorConfig()
        self._styles = {
            category: ANSI_STYLES[self.colors.color_for(category)]
            for category in ByteCategory
        }

    def _paint(self, text: str, style: str) -> str:
        if not self.colors.enabled or not style:
            return text
        return f'{style}{text}{RESET}'

    def format_span(self, span: Span) -> str:
        """Format a single span, coloring it when it carries a category."""
        if span.category is None:
            return span.text
        return self._paint(span.text, self._styles[span.category])

    def format_line(self, spans: Iterable[Span]) -> str:
        """Format a whole line of spans (no line break added)."""
        return ''.join(self.format_span(span) for span in spans)

    def write(self, lines: Iterable[Iterable[Span]], stream: TextIO) -> int:
        """
        Write lines to stream as they are produced, each ending in a line break.

        Args:
            lines: Iterable of span lines, typically from HexDumper.render()
            stream: Text stream to write to

        Returns:
            Number of lines written
        """
        count = 0
        for spans in lines:
            stream.write(self.format_line(spans) + '\n')
            count += 1
        return count

    def format_error(self, message: str) -> str:
        """Error message line, in the error color when colors are enabled."""
        return self._paint(f'Error: {message}', ANSI_STYLES[self.colors.error])

"""Shared fixtures for hexc tests."""
from datetime import datetime

import pytest

from hexc.logging_config import LoggingManager
from hexc.models import SourceInfo


@pytest.fixture
def make_source():
    """Build a SourceInfo from raw bytes with a fixed modification time."""
    def _make(data: bytes, name: str = 'sample.bin') -> SourceInfo:
        return SourceInfo.from_bytes(data, name=name, mtime=datetime(2024, 5, 17, 12, 30, 0))
    return _make


@pytest.fixture
def sample_file(tmp_path):
    """Write an 18-byte file and return its path."""
    path = tmp_path / 'sample.bin'
    path.write_bytes(b'Hello, world!\n0123')
    return path


@pytest.fixture
def row_text():
    """Join the text of a rendered line, ignoring categories."""
    def _text(line) -> str:
        return ''.join(span.text for span in line)
    return _text


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop hexc handlers and module levels left behind by main()."""
    yield
    LoggingManager.setup('NONE')

"""
Loading of the file to be dumped.
"""

from datetime import datetime
from pathlib import Path

from .exceptions import SourceError
from .logging_config import get_logger
from .models import SourceInfo

logger = get_logger('source')


def load_source(path: str | Path) -> SourceInfo:
    """
    Read a whole file into memory together with its metadata.

    Args:
        path: Path of the file to dump

    Returns:
        SourceInfo with the file's base name, size, modification time and bytes

    Raises:
        SourceError: If the file cannot be stat'ed, opened or read
    """
    path = Path(path)

    try:
        stats = path.stat()
    except OSError as e:
        raise SourceError(f"Cannot stat {path}: {e.strerror or e}") from e

    if path.is_dir():
        raise SourceError(f"{path} is a directory")

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise SourceError(f"Cannot read {path}: {e.strerror or e}") from e

    logger.debug(f"Read {len(data)} bytes from {path}")

    return SourceInfo(
        name=path.name,
        size=stats.st_size,
        mtime=datetime.fromtimestamp(stats.st_mtime),
        data=data,
    )

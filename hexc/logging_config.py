"""
Logging configuration for the hexc package.

All hexc loggers live under the 'hexc' namespace and write to stderr, so
log output never mixes with the dump on stdout.
"""

import logging
import sys
from typing import Iterable, Optional

ROOT_LOGGER = 'hexc'
LOG_FORMAT = '%(levelname)s [%(name)s] %(message)s'
LEVEL_NAMES = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'NONE']

# Above CRITICAL, so nothing passes
SILENT = logging.CRITICAL + 1


class LevelColorFormatter(logging.Formatter):
    """Formatter that paints the level name using the same ANSI codes as the dump."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }

    def __init__(self, use_color: bool = True):
        super().__init__(LOG_FORMAT)
        self.use_color = use_color

    def formatMessage(self, record):
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_color else None
        if not color:
            return super().formatMessage(record)
        # Copy so other handlers still see the plain level name
        painted = logging.makeLogRecord(record.__dict__)
        painted.levelname = f'{color}{record.levelname}\033[0m'
        return super().formatMessage(painted)


def _level(name: str) -> int:
    name = name.upper()
    if name == 'NONE':
        return SILENT
    return logging.getLevelName(name) if name in LEVEL_NAMES else logging.WARNING


class LoggingManager:
    """Installs the hexc stderr handler and per-module levels."""

    # Modules whose level was set by the last setup() call
    _module_loggers: list = []

    @classmethod
    def setup(cls, level: str = 'WARNING', debug_modules: Optional[Iterable[str]] = None,
              use_color: bool = True):
        """
        Configure the hexc loggers, replacing any earlier configuration.

        Args:
            level: Level for all hexc modules (DEBUG, INFO, WARNING, ERROR, CRITICAL, NONE)
            debug_modules: Module names logged at DEBUG regardless of level,
                e.g. ['source', 'hex_dump']. Ignored when level is NONE.
            use_color: Color the level names
        """
        root = logging.getLogger(ROOT_LOGGER)
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for logger in cls._module_loggers:
            logger.setLevel(logging.NOTSET)
        cls._module_loggers = []

        root.setLevel(_level(level))
        if root.level == SILENT:
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(LevelColorFormatter(use_color=use_color))
        root.addHandler(handler)

        for module in debug_modules or ():
            logger = cls.get_logger(module)
            logger.setLevel(logging.DEBUG)
            cls._module_loggers.append(logger)

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Logger for a hexc module, e.g. get_logger('source') -> 'hexc.source'."""
        return logging.getLogger(f'{ROOT_LOGGER}.{name}')


def setup_logging(level: str = 'WARNING', debug_modules: Optional[Iterable[str]] = None,
                  use_color: bool = True):
    """Shortcut for LoggingManager.setup()."""
    LoggingManager.setup(level, debug_modules, use_color)


def get_logger(name: str) -> logging.Logger:
    """Shortcut for LoggingManager.get_logger()."""
    return LoggingManager.get_logger(name)

"""
Centralized logging infrastructure for the Space Invaders project.

Usage:
    from invaders.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Level 2 started")
    logger.debug("Phase PLAYING -> PAUSED")
    logger.warning("High score not saved")

Configuration:
    Set LOG_LEVEL in invaders/config.py (or --log-level on the CLI) to control verbosity:
    - DEBUG: Phase transitions and per-event detail
    - INFO: Level starts, game over (default)
    - WARNING: Persistence/audio failures only
    - ERROR: Errors only
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class LogLevel(Enum):
    """Log levels for configuration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


ROOT_LOGGER_NAME = 'invaders'

# Module-level state
_initialized = False
_log_dir: Optional[Path] = None
_file_handler: Optional[logging.FileHandler] = None


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, fmt: str, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        # Color the whole line; the record is shared with the file handler
        line = super().format(record)
        if not self.use_colors:
            return line
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        return f"{color}{line}{self.COLORS['RESET']}"


def setup_logging(
    log_dir: str = 'logs',
    level: LogLevel = LogLevel.INFO,
    console_output: bool = True,
    file_output: bool = True,
    log_filename: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Initialize the logging system.

    Args:
        log_dir: Directory for log files
        level: Minimum log level to capture
        console_output: Whether to output to console
        file_output: Whether to output to file
        log_filename: Custom log filename (default: invaders_YYYYMMDD_HHMMSS.log)
        force: Reconfigure even if logging was already initialized
            (module-level get_logger calls auto-initialize console-only)
    """
    global _initialized, _log_dir, _file_handler

    if _initialized and not force:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level.value)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()
    _file_handler = None

    # Console handler with colors
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_fmt = ColoredFormatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            use_colors=True
        )
        console_handler.setFormatter(console_fmt)
        root_logger.addHandler(console_handler)

    # File handler without colors
    if file_output:
        _log_dir = Path(log_dir)
        _log_dir.mkdir(parents=True, exist_ok=True)

        if log_filename is None:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_filename = f'invaders_{timestamp}.log'

        log_path = _log_dir / log_filename
        _file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        _file_handler.setLevel(logging.DEBUG)  # Capture everything in file
        file_fmt = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        )
        _file_handler.setFormatter(file_fmt)
        root_logger.addHandler(_file_handler)

    _initialized = True
    root_logger.debug(f"Logging initialized (level={level.name}, file={file_output})")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance configured with project settings

    Example:
        logger = get_logger(__name__)
        logger.info("Message")
    """
    # Auto-initialize console-only if main.py hasn't configured logging yet
    if not _initialized:
        setup_logging(file_output=False)

    # Strip the package prefix for cleaner names
    if name.startswith(ROOT_LOGGER_NAME + '.'):
        name = name[len(ROOT_LOGGER_NAME) + 1:]

    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def get_log_path() -> Optional[Path]:
    """Get the current log file path."""
    if _file_handler is not None:
        return Path(_file_handler.baseFilename)
    return None


def log_run_summary(score: int, level: int, high_score: int, reason: str) -> None:
    """
    Log the end of a run in a consistent format.

    Args:
        score: Final score
        level: Level reached
        high_score: High score after the run
        reason: Why the run ended ('game_over', 'quit', 'ticks')
    """
    logger = get_logger('run')
    metrics = [
        f"reason={reason}",
        f"score={score}",
        f"level={level}",
        f"high_score={high_score}",
    ]
    logger.info(" | ".join(metrics))

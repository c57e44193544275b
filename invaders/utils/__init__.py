"""Utility modules for the Space Invaders project."""

from .logger import get_logger, setup_logging, log_run_summary, LogLevel

__all__ = ['get_logger', 'setup_logging', 'log_run_summary', 'LogLevel']

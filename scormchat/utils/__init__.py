"""Shared utilities"""

from .logging import setup_logging, get_logger, CURRENT_TOPIC

__all__ = ['setup_logging', 'get_logger', 'CURRENT_TOPIC']

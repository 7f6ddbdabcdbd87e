"""
Utilities package - Common utilities for the Binary LEDs module
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .once_in_ms import OnceInMs

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'OnceInMs'
]

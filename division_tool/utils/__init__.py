"""
Utilidades comunes de la herramienta
"""

from .config import Config
from .logger import setup_logger, StructuredLogger
from .messages import get_message, SUPPORTED_LANGUAGES

__all__ = [
    'Config',
    'setup_logger',
    'StructuredLogger',
    'get_message',
    'SUPPORTED_LANGUAGES'
]

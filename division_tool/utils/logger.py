"""
Sistema de logging estructurado de la herramienta
Implementa logging consistente con contexto, en texto legible o JSON
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger.json import JsonFormatter


TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
TEXT_DATEFMT = '%Y-%m-%d %H:%M:%S'


class CustomJsonFormatter(JsonFormatter):
    """
    Formateador JSON personalizado para logs estructurados
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        """
        Añade campos personalizados al log record
        """
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        # Añadir timestamp ISO
        if not log_record.get('timestamp'):
            log_record['timestamp'] = datetime.now(timezone.utc).isoformat()

        log_record['level'] = record.levelname

        # Añadir información del servicio
        log_record['service'] = getattr(record, 'service', 'unknown-service')
        log_record['version'] = getattr(record, 'version', '1.0.0')

        # Añadir información de contexto si existe
        if hasattr(record, 'context'):
            log_record['context'] = record.context


class StructuredLogger:
    """
    Logger estructurado con contexto

    Los registros se escriben en stderr para no mezclarse con la salida
    de consola del programa.
    """

    def __init__(self, name: str, service_name: str = 'division-tool', version: str = '1.0.0',
                 level: str = 'WARNING', json_format: bool = False):
        self.logger = logging.getLogger(name)
        self.service_name = service_name
        self.version = version
        self._setup_logger(level, json_format)

    def _setup_logger(self, level: str, json_format: bool):
        """
        Configura el logger con formateo estructurado
        """
        self.logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

        # Evitar duplicar handlers si ya está configurado
        if self.logger.handlers:
            return

        handler = logging.StreamHandler(sys.stderr)

        if json_format:
            formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
        else:
            formatter = logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT)

        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

        # Prevenir propagación a loggers padre
        self.logger.propagate = False

    def _log_with_context(self, level: int, msg: str, context: Optional[Dict[str, Any]] = None,
                          exc_info: bool = False):
        """
        Registra mensaje con contexto estructurado
        """
        extra = {
            'service': self.service_name,
            'version': self.version
        }

        if context:
            extra['context'] = context

        self.logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, msg: str, context: Optional[Dict[str, Any]] = None):
        """Log debug message"""
        self._log_with_context(logging.DEBUG, f"🔍 {msg}", context)

    def info(self, msg: str, context: Optional[Dict[str, Any]] = None):
        """Log info message"""
        self._log_with_context(logging.INFO, f"ℹ️ {msg}", context)

    def warning(self, msg: str, context: Optional[Dict[str, Any]] = None):
        """Log warning message"""
        self._log_with_context(logging.WARNING, f"⚠️ {msg}", context)

    def error(self, msg: str, context: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message"""
        self._log_with_context(logging.ERROR, f"❌ {msg}", context, exc_info=exc_info)

    def critical(self, msg: str, context: Optional[Dict[str, Any]] = None):
        """Log critical message"""
        self._log_with_context(logging.CRITICAL, f"🚨 {msg}", context)

    def success(self, msg: str, context: Optional[Dict[str, Any]] = None):
        """Log success message (info level)"""
        self._log_with_context(logging.INFO, f"✅ {msg}", context)

    def processing(self, msg: str, context: Optional[Dict[str, Any]] = None):
        """Log processing message (info level)"""
        self._log_with_context(logging.INFO, f"🔄 {msg}", context)


def setup_logger(name: str, service_name: str = 'division-tool', version: str = '1.0.0',
                 level: Optional[str] = None, json_format: Optional[bool] = None) -> StructuredLogger:
    """
    Factory function para crear logger estructurado

    Args:
        name: Nombre del logger (usualmente __name__)
        service_name: Nombre del servicio
        version: Versión del servicio
        level: Nivel de logging (por defecto el de la configuración)
        json_format: Formato JSON (por defecto el de la configuración)

    Returns:
        StructuredLogger: Logger configurado
    """
    if level is None or json_format is None:
        from .config import Config
        config = Config()
        level = level or config.LOG_LEVEL
        json_format = config.usa_logs_json() if json_format is None else json_format

    return StructuredLogger(name, service_name, version, level, json_format)

"""
Configuración centralizada de la herramienta de división
Maneja las variables de entorno y los valores por defecto de la aplicación
"""

import os
from dotenv import load_dotenv

from .messages import SUPPORTED_LANGUAGES

# Cargar variables de entorno
load_dotenv()

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
VALID_LOG_FORMATS = ('text', 'json')


class Config:
    """
    Clase de configuración centralizada que maneja todas las variables de entorno
    de la herramienta
    """

    def __init__(self):
        # Configuración de la aplicación
        self.APP_NAME = os.getenv('APP_NAME', 'division-tool')
        self.APP_VERSION = os.getenv('APP_VERSION', '1.0.0')
        self.ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

        # Configuración de logging
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()
        self.LOG_FORMAT = os.getenv('LOG_FORMAT', 'text').lower()

        # Idioma de los mensajes de consola
        self.APP_LANG = os.getenv('APP_LANG', 'en').lower()

        # Archivo de resultado
        self.RESULT_FILE_PATH = os.getenv('RESULT_FILE_PATH', 'result.txt')

        # Pausa antes de terminar (mantener abierta la consola)
        self.PAUSE_ON_EXIT = os.getenv('PAUSE_ON_EXIT', 'False').lower() == 'true'

        # Validar configuraciones críticas
        self._validar_configuracion()

    def _validar_configuracion(self):
        """
        Valida que las configuraciones críticas tengan valores soportados

        Raises:
            ValueError: Si alguna configuración no es válida
        """
        if self.LOG_LEVEL not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL inválido: {self.LOG_LEVEL}")

        if self.LOG_FORMAT not in VALID_LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT inválido: {self.LOG_FORMAT}")

        if self.APP_LANG not in SUPPORTED_LANGUAGES:
            raise ValueError(f"APP_LANG no soportado: {self.APP_LANG}")

        if not self.RESULT_FILE_PATH:
            raise ValueError("RESULT_FILE_PATH es requerido")

    def es_produccion(self) -> bool:
        """
        Determina si la aplicación está ejecutándose en producción

        Returns:
            bool: True si está en producción
        """
        return self.ENVIRONMENT.lower() == 'production'

    def usa_logs_json(self) -> bool:
        """Los logs son JSON en producción o si se pide explícitamente"""
        return self.es_produccion() or self.LOG_FORMAT == 'json'

    def get_configuracion_summary(self) -> dict:
        """
        Obtiene un resumen de la configuración

        Returns:
            dict: Resumen de configuración
        """
        return {
            'app_name': self.APP_NAME,
            'app_version': self.APP_VERSION,
            'environment': self.ENVIRONMENT,
            'log_level': self.LOG_LEVEL,
            'log_format': 'json' if self.usa_logs_json() else 'text',
            'language': self.APP_LANG,
            'result_file_path': self.RESULT_FILE_PATH,
            'pause_on_exit': self.PAUSE_ON_EXIT
        }

    def __repr__(self) -> str:
        return f"Config(app={self.APP_NAME}, env={self.ENVIRONMENT}, lang={self.APP_LANG})"

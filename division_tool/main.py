"""
Herramienta de división - punto de entrada de consola
Flujo: leer operandos → dividir → mostrar resultado → guardar archivo → mensaje final
"""

import os
import sys
from enum import Enum
from typing import Optional, TextIO

from .exceptions import DivisionByZeroError, DivisionToolError, InvalidFormatError, ResultFileError
from .services.division_calculator import DivisionCalculator
from .services.input_reader import InputReader
from .services.result_writer import ResultWriter
from .utils.config import Config
from .utils.logger import StructuredLogger, setup_logger
from .utils.messages import get_message, normalize_language


class RunOutcome(Enum):
    """Resultado final de una ejecución"""
    SUCCESS = 'success'
    INVALID_FORMAT = 'invalid_format'
    DIVISION_BY_ZERO = 'division_by_zero'
    IO_FAILURE = 'io_failure'
    UNEXPECTED = 'unexpected'


def _describe_error(error: Exception, lang: str) -> str:
    """Detalle localizado para excepciones propias, descripción original para el resto"""
    if isinstance(error, DivisionToolError):
        return error.localized_detail(lang)
    return str(error) or type(error).__name__


def run(config: Config, logger: StructuredLogger,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None) -> RunOutcome:
    """
    Ejecuta el flujo completo de la herramienta una vez

    Todos los errores se capturan aquí, una sola vez, y se convierten en un
    mensaje de consola. El mensaje final se muestra siempre.

    Args:
        config: Configuración de la aplicación
        logger: Logger estructurado
        input_stream: Entrada de texto (stdin por defecto)
        output_stream: Salida de texto (stdout por defecto)

    Returns:
        RunOutcome: Rama en la que terminó la ejecución
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout
    lang = config.APP_LANG

    def say(key: str, **kwargs):
        print(get_message(key, lang, **kwargs), file=output_stream)

    reader = InputReader(input_stream, output_stream, logger)
    calculator = DivisionCalculator(logger)
    writer = ResultWriter(config.RESULT_FILE_PATH, logger)

    outcome = RunOutcome.UNEXPECTED

    try:
        logger.processing("Iniciando ejecución", context=config.get_configuracion_summary())

        dividend = reader.read_operand(get_message('prompt_first', lang))
        divisor = reader.read_operand(get_message('prompt_second', lang))

        result = calculator.divide(dividend, divisor)
        say('result', result=result)

        path = writer.write_result(result)
        say('file_written', path=path)

        if config.PAUSE_ON_EXIT:
            # Mantener abierta la consola hasta que el usuario pulse Enter
            output_stream.flush()
            input_stream.readline()

        outcome = RunOutcome.SUCCESS

    except InvalidFormatError as e:
        outcome = RunOutcome.INVALID_FORMAT
        say('invalid_format', detail=_describe_error(e, lang))

    except DivisionByZeroError as e:
        outcome = RunOutcome.DIVISION_BY_ZERO
        say('division_by_zero', detail=_describe_error(e, lang))

    except ResultFileError as e:
        outcome = RunOutcome.IO_FAILURE
        say('io_failure', detail=_describe_error(e, lang))

    except Exception as e:
        outcome = RunOutcome.UNEXPECTED
        logger.error(f"Error inesperado: {str(e)}", exc_info=True)
        say('unexpected', detail=_describe_error(e, lang))

    finally:
        say('finished')
        output_stream.flush()
        logger.info("Ejecución terminada", context={'outcome': outcome.value})

    return outcome


def main() -> int:
    """
    Punto de entrada del script de consola ``division-tool``

    Returns:
        int: Código de salida, siempre 0
    """
    try:
        config = Config()
    except ValueError as e:
        # Sin configuración válida: idioma del entorno si es soportado, si no inglés
        lang = normalize_language(os.getenv('APP_LANG', ''))
        setup_logger(__name__, level='WARNING', json_format=False).critical(
            f"Configuración inválida: {str(e)}"
        )
        print(get_message('unexpected', lang, detail=str(e)))
        print(get_message('finished', lang))
        return 0

    logger = setup_logger(
        __name__,
        service_name=config.APP_NAME,
        version=config.APP_VERSION,
        level=config.LOG_LEVEL,
        json_format=config.usa_logs_json()
    )

    run(config, logger)
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Input Reader - Lectura y validación de operandos desde la consola
Responsable de mostrar el mensaje, leer una línea y convertirla a entero
"""

import re
from typing import TextIO

from ..exceptions import InputClosedError, InvalidFormatError, OperandOverflowError
from ..utils.logger import StructuredLogger
from .division_calculator import INT32_MAX, INT32_MIN

# Entero en base 10: signo opcional y dígitos ASCII, con espacios alrededor
INTEGER_PATTERN = re.compile(r'\s*[+-]?[0-9]+\s*', re.ASCII)

MAX_SIGNIFICANT_DIGITS = len(str(INT32_MAX))


def parse_operand(text: str) -> int:
    """
    Convierte un texto a entero con signo de 32 bits

    Args:
        text: Texto leído de la consola, sin fin de línea

    Returns:
        int: Valor entero

    Raises:
        InvalidFormatError: Si el texto no es un entero en base 10
        OperandOverflowError: Si el entero no cabe en 32 bits
    """
    if not INTEGER_PATTERN.fullmatch(text):
        raise InvalidFormatError(text)

    number = text.strip()
    sign = '-' if number[0] == '-' else ''
    digits = number.lstrip('+-').lstrip('0') or '0'

    # Sin ceros a la izquierda, más dígitos que INT32_MAX nunca caben en 32 bits
    if len(digits) > MAX_SIGNIFICANT_DIGITS:
        raise OperandOverflowError(sign + digits)

    value = int(sign + digits)
    if not INT32_MIN <= value <= INT32_MAX:
        raise OperandOverflowError(value)

    return value


class InputReader:
    """
    Lector de operandos desde un flujo de texto (stdin por defecto)
    """

    def __init__(self, input_stream: TextIO, output_stream: TextIO, logger: StructuredLogger):
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.logger = logger

    def read_line(self) -> str:
        """
        Lee una línea sin los caracteres de fin de línea

        Raises:
            InputClosedError: Si la entrada ya no tiene datos
        """
        line = self.input_stream.readline()
        if line == '':
            raise InputClosedError()
        return line.rstrip('\r\n')

    def read_operand(self, prompt: str) -> int:
        """
        Muestra el mensaje, lee una línea y la convierte a entero

        Args:
            prompt: Texto a mostrar antes de leer

        Returns:
            int: Operando leído
        """
        self.output_stream.write(prompt)
        self.output_stream.flush()

        text = self.read_line()

        try:
            value = parse_operand(text)
        except InvalidFormatError:
            self.logger.warning("Entrada con formato inválido", context={'input': text})
            raise
        except OperandOverflowError:
            self.logger.warning("Entrada fuera del rango de 32 bits", context={'input': text})
            raise

        self.logger.debug("Operando leído", context={'value': value})
        return value

"""
Jerarquía de excepciones de la herramienta de división

    DivisionToolError (base)
    ├── InvalidFormatError      - entrada que no es un entero
    ├── OperandOverflowError    - entero fuera del rango de 32 bits
    ├── InputClosedError        - no hay más líneas en la entrada
    ├── DivisionByZeroError     - divisor igual a cero
    ├── QuotientOverflowError   - cociente fuera del rango de 32 bits
    └── ResultFileError         - fallo de E/S al escribir el resultado

Cada excepción guarda un contexto (dict) y una clave de detalle que se usa
para mostrar el mensaje localizado en la consola.
"""

from typing import Any, Dict, Optional, Union

from .utils.messages import get_message


class DivisionToolError(Exception):
    """
    Excepción base de la herramienta
    """

    detail_key = ''

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def localized_detail(self, lang: str) -> str:
        """
        Devuelve el detalle del error en el idioma pedido

        Args:
            lang: Código de idioma

        Returns:
            str: Detalle localizado, o el mensaje original si no hay clave
        """
        if not self.detail_key:
            return self.message
        return get_message(self.detail_key, lang, **self.context)

    def __str__(self) -> str:
        return self.message


class InvalidFormatError(DivisionToolError):
    """El texto introducido no es un entero en base 10"""

    detail_key = 'detail_not_integer'

    def __init__(self, value: str):
        super().__init__(f"The input '{value}' is not a valid integer.", {'value': value})


class OperandOverflowError(DivisionToolError):
    """El valor (entero o sus dígitos en texto) no cabe en 32 bits"""

    detail_key = 'detail_operand_overflow'

    def __init__(self, value: Union[int, str]):
        super().__init__(
            f"The value {value} is outside the range of a 32-bit integer.",
            {'value': value}
        )


class InputClosedError(DivisionToolError):
    detail_key = 'detail_input_closed'

    def __init__(self):
        super().__init__("No more input is available.")


class DivisionByZeroError(DivisionToolError):
    """El divisor es cero"""

    detail_key = 'detail_zero_divisor'

    def __init__(self, dividend: int):
        super().__init__("Cannot divide by zero.", {'dividend': dividend})


class QuotientOverflowError(DivisionToolError):
    detail_key = 'detail_quotient_overflow'

    def __init__(self, dividend: int, divisor: int):
        super().__init__(
            f"The quotient of {dividend} / {divisor} is outside the range of a 32-bit integer.",
            {'dividend': dividend, 'divisor': divisor}
        )


class ResultFileError(DivisionToolError):
    """
    Fallo de E/S al escribir el archivo de resultado

    La excepción original queda encadenada (``raise ... from``).
    """

    detail_key = 'detail_write_failed'

    def __init__(self, path: str, reason: str = ''):
        super().__init__(
            f"Could not write to file {path}.",
            {'path': path, 'reason': reason}
        )

"""
Division Calculator - División entera con truncamiento hacia cero
Opera sobre enteros con signo de 32 bits
"""

from ..exceptions import DivisionByZeroError, QuotientOverflowError
from ..utils.logger import StructuredLogger

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def truncated_divide(dividend: int, divisor: int) -> int:
    """
    Divide dos enteros truncando hacia cero (7/2=3, -7/2=-3)

    El operador ``//`` de Python redondea hacia menos infinito, por eso se
    divide en valor absoluto y se aplica el signo después.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient


class DivisionCalculator:
    """
    Calculadora de división entera
    """

    def __init__(self, logger: StructuredLogger):
        self.logger = logger

    def divide(self, dividend: int, divisor: int) -> int:
        """
        Calcula el cociente truncado de dos enteros

        Args:
            dividend: Dividendo
            divisor: Divisor

        Returns:
            int: Cociente truncado hacia cero

        Raises:
            DivisionByZeroError: Si el divisor es cero
            QuotientOverflowError: Si el cociente no cabe en 32 bits
        """
        if divisor == 0:
            self.logger.warning("Intento de división por cero", context={'dividend': dividend})
            raise DivisionByZeroError(dividend)

        quotient = truncated_divide(dividend, divisor)

        # Único caso posible: INT32_MIN / -1
        if not INT32_MIN <= quotient <= INT32_MAX:
            self.logger.warning(
                "Cociente fuera del rango de 32 bits",
                context={'dividend': dividend, 'divisor': divisor}
            )
            raise QuotientOverflowError(dividend, divisor)

        self.logger.debug(
            "División calculada",
            context={'dividend': dividend, 'divisor': divisor, 'quotient': quotient}
        )
        return quotient

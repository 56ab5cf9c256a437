"""
Servicios de la herramienta: lectura, división y escritura del resultado
"""

from .input_reader import InputReader, parse_operand
from .division_calculator import DivisionCalculator, truncated_divide
from .result_writer import ResultWriter, format_result_content

__all__ = [
    'InputReader',
    'parse_operand',
    'DivisionCalculator',
    'truncated_divide',
    'ResultWriter',
    'format_result_content'
]

"""
Catálogo de mensajes de consola localizados
Los mensajes se buscan por clave e idioma, con inglés como respaldo
"""

from typing import Dict

DEFAULT_LANGUAGE = 'en'

SUPPORTED_LANGUAGES = ('en', 'es', 'ru')

MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        'prompt_first': 'Enter the first number: ',
        'prompt_second': 'Enter the second number: ',
        'result': 'Division result: {result}',
        'file_written': 'Result successfully written to file {path}.',
        'invalid_format': 'Error: Enter valid numbers. {detail}',
        'division_by_zero': 'Error: Division by zero. {detail}',
        'io_failure': 'File write error: {detail}',
        'unexpected': 'An unexpected error occurred: {detail}',
        'finished': 'Program finished.',
        # Detalles de las excepciones propias
        'detail_not_integer': "The input '{value}' is not a valid integer.",
        'detail_operand_overflow': 'The value {value} is outside the range of a 32-bit integer.',
        'detail_zero_divisor': 'Cannot divide by zero.',
        'detail_quotient_overflow': 'The quotient of {dividend} / {divisor} is outside the range of a 32-bit integer.',
        'detail_write_failed': 'Could not write to file {path}.',
        'detail_input_closed': 'No more input is available.',
    },
    'es': {
        'prompt_first': 'Introduce el primer número: ',
        'prompt_second': 'Introduce el segundo número: ',
        'result': 'Resultado de la división: {result}',
        'file_written': 'Resultado escrito correctamente en el archivo {path}.',
        'invalid_format': 'Error: Introduce números válidos. {detail}',
        'division_by_zero': 'Error: División por cero. {detail}',
        'io_failure': 'Error al escribir el archivo: {detail}',
        'unexpected': 'Ocurrió un error inesperado: {detail}',
        'finished': 'Programa finalizado.',
        'detail_not_integer': "La entrada '{value}' no es un número entero válido.",
        'detail_operand_overflow': 'El valor {value} está fuera del rango de un entero de 32 bits.',
        'detail_zero_divisor': 'No se puede dividir por cero.',
        'detail_quotient_overflow': 'El cociente de {dividend} / {divisor} está fuera del rango de un entero de 32 bits.',
        'detail_write_failed': 'No se pudo escribir el archivo {path}.',
        'detail_input_closed': 'No hay más datos de entrada.',
    },
    'ru': {
        'prompt_first': 'Введите первое число: ',
        'prompt_second': 'Введите второе число: ',
        'result': 'Результат деления: {result}',
        'file_written': 'Результат успешно записан в файл {path}.',
        'invalid_format': 'Ошибка: Введите корректные числа. {detail}',
        'division_by_zero': 'Ошибка: Деление на ноль. {detail}',
        'io_failure': 'Ошибка записи в файл: {detail}',
        'unexpected': 'Произошла непредвиденная ошибка: {detail}',
        'finished': 'Программа завершена.',
        'detail_not_integer': "Значение '{value}' не является целым числом.",
        'detail_operand_overflow': 'Значение {value} выходит за пределы 32-битного целого.',
        'detail_zero_divisor': 'Невозможно делить на ноль.',
        'detail_quotient_overflow': 'Частное {dividend} / {divisor} выходит за пределы 32-битного целого.',
        'detail_write_failed': 'Ошибка при записи в файл {path}.',
        'detail_input_closed': 'Входные данные закончились.',
    },
}


def normalize_language(lang: str) -> str:
    """Devuelve el código de idioma soportado, o el idioma por defecto"""
    code = (lang or '').lower()
    return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def get_message(key: str, lang: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    """
    Obtiene un mensaje localizado y lo formatea

    Args:
        key: Clave del mensaje
        lang: Código de idioma
        **kwargs: Valores para el formato del mensaje

    Returns:
        str: Mensaje formateado

    Raises:
        KeyError: Si la clave no existe en ningún idioma
    """
    catalog = MESSAGES[normalize_language(lang)]
    template = catalog.get(key)
    if template is None:
        # Respaldo en inglés
        template = MESSAGES[DEFAULT_LANGUAGE][key]
    return template.format(**kwargs)

"""
Result Writer - Persistencia del resultado en archivo de texto
El archivo se sobrescribe en cada ejecución correcta
"""

from ..exceptions import ResultFileError
from ..utils.logger import StructuredLogger

RESULT_FILE_TEMPLATE = 'Division result: {result}'


def format_result_content(result: int) -> str:
    """Contenido exacto del archivo de resultado"""
    return RESULT_FILE_TEMPLATE.format(result=result)


class ResultWriter:
    """
    Escritor del archivo de resultado
    """

    def __init__(self, path: str, logger: StructuredLogger):
        self.path = path
        self.logger = logger

    def write_result(self, result: int) -> str:
        """
        Crea o sobrescribe el archivo con el resultado

        Args:
            result: Cociente a guardar

        Returns:
            str: Ruta del archivo escrito

        Raises:
            ResultFileError: Si falla cualquier operación de E/S
        """
        content = format_result_content(result)

        try:
            with open(self.path, 'w', encoding='utf-8') as result_file:
                result_file.write(content)
        except OSError as e:
            self.logger.error(
                f"Error escribiendo archivo de resultado: {str(e)}",
                context={'path': self.path}
            )
            raise ResultFileError(self.path, str(e)) from e

        self.logger.success("Resultado guardado", context={'path': self.path, 'result': result})
        return self.path

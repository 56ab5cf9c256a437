"""
Herramienta de consola para dividir dos enteros y guardar el resultado
"""

__version__ = '1.0.0'

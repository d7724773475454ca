"""
Módulo core con la lógica principal de la calculadora.
Contiene el estado, el motor de cálculo y el formateo de números.
"""

from .calculator import (CalculatorEngine, CalculatorState, TOKENS,
                         format_number, parse_number)

__all__ = ['CalculatorEngine', 'CalculatorState', 'TOKENS',
           'format_number', 'parse_number']

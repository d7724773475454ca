"""
Módulo de aplicación.
Contiene la clase que conecta las pulsaciones con el motor de cálculo.
"""

from .calculator_app import CalculatorApp

__all__ = ['CalculatorApp']

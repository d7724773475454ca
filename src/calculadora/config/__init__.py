"""
Módulo de configuración de la calculadora.
Contiene las preferencias de formato y de feedback por voz.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']

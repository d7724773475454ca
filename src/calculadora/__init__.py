"""
calculadora - Calculadora de cuatro operaciones.

Motor de cálculo por pulsaciones (core), configuración (config), feedback
por voz (voice) y la aplicación que los une (app).

Uso:
    python -m calculadora 1 2 3 + 4 5 6 =        # Reproduce los botones
    python -m calculadora --sin-voz 5 0 %         # Sin feedback por voz
"""

__version__ = "1.0.0"

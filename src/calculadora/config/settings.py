"""
Configuración de la calculadora.

Este módulo centraliza las preferencias de formato del display y las
opciones del feedback por voz.
"""

# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Preferencias de la calculadora
# Responsabilidades:
#   - Formato del display (cifras significativas, texto de error)
#   - Preferencias de voz (volumen, velocidad, idioma)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Cifras significativas para resultados con decimales
        - Texto mostrado al dividir por cero ("Error", "Erreur"...)
        - Feedback por voz configurable (volumen, velocidad, idioma)
    """

    def __init__(self, **overrides):
        """
        Inicializa configuración con valores por defecto.

        Args:
            **overrides: Valores que reemplazan a los de por defecto
                (ej: CalculatorConfig(error_text="Erreur"))

        Raises:
            AttributeError: Si se pasa una opción que no existe
            ValueError: Si significant_digits no es un entero positivo
        """
        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.significant_digits = 8         # Cifras de los números no enteros
        self.error_text = "Error"           # Texto al dividir por cero

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Opción de configuración desconocida: {name}")
            setattr(self, name, value)

        if (not isinstance(self.significant_digits, int)
                or isinstance(self.significant_digits, bool)
                or self.significant_digits < 1):
            raise ValueError("significant_digits debe ser un entero mayor o igual que 1, "
                             f"no {self.significant_digits!r}")

    def describe(self):
        """
        Resume la configuración activa para mostrarla al arrancar.

        Returns:
            list[str]: Líneas de estado
        """
        lines = [f"✓ Precisión: {self.significant_digits} cifras significativas"]
        if self.voice_enabled:
            lines.append(f"✓ Feedback por voz ACTIVADO ({self.voice_language})")
        else:
            lines.append("⚠ Feedback por voz DESACTIVADO")
        return lines

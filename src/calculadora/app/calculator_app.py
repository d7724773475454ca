"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

from calculadora.core.calculator import CalculatorEngine, EQUALS, TOKENS
from calculadora.voice.feedback import VoiceFeedback
from calculadora.config.settings import CalculatorConfig


# ============================================================================
class CalculatorApp:
    """
    Aplicación de calculadora.

    Arquitectura:
        - CalculatorEngine: Lógica aritmética y estado
        - VoiceFeedback: Confirmación hablada de cada pulsación
        - CalculatorApp: Recibe los botones, los pasa al motor y lee el
          display de vuelta tras cada uno (la interfaz decide cuándo redibujar)
    """

    def __init__(self, config=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            voice (VoiceFeedback): Sistema de voz ya creado (opcional)
        """
        self.config = config if config else CalculatorConfig()

        self.engine = CalculatorEngine(self.config)
        self.voice = voice if voice else VoiceFeedback(self.config)

        # Pulsaciones aceptadas en esta sesión: (botón, operación, display)
        self.steps = []

    @property
    def display(self):
        return self.engine.display

    @property
    def operation_trace(self):
        return self.engine.operation_trace

    def press(self, token):
        """
        Procesa un botón pulsado.

        Args:
            token (str): Texto del botón ("7", "+", "=", "C"...)

        Returns:
            bool: True si el botón es válido y se procesó, False si se ignoró
        """
        if token not in TOKENS:
            return False

        self.engine.handle_input(token)

        if token == EQUALS:
            self.voice.speak_result(self.engine.display)
        else:
            self.voice.speak_token(token)

        self.steps.append((token, self.engine.operation_trace, self.engine.display))
        return True

    def status_line(self):
        """Línea de estado: operación en curso a la izquierda, valor a la derecha."""
        return f"{self.engine.operation_trace:<24} {self.engine.display:>16}"

    def run(self, tokens):
        """
        Reproduce una secuencia de botones e imprime el estado tras cada uno.

        Args:
            tokens (iterable[str]): Botones en orden de pulsación

        Returns:
            str: Valor final del display
        """
        print("\n" + "="*42)
        print("CALCULADORA")
        print("="*42)
        for line in self.config.describe():
            print(line)
        print()

        for token in tokens:
            if self.press(token):
                print(f"[{token:>3}] {self.status_line()}")
            else:
                print(f"⚠ Botón desconocido ignorado: {token!r}")

        print("="*42 + "\n")
        self.voice.wait(timeout=10)
        return self.engine.display

"""
Lógica de calculadora aritmética de cuatro operaciones.

Este módulo contiene el estado de la calculadora (CalculatorState) y el
motor (CalculatorEngine) que transforma una secuencia de botones pulsados
en los dos textos que muestra la pantalla: el valor actual y la operación
en curso.
"""

from decimal import Decimal
import math


# ============================================================================
# TOKENS - Textos de los botones que entiende el motor
# ============================================================================
CLEAR = "C"
SIGN_TOGGLE = "+/-"
PERCENT = "%"
DECIMAL_POINT = "."
EQUALS = "="
OPERATORS = ("+", "-", "×", "÷")
DIGITS = tuple("0123456789")

TOKENS = frozenset((CLEAR, SIGN_TOGGLE, PERCENT, DECIMAL_POINT, EQUALS)
                   + OPERATORS + DIGITS)

DEFAULT_SIGNIFICANT_DIGITS = 8
DEFAULT_ERROR_TEXT = "Error"


def parse_number(text):
    """
    Convierte el texto del display en número.

    Returns:
        float | None: Valor numérico, o None si el texto no es un número finito
    """
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def format_number(number, significant_digits=DEFAULT_SIGNIFICANT_DIGITS):
    """
    Formatea un número para el display.

    Args:
        number (float): Número a formatear
        significant_digits (int): Cifras significativas para no enteros

    Returns:
        str: Texto sin notación científica

    Formateo:
        - 5.0 → "5" (enteros sin decimales, sin separador de miles)
        - -0.0 → "0"
        - 0.30000000000000004 → "0.3" (8 cifras, sin ceros finales)
        - 1.234e-07 → "0.0000001234"
    """
    if number % 1 == 0:
        return str(int(number))

    # Redondeo a N cifras significativas y paso a notación posicional
    rounded = Decimal(f"{number:.{significant_digits - 1}e}")
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ============================================================================
# CLASE: CalculatorState
# Propósito: Agrupar todo el estado mutable de la calculadora
# ============================================================================
class CalculatorState:
    """
    Estado completo de la calculadora.

    Variables de estado:
        - display_text: Texto del display principal (fuente del operando actual)
        - operation_trace: Línea secundaria con la operación en curso
        - first_operand: Operando capturado al elegir operador (o último resultado)
        - second_operand: Operando capturado al calcular
        - pending_operator: Operador pendiente ("+", "-", "×", "÷")
        - awaiting_fresh_entry: Si True, el siguiente dígito reemplaza el display
        - repeat_ready: True si el último botón fue un "=" que produjo resultado
    """

    def __init__(self):
        """Inicializa el estado igual que tras pulsar C."""
        self.reset()

    def reset(self):
        """Vuelve al estado inicial sin crear un objeto nuevo."""
        self.display_text = "0"
        self.operation_trace = ""
        self.first_operand = None
        self.second_operand = None
        self.pending_operator = None
        self.awaiting_fresh_entry = False
        self.repeat_ready = False


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Recibir botones pulsados (tokens) y despacharlos
#   - Encadenar operaciones de izquierda a derecha (5 + 3 × 2 = 16)
#   - Formatear resultados y gestionar la división por cero
# ============================================================================
class CalculatorEngine:
    """
    Motor de calculadora de cuatro operaciones.

    Modelo de operación:
        1. La capa de interfaz traduce cada pulsación a un token ("7", "+", "=")
        2. Llama a handle_input(token)
        3. Vuelve a leer display y operation_trace para redibujar

    Ningún método lanza excepciones: la división por cero es un estado del
    display y los tokens desconocidos se ignoran.
    """

    def __init__(self, config=None):
        """
        Inicializa el motor en estado "0".

        Args:
            config (CalculatorConfig): Preferencias de formato (opcional)
        """
        self.significant_digits = getattr(config, "significant_digits",
                                          DEFAULT_SIGNIFICANT_DIGITS)
        self.error_text = getattr(config, "error_text", DEFAULT_ERROR_TEXT)
        self.state = CalculatorState()

    @property
    def display(self):
        """Valor actual (texto grande)."""
        return self.state.display_text

    @property
    def operation_trace(self):
        """Operación en curso (texto pequeño), vacía si no hay nada pendiente."""
        return self.state.operation_trace

    @property
    def has_error(self):
        return self.state.display_text == self.error_text

    def handle_input(self, token):
        """
        Punto de entrada: procesa la pulsación de cualquier botón.

        Args:
            token (str): Texto del botón ("C", "5", "+", "=", etc.)

        Los tokens fuera del alfabeto se ignoran sin modificar el estado.
        """
        if token not in TOKENS:
            return

        # Solo un "=" que calculó de verdad permite repetir la operación
        repeat = self.state.repeat_ready
        self.state.repeat_ready = False

        if token == CLEAR:
            self.reset()
        elif token == SIGN_TOGGLE:
            self.toggle_sign()
        elif token == PERCENT:
            self.apply_percent()
        elif token == DECIMAL_POINT:
            self.append_decimal_point()
        elif token in OPERATORS:
            self.set_operator(token)
        elif token == EQUALS:
            self.state.repeat_ready = self.evaluate(repeat=repeat)
        else:
            self.input_digit(token)

    # ========================================================================
    # COMANDOS UNARIOS
    # ========================================================================
    def reset(self):
        """Borra todo (C): display "0" y sin operación pendiente."""
        self.state.reset()

    def toggle_sign(self):
        """
        Cambia el signo del número mostrado.

        Ejemplo: "5" → "-5" → "5". No hace nada con "0" ni con el error.
        """
        text = self.state.display_text
        if text == "0" or self.has_error:
            return
        if text.startswith("-"):
            self.state.display_text = text[1:]
        else:
            self.state.display_text = "-" + text

    def apply_percent(self):
        """Divide el número mostrado entre 100 ("50" → "0.5")."""
        value = self._current_value()
        self.state.display_text = self._format(value / 100)
        self.state.awaiting_fresh_entry = True

    def append_decimal_point(self):
        """Añade el punto decimal si el número aún no lo tiene ("5" → "5.")."""
        text = self.state.display_text
        if "." in text or self.has_error:
            return
        self.state.display_text = text + "."

    # ========================================================================
    # ENTRADA DE NÚMEROS Y OPERADORES
    # ========================================================================
    def input_digit(self, digit):
        """
        Procesa un dígito 0-9.

        Dos modos:
            1. Reemplazo (tras operador, resultado o con display "0")
            2. Concatenación de texto ("5" → "53", "0." → "0.3")
        """
        state = self.state
        if state.awaiting_fresh_entry or state.display_text == "0":
            state.display_text = digit
            state.awaiting_fresh_entry = False
        else:
            state.display_text += digit

    def set_operator(self, operator):
        """
        Fija el operador para el siguiente cálculo.

        Si ya había un operador y se ha tecleado un segundo número, calcula
        primero la operación pendiente: 5 + 3 × 2 hace 5+3=8 y luego 8×2.

        Args:
            operator (str): "+", "-", "×" o "÷"
        """
        state = self.state
        if state.pending_operator is not None and not state.awaiting_fresh_entry:
            self.evaluate()

        state.first_operand = self._current_value()
        state.pending_operator = operator
        state.operation_trace = f"{self._format(state.first_operand)} {operator}"
        state.awaiting_fresh_entry = True

    def evaluate(self, repeat=False):
        """
        Calcula el resultado con el operador pendiente.

        Args:
            repeat (bool): True si "=" sigue a otro "=" que calculó: se repite la
                última operación con el mismo segundo operando (5 + 3 = = → 11)

        Returns:
            bool: True si se calculó un resultado (False si no hubo cálculo o hubo error)

        El resultado pasa a ser el primer operando, lo que permite seguir
        encadenando con otro operador o con "=".
        """
        state = self.state
        if state.first_operand is None or state.pending_operator is None:
            return False

        if repeat and state.second_operand is not None:
            second = state.second_operand
        else:
            second = parse_number(state.display_text)
            if second is None:
                return False
        state.second_operand = second

        first = state.first_operand
        operator = state.pending_operator
        if operator == "+":
            result = first + second
        elif operator == "-":
            result = first - second
        elif operator == "×":
            result = first * second
        else:
            if second == 0:
                self._set_error()
                return False
            result = first / second

        # Desbordamiento (p. ej. 1e308 × 10): mismo tratamiento que dividir por 0
        if not math.isfinite(result):
            self._set_error()
            return False

        state.display_text = self._format(result)
        state.operation_trace = (f"{self._format(first)} {operator} "
                                 f"{self._format(second)} =")
        state.first_operand = result
        state.awaiting_fresh_entry = True
        return True

    # ========================================================================
    # AUXILIARES
    # ========================================================================
    def _set_error(self):
        state = self.state
        state.display_text = self.error_text
        state.operation_trace = ""
        state.first_operand = None
        state.second_operand = None
        state.pending_operator = None
        state.awaiting_fresh_entry = True

    def _current_value(self):
        # Texto no numérico (error) cuenta como 0
        value = parse_number(self.state.display_text)
        return 0.0 if value is None else value

    def _format(self, number):
        return format_number(number, self.significant_digits)

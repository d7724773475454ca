"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para confirmar cada botón pulsado
y anunciar los resultados, ejecutándose en un hilo aparte para no
bloquear a quien llama a la calculadora.
"""

import threading
import pyttsx3
from collections import deque


NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve"
}

TOKENS_ES = {
    "+": "más",
    "-": "menos",
    "×": "por",
    "÷": "dividido entre",
    "%": "por ciento",
    "+/-": "cambio de signo",
    ".": "coma",
    "C": "todo borrado",
    "=": "igual",
}


def describe_token(token):
    """
    Texto hablado para un botón.

    Args:
        token (str): Botón pulsado ("7", "×", "C"...)

    Returns:
        str: Frase en español (ej: "siete", "por", "todo borrado")
    """
    return NUMBERS_ES.get(token) or TOKENS_ES.get(token, token)


def describe_result(display, error_text="Error"):
    """
    Texto hablado para un resultado.

    Args:
        display (str): Texto del display tras pulsar "="
        error_text (str): Texto de error configurado

    Returns:
        str: "igual a 8 coma 5", "igual a menos 3" o "error de cálculo"
    """
    if display == error_text:
        return "error de cálculo"
    text = display.replace('.', ' coma ')
    if text.startswith('-'):
        text = "menos " + text[1:]
    return f"igual a {text}"


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en el idioma configurado
#   - Ejecutar en hilo separado para no bloquear
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la calculadora)
        - Cola de mensajes (un mensaje a la vez, máximo 5 pendientes)
        - Configuración de volumen y velocidad
        - Si el motor de voz no arranca, la voz se desactiva sin error
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Configuración de la calculadora
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self.worker = None
        self.lock = threading.Lock()        # Protege la cola y is_speaking

        if not self.config.voice_enabled:
            return

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.engine = None
            self.config.voice_enabled = False

    @property
    def enabled(self):
        return self.config.voice_enabled and self.engine is not None

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Busca una voz del idioma configurado; si no hay, usa la predeterminada.
        """
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        language = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices') or []:
            languages = [str(lang).lower() for lang in getattr(voice, 'languages', []) or []]
            if language in voice.id.lower() or any(language in lang for lang in languages):
                self.engine.setProperty('voice', voice.id)
                print(f"✓ Voz seleccionada: {voice.name}")
                return

        print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar

        Ejecución:
            - Si no hay mensajes en curso: arranca el hilo de reproducción
            - Si hay mensajes: se añade a la cola (se descarta el más antiguo si está llena)
        """
        if not self.enabled:
            return

        with self.lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True
            self.worker = threading.Thread(target=self._process_queue, daemon=True)
            self.worker.start()

    def speak_token(self, token):
        """Confirma por voz el botón pulsado."""
        self.speak(describe_token(token))

    def speak_result(self, display):
        """Anuncia el resultado mostrado tras pulsar "="."""
        self.speak(describe_result(display, self.config.error_text))

    def wait(self, timeout=None):
        """
        Espera a que termine de hablar.

        Args:
            timeout (float): Segundos máximos de espera (None = sin límite)
        """
        if self.worker is not None:
            self.worker.join(timeout)

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            # Cola vacía y is_speaking se actualizan bajo el mismo lock que speak
            with self.lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()

            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

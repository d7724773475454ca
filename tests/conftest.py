"""Fixtures compartidos por los tests de la calculadora."""

import pytest

from calculadora.app.calculator_app import CalculatorApp
from calculadora.config.settings import CalculatorConfig
from calculadora.core.calculator import CalculatorEngine


class FakeVoice:
    """Sustituto de VoiceFeedback que guarda lo que se habría dicho."""

    def __init__(self):
        self.tokens = []
        self.results = []

    def speak_token(self, token):
        self.tokens.append(token)

    def speak_result(self, display):
        self.results.append(display)

    def wait(self, timeout=None):
        pass


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Pulsa una secuencia de botones sobre el motor del fixture."""
    def _press(*tokens):
        for token in tokens:
            engine.handle_input(token)
        return engine
    return _press


@pytest.fixture
def fake_voice():
    return FakeVoice()


@pytest.fixture
def app(fake_voice):
    return CalculatorApp(config=CalculatorConfig(voice_enabled=False), voice=fake_voice)

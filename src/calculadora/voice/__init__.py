"""
Módulo de feedback por voz.
Contiene el sistema de síntesis de voz para confirmar pulsaciones y resultados.
"""

from .feedback import VoiceFeedback, describe_result, describe_token

__all__ = ['VoiceFeedback', 'describe_result', 'describe_token']

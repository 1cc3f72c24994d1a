"""
Módulo de feedback por voz.
Contiene el sistema de síntesis de voz para anunciar botones y resultados.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']

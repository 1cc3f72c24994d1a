"""
Módulo de configuración para la calculadora tonta.
Contiene la configuración de la aplicación y las preferencias persistidas.
"""

from .settings import CalculatorConfig
from .preferences import AppearanceMode, Preferences

__all__ = ['CalculatorConfig', 'AppearanceMode', 'Preferences']

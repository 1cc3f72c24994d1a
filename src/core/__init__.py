"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados, las operaciones, el historial,
la botonera y el modo tonto.
"""

from .calculator import Calculator, CalculatorState, Phase
from .dumb_mode import DumbMode
from .formatting import format_number, parse_number
from .history import History
from .layout import ButtonLayout
from .operations import Operation

__all__ = [
    'Calculator', 'CalculatorState', 'Phase', 'DumbMode', 'History',
    'ButtonLayout', 'Operation', 'format_number', 'parse_number',
]

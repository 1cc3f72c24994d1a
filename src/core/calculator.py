"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase Calculator, la máquina de estados que consume
pulsaciones de botón y produce el texto del display, la expresión en curso
y, al evaluar, una entrada del historial.
"""

from dataclasses import dataclass
from enum import Enum

from .formatting import DEFAULT_FRACTION_DIGITS, DEFAULT_SEPARATOR, format_number, parse_number
from .history import History
from .operations import Operation

EQUALS = "="
DIGITS = "0123456789"


class Phase(Enum):
    """Fase de la máquina de estados, derivada del estado actual."""

    IDLE = "idle"
    ENTERING_OPERAND = "entering_operand"
    OPERATOR_PENDING = "operator_pending"
    ENTERING_SECOND_OPERAND = "entering_second_operand"
    EVALUATED = "evaluated"


@dataclass
class CalculatorState:
    """
    Estado de la calculadora.

    Campos:
        - current_number: Buffer de dígitos y separador decimal
        - previous_number: Operando izquierdo ya leído
        - pending_operation: Operación que espera su segundo operando
        - is_new_calculation: True tras evaluar; el siguiente dígito reinicia
        - display_text: Texto del display principal
        - expression: Expresión en curso (ej: "5 + 3")
    """

    current_number: str = ""
    previous_number: float = None
    pending_operation: Operation = None
    is_new_calculation: bool = False
    display_text: str = "0"
    expression: str = ""


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados de la calculadora de cuatro operaciones
# Responsabilidades:
#   - Construir números dígito por dígito con separador decimal configurable
#   - Encadenar operaciones de izquierda a derecha (sin precedencia)
#   - Evaluar y registrar cada resultado en el historial
#   - Ignorar en silencio cualquier entrada no válida
# ============================================================================
class Calculator:
    """
    Calculadora de cuatro operaciones con una sola operación pendiente.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current_number
        2. Usuario pulsa operador → current_number pasa a previous_number
        3. Si ya había operador pendiente se "pliega": se aplica en el acto
           (ej: "4 + 2 ×" → previous_number = 6, pendiente ×)
        4. Usuario pulsa = → se aplica la operación y se guarda en historial

    Ninguna operación lanza excepciones: las entradas que no se pueden
    procesar se ignoran y el estado queda igual.
    """

    def __init__(self, decimal_separator=DEFAULT_SEPARATOR,
                 max_fraction_digits=DEFAULT_FRACTION_DIGITS,
                 history=None, dumb_mode=None):
        """
        Inicializa calculadora en estado vacío.

        Args:
            decimal_separator (str): Glifo del separador decimal (por defecto ",")
            max_fraction_digits (int): Máximo de decimales en resultados
            history (History): Historial compartido (opcional)
            dumb_mode (DumbMode): Modo tonto que puede falsear resultados (opcional)
        """
        self.decimal_separator = decimal_separator
        self.max_fraction_digits = max_fraction_digits
        self.history = history if history is not None else History()
        self.dumb_mode = dumb_mode
        self.state = CalculatorState()

    # ------------------------------------------------------------------
    # Entrada
    # ------------------------------------------------------------------
    def press(self, token):
        """
        Procesa la pulsación de un botón.

        Args:
            token (str): Dígito "0"-"9", separador decimal, operador o "="

        Returns:
            str | None: Resultado formateado si la pulsación evaluó la
                expresión, None en cualquier otro caso
        """
        if not isinstance(token, str):
            return None
        if len(token) == 1 and token in DIGITS:
            self.add_digit(token)
        elif token == self.decimal_separator:
            self.add_decimal()
        elif token == EQUALS:
            success, result = self.calculate()
            return result if success else None
        else:
            operation = Operation.from_symbol(token)
            if operation is not None:
                self.add_operation(operation)
        return None

    def add_digit(self, digit):
        """
        Añade un dígito al número actual.

        Args:
            digit (str | int): Dígito 0-9

        Returns:
            bool: True si se añadió, False si no es un dígito válido

        Un "0" solitario se reemplaza (no se acumulan ceros a la izquierda).
        """
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            return False

        self._start_fresh_if_evaluated()
        state = self.state
        if state.current_number == "0":
            state.current_number = digit
        else:
            state.current_number += digit
        state.display_text = state.current_number
        self._update_expression()
        return True

    def add_decimal(self):
        """
        Añade el separador decimal al número actual.

        Returns:
            bool: True si se añadió, False si ya existe separador

        Comportamiento:
            - Si número está vacío: Añade "0,"
            - Si número existe sin separador: Lo añade al final
            - Si ya tiene separador: Retorna False (un solo decimal permitido)
        """
        self._start_fresh_if_evaluated()
        state = self.state
        if self.decimal_separator in state.current_number:
            return False

        if state.current_number:
            state.current_number += self.decimal_separator
        else:
            state.current_number = "0" + self.decimal_separator
        state.display_text = state.current_number
        self._update_expression()
        return True

    def add_operation(self, operation):
        """
        Registra una operación binaria, plegando la pendiente si la hay.

        Args:
            operation (Operation | str): Operación o su símbolo

        Returns:
            bool: True si se registró, False si el símbolo no es un operador
                o el número actual no se puede leer

        Ejemplo de flujo:
            "4" → add_operation(+) → previous=4, expression="4 +"
            "2" → add_operation(×) → previous=6, expression="6 ×"
        """
        if not isinstance(operation, Operation):
            operation = Operation.from_symbol(operation)
            if operation is None:
                return False

        state = self.state
        if state.current_number:
            number = self._parse(state.current_number)
            if number is None:
                return False
            if state.previous_number is not None and state.pending_operation is not None:
                state.previous_number = state.pending_operation.apply(state.previous_number, number)
                state.display_text = self._format(state.previous_number)
            else:
                state.previous_number = number
        elif state.previous_number is None:
            state.previous_number = 0.0

        state.is_new_calculation = False
        state.pending_operation = operation
        state.current_number = ""
        self._update_expression()
        return True

    def calculate(self):
        """
        Evalúa la operación pendiente.

        Returns:
            tuple: (éxito: bool, resultado: str)
                - (True, "8"): Cálculo realizado y añadido al historial
                - (False, ""): Falta operando u operación; estado sin cambios

        Tras evaluar:
            - El display y el buffer muestran el resultado
            - previous_number guarda el resultado para seguir encadenando
            - El siguiente dígito empieza un cálculo nuevo
        """
        state = self.state
        number = self._parse(state.current_number)
        if number is None or state.previous_number is None or state.pending_operation is None:
            return False, ""

        result = state.pending_operation.apply(state.previous_number, number)
        if self.dumb_mode is not None and self.dumb_mode.enabled:
            result = self.dumb_mode.distort(result)

        formatted = self._format(result)
        self.history.append(state.expression, formatted)
        state.display_text = formatted
        state.previous_number = result
        state.current_number = formatted
        state.pending_operation = None
        state.is_new_calculation = True
        return True, formatted

    def reset(self):
        """
        Borra el estado de cálculo (doble clic sobre el display).

        El historial se conserva: solo se borra desde el menú.
        """
        self.state = CalculatorState()

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    def get_display(self):
        return self.state.display_text

    def get_expression(self):
        return self.state.expression

    @property
    def phase(self):
        """Fase actual de la máquina de estados (ver Phase)."""
        state = self.state
        if state.is_new_calculation:
            return Phase.EVALUATED
        if state.pending_operation is None:
            return Phase.ENTERING_OPERAND if state.current_number else Phase.IDLE
        if state.current_number:
            return Phase.ENTERING_SECOND_OPERAND
        return Phase.OPERATOR_PENDING

    # ------------------------------------------------------------------
    # Auxiliares
    # ------------------------------------------------------------------
    def _start_fresh_if_evaluated(self):
        if self.state.is_new_calculation:
            self.reset()

    def _update_expression(self):
        state = self.state
        if state.pending_operation is not None:
            expression = f"{self._format(state.previous_number)} {state.pending_operation.symbol}"
            if state.current_number:
                expression += f" {state.current_number}"
            state.expression = expression
        else:
            state.expression = state.current_number

    def _parse(self, text):
        return parse_number(text, self.decimal_separator)

    def _format(self, value):
        return format_number(value, self.decimal_separator, self.max_fraction_digits)

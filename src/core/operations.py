"""
Operaciones aritméticas binarias de la calculadora.

Este módulo define el conjunto cerrado de operaciones soportadas y la
función que las aplica sobre dos operandos.
"""

from enum import Enum


# ============================================================================
# ENUM: Operation
# Propósito: Representar las cuatro operaciones básicas como variante cerrada
# Responsabilidades:
#   - Asociar cada operación con su símbolo en pantalla
#   - Traducir símbolos del teclado/botones a operaciones
#   - Aplicar la operación sobre dos números
# ============================================================================
class Operation(Enum):
    """
    Operación binaria pendiente de la calculadora.

    El valor de cada miembro es el símbolo que se muestra en el display
    y en el historial (ej: "5 + 3 = 8").
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self):
        return self.value

    @classmethod
    def from_symbol(cls, symbol):
        """
        Obtiene la operación asociada a un símbolo.

        Args:
            symbol (str): Símbolo del botón o tecla ("+", "-", "×", "÷", ...)

        Returns:
            Operation | None: Operación reconocida o None si no es un operador

        Alias aceptados:
            - "−" (signo menos tipográfico) → SUBTRACT
            - "*", "x" → MULTIPLY
            - "/" → DIVIDE
        """
        return _SYMBOLS.get(symbol)

    def apply(self, a, b):
        """
        Aplica la operación a dos operandos.

        Args:
            a (float): Operando izquierdo (número anterior)
            b (float): Operando derecho (número actual)

        Returns:
            float: Resultado de la operación

        División por cero:
            Devuelve 0 en lugar de lanzar una excepción.
        """
        if self is Operation.ADD:
            return a + b
        if self is Operation.SUBTRACT:
            return a - b
        if self is Operation.MULTIPLY:
            return a * b
        return a / b if b != 0 else 0.0


_SYMBOLS = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "−": Operation.SUBTRACT,
    "×": Operation.MULTIPLY,
    "*": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "÷": Operation.DIVIDE,
    "/": Operation.DIVIDE,
}

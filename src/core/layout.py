"""
Disposición de la botonera de la calculadora.

Este módulo contiene la clase ButtonLayout, la rejilla 4x4 de símbolos que
la interfaz dibuja y que el modo tonto puede desordenar.
"""

GRID_SIZE = 4


def default_rows(decimal_separator=","):
    """
    Rejilla por defecto:

        7 8 9 ÷
        4 5 6 ×
        1 2 3 -
        0 , = +
    """
    return [
        ["7", "8", "9", "÷"],
        ["4", "5", "6", "×"],
        ["1", "2", "3", "-"],
        ["0", decimal_separator, "=", "+"],
    ]


# ============================================================================
# CLASE: ButtonLayout
# Propósito: Rejilla ordenada de símbolos de botón
# Responsabilidades:
#   - Guardar la disposición actual (4 filas de 4 símbolos)
#   - Desordenarla con una fuente aleatoria inyectada
#   - Restaurar la disposición por defecto
# ============================================================================
class ButtonLayout:
    """
    Rejilla 4x4 de símbolos de botón.

    La calculadora no depende de la disposición: solo recibe el símbolo
    del botón pulsado. La disposición importa únicamente a la interfaz.
    """

    def __init__(self, decimal_separator=","):
        self.decimal_separator = decimal_separator
        self.rows = default_rows(decimal_separator)

    def tokens(self):
        """Lista plana de símbolos, fila por fila."""
        return [token for row in self.rows for token in row]

    def shuffle(self, rng):
        """
        Desordena todos los botones de la rejilla.

        Args:
            rng (random.Random): Fuente aleatoria (inyectable para tests)

        Proceso:
            1. Aplanar la rejilla en una lista de 16 símbolos
            2. Barajar la lista
            3. Volver a trocearla en filas de 4
        """
        tokens = self.tokens()
        rng.shuffle(tokens)
        self.rows = [tokens[i:i + GRID_SIZE] for i in range(0, len(tokens), GRID_SIZE)]

    def reset(self):
        self.rows = default_rows(self.decimal_separator)

    @property
    def is_default(self):
        return self.rows == default_rows(self.decimal_separator)

    def token_at(self, row, col):
        """Símbolo en (fila, columna), o None fuera de la rejilla."""
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return None

"""
Modo tonto: errores aritméticos aleatorios y botonera desordenada.

Este módulo contiene la clase DumbMode. Toda la aleatoriedad pasa por una
fuente inyectable para que los tests sean deterministas.
"""

import random


# ============================================================================
# CLASE: DumbMode
# Propósito: Comportamientos pseudoaleatorios del modo tonto
# Responsabilidades:
#   - Falsear resultados con una probabilidad configurable
#   - Desordenar la botonera en cada pulsación
# ============================================================================
class DumbMode:
    """
    Comportamientos "tontos" de la calculadora.

    Tipos de error inyectados en un resultado:
        - Desfase: suma o resta un entero entre 1 y 9
        - Escala: multiplica o divide entre 10
        - Signo: invierte el signo

    Un resultado 0 siempre se falsea con desfase (escala y signo lo
    dejarían igual).
    """

    ERROR_KINDS = ("offset", "scale", "sign")

    def __init__(self, rng=None, error_probability=0.3, enabled=False):
        """
        Args:
            rng (random.Random): Fuente aleatoria; por defecto una nueva instancia
            error_probability (float): Probabilidad (0.0-1.0) de falsear un resultado
            enabled (bool): Estado inicial del modo
        """
        self.rng = rng if rng is not None else random.Random()
        self.error_probability = error_probability
        self.enabled = enabled

    def toggle(self):
        self.enabled = not self.enabled
        return self.enabled

    def distort(self, value):
        """
        Falsea un resultado con probabilidad `error_probability`.

        Args:
            value (float): Resultado correcto

        Returns:
            float: El mismo valor, o uno erróneo
        """
        if self.rng.random() >= self.error_probability:
            return value

        kind = "offset" if value == 0 else self.rng.choice(self.ERROR_KINDS)
        if kind == "offset":
            return value + self.rng.choice((-1, 1)) * self.rng.randint(1, 9)
        if kind == "scale":
            return value * 10 if self.rng.random() < 0.5 else value / 10
        return -value

    def shuffle(self, layout):
        """Desordena la botonera `layout` (ButtonLayout) con la fuente del modo."""
        layout.shuffle(self.rng)

"""
Historial de expresiones evaluadas.
"""


class History:
    """
    Secuencia ordenada (más antigua primero) de entradas "<expresión> = <resultado>".

    Las entradas son cadenas inmutables; el historial solo crece hasta que
    el usuario lo borra desde el menú. Reiniciar la calculadora no lo toca.
    """

    def __init__(self):
        self._entries = []

    def append(self, expression, result):
        """
        Añade una evaluación al historial.

        Args:
            expression (str): Expresión evaluada (ej: "5 + 3")
            result (str): Resultado ya formateado (ej: "8")

        Returns:
            str: Entrada añadida (ej: "5 + 3 = 8")
        """
        entry = f"{expression} = {result}"
        self._entries.append(entry)
        return entry

    @property
    def entries(self):
        return tuple(self._entries)

    def last(self, count):
        """Devuelve las últimas `count` entradas, en orden cronológico."""
        if count <= 0:
            return ()
        return tuple(self._entries[-count:])

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

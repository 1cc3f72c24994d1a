"""
Preferencias del usuario persistidas entre sesiones.

Solo se guardan dos valores: el modo de apariencia y si el modo tonto
está activo. Se leen al arrancar y se escriben en cada cambio.
"""

import json
from enum import Enum
from pathlib import Path

PREFERENCES_FILE = Path.home() / ".calculadora_tonta.json"


class AppearanceMode(Enum):
    DARK = "dark"
    LIGHT = "light"
    SYSTEM = "system"


DEFAULT_PREFERENCES = {
    "appearance_mode": AppearanceMode.SYSTEM.value,
    "dumb_mode": False,
}


# ============================================================================
# CLASE: Preferences
# Propósito: Almacén clave-valor de las preferencias del usuario
# Responsabilidades:
#   - Leer el fichero JSON al arrancar (valores por defecto si falta o es inválido)
#   - Escribirlo cada vez que cambia un valor
# ============================================================================
class Preferences:
    """
    Preferencias persistidas en un fichero JSON.

    Errores de lectura o escritura no detienen la aplicación: se avisa por
    consola y se sigue con los valores en memoria.
    """

    def __init__(self, path=PREFERENCES_FILE):
        self.path = Path(path)
        self.data = dict(DEFAULT_PREFERENCES)
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            print(f"⚠ Advertencia: No se pudieron leer las preferencias ({self.path}): {e}")
            return

        if not isinstance(obj, dict):
            print(f"⚠ Advertencia: Preferencias con formato inesperado en {self.path}")
            return

        mode = obj.get("appearance_mode")
        if mode in {m.value for m in AppearanceMode}:
            self.data["appearance_mode"] = mode
        if isinstance(obj.get("dumb_mode"), bool):
            self.data["dumb_mode"] = obj["dumb_mode"]

    def save(self):
        """
        Escribe las preferencias en disco.

        Returns:
            bool: True si se guardaron, False si hubo un error de escritura
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            print(f"⚠ Advertencia: No se pudieron guardar las preferencias: {e}")
            return False
        return True

    @property
    def appearance_mode(self):
        return AppearanceMode(self.data["appearance_mode"])

    @appearance_mode.setter
    def appearance_mode(self, mode):
        self.data["appearance_mode"] = AppearanceMode(mode).value
        self.save()

    @property
    def dumb_mode(self):
        return self.data["dumb_mode"]

    @dumb_mode.setter
    def dumb_mode(self, enabled):
        self.data["dumb_mode"] = bool(enabled)
        self.save()

"""
Paletas de colores (BGR) para los modos claro y oscuro.
"""

from config.preferences import AppearanceMode

ORANGE = (0, 165, 255)

DARK = {
    "background": (0, 0, 0),
    "text": (255, 255, 255),
    "secondary": (150, 150, 150),
    "button": ORANGE,
    "button_text": (255, 255, 255),
    "button_border": (0, 0, 0),
    "panel": (35, 35, 35),
    "panel_border": (100, 100, 100),
    "accent": ORANGE,
}

LIGHT = {
    "background": (245, 245, 245),
    "text": (20, 20, 20),
    "secondary": (110, 110, 110),
    "button": ORANGE,
    "button_text": (255, 255, 255),
    "button_border": (245, 245, 245),
    "panel": (230, 230, 230),
    "panel_border": (160, 160, 160),
    "accent": (0, 120, 220),
}


def resolve_theme(mode):
    """
    Paleta para un modo de apariencia.

    El modo "system" usa la paleta oscura: OpenCV no expone la apariencia
    del sistema operativo.
    """
    if AppearanceMode(mode) is AppearanceMode.LIGHT:
        return LIGHT
    return DARK

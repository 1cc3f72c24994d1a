"""
Módulo de interfaz de usuario.
Contiene el renderizador de la ventana y las paletas de colores.
"""

from .renderer import UIRenderer
from .theme import resolve_theme

__all__ = ['UIRenderer', 'resolve_theme']

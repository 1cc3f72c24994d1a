"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos
visuales de la calculadora sobre lienzos numpy con OpenCV, y que traduce
coordenadas de clic a botones, display y menú.
"""

import cv2
import numpy as np

from config.preferences import AppearanceMode
from config.settings import CalculatorConfig
from core.layout import GRID_SIZE
from .theme import resolve_theme

MENU_BAR_HEIGHT = 40
MENU_ITEM_HEIGHT = 56
MENU_WIDTH_MARGIN = 40

# Las fuentes Hershey de OpenCV solo tienen ASCII
ASCII_GLYPHS = {"×": "x", "÷": "/", "−": "-", "∞": "inf"}


def to_ascii(text):
    for glyph, replacement in ASCII_GLYPHS.items():
        text = text.replace(glyph, replacement)
    return text


# ============================================================================
# CLASE: UIRenderer
# Propósito: Dibujar la ventana de la calculadora y resolver clics
# Responsabilidades:
#   - Dibujar barra de menú, historial, display y botonera
#   - Dibujar menú desplegable, pantalla "Acerca de" y mensajes temporales
#   - Aplicar la paleta del modo de apariencia activo
#   - Traducir coordenadas de ratón a regiones de la ventana
# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora tonta.

    Regiones de la ventana (de arriba abajo):
        1. Barra de menú: botón "..." e indicadores (modo tonto, voz)
        2. Historial: últimas expresiones evaluadas, alineadas a la derecha
        3. Display: expresión en curso y número/resultado en grande
        4. Botonera: rejilla 4x4 cuadrada que ocupa todo el ancho

    El historial se queda con el 60% del espacio entre la barra de menú y
    la botonera; el display con el resto.
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.theme = resolve_theme(AppearanceMode.SYSTEM)
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = self.theme["accent"]

        # Geometría de las regiones
        self.grid_size = width
        self.grid_top = height - self.grid_size
        free = self.grid_top - MENU_BAR_HEIGHT
        self.history_top = MENU_BAR_HEIGHT
        self.display_top = MENU_BAR_HEIGHT + int(free * 0.6)

    def set_appearance(self, mode):
        self.theme = resolve_theme(mode)

    def new_frame(self):
        """Lienzo vacío con el color de fondo del tema."""
        return np.full((self.height, self.width, 3), self.theme["background"], dtype=np.uint8)

    # ------------------------------------------------------------------
    # Geometría y clics
    # ------------------------------------------------------------------
    def button_rect(self, row, col):
        """
        Rectángulo (x, y, w, h) del botón en (fila, columna).

        La última fila/columna absorbe los píxeles sobrantes de la división.
        """
        cell = self.grid_size // GRID_SIZE
        x = col * cell
        y = self.grid_top + row * cell
        w = self.width - x if col == GRID_SIZE - 1 else cell
        h = self.height - y if row == GRID_SIZE - 1 else cell
        return x, y, w, h

    def button_at(self, x, y, layout):
        """
        Símbolo del botón bajo el punto (x, y).

        Args:
            x, y (int): Coordenadas del ratón
            layout (ButtonLayout): Disposición actual

        Returns:
            str | None: Símbolo, o None si el punto no cae en la botonera
        """
        if not (0 <= x < self.width and self.grid_top <= y < self.height):
            return None
        cell = self.grid_size // GRID_SIZE
        col = min(x // cell, GRID_SIZE - 1)
        row = min((y - self.grid_top) // cell, GRID_SIZE - 1)
        return layout.token_at(row, col)

    def in_display(self, x, y):
        return 0 <= x < self.width and self.display_top <= y < self.grid_top

    def in_menu_button(self, x, y):
        return self.width - 70 <= x < self.width and 0 <= y < MENU_BAR_HEIGHT

    def menu_items(self, dumb_enabled, appearance_mode):
        """
        Opciones del menú según el estado actual.

        Returns:
            list: Pares (acción, etiqueta)
        """
        is_dark = AppearanceMode(appearance_mode) is AppearanceMode.DARK
        return [
            ("clear_history", "Borrar historial"),
            ("toggle_dumb", "Desactivar modo tonto" if dumb_enabled else "Activar modo tonto"),
            ("toggle_appearance", "Modo claro" if is_dark else "Modo oscuro"),
            ("system_appearance", "Apariencia del sistema"),
            ("about", "Acerca de"),
            ("cancel", "Cancelar"),
        ]

    def menu_item_rect(self, index, count):
        total = count * MENU_ITEM_HEIGHT
        top = (self.height - total) // 2
        x = MENU_WIDTH_MARGIN
        return x, top + index * MENU_ITEM_HEIGHT, self.width - 2 * MENU_WIDTH_MARGIN, MENU_ITEM_HEIGHT

    def menu_item_at(self, x, y, items):
        """Acción del menú bajo el punto (x, y), o None fuera del menú."""
        for index, (action, _) in enumerate(items):
            ix, iy, iw, ih = self.menu_item_rect(index, len(items))
            if ix <= x < ix + iw and iy <= y < iy + ih:
                return action
        return None

    # ------------------------------------------------------------------
    # Feedback temporal
    # ------------------------------------------------------------------
    def show_feedback(self, msg, color=None, duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje (por defecto, acento del tema)
            duration (int): Duración en frames (por defecto, la de la configuración)
        """
        self.feedback_msg = msg
        self.feedback_color = color if color else self.theme["accent"]
        self.feedback_timer = duration if duration else self.config.feedback_duration

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal justo encima de la botonera.

        Efecto:
            - Desaparece con fade-out usando alpha blending
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer <= 0:
            return
        self.feedback_timer -= 1
        alpha = min(self.feedback_timer / 20.0, 1.0)

        text = to_ascii(self.feedback_msg)
        (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, 0.8, 2)
        x = (self.width - tw) // 2
        y = self.grid_top - 12

        overlay = img.copy()
        cv2.rectangle(overlay, (x - 12, y - th - 12), (x + tw + 12, y + 8), self.theme["panel"], -1)
        cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

        color = tuple(int(c * alpha + b * (1 - alpha))
                      for c, b in zip(self.feedback_color, self.theme["panel"]))
        cv2.putText(img, text, (x, y), cv2.FONT_HERSHEY_DUPLEX, 0.8, color, 2, cv2.LINE_AA)

    # ------------------------------------------------------------------
    # Regiones
    # ------------------------------------------------------------------
    def draw_menu_bar(self, img, dumb_enabled=False, voice_enabled=False):
        """Botón "..." a la derecha e indicadores de estado a la izquierda."""
        for i in range(3):
            cx = self.width - 50 + i * 14
            cv2.circle(img, (cx, MENU_BAR_HEIGHT // 2), 3, self.theme["secondary"], -1, cv2.LINE_AA)

        x = 12
        if dumb_enabled:
            cv2.putText(img, "MODO TONTO", (x, 27), cv2.FONT_HERSHEY_SIMPLEX, 0.55,
                        self.theme["accent"], 2, cv2.LINE_AA)
            x += 140
        if voice_enabled:
            cv2.putText(img, "VOZ: ON", (x, 27), cv2.FONT_HERSHEY_SIMPLEX, 0.55,
                        self.theme["secondary"], 1, cv2.LINE_AA)

    def draw_history(self, img, history):
        """
        Dibuja el historial alineado a la derecha y pegado al display.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            history (History): Historial de la calculadora

        Solo se muestran las entradas que caben (como mucho history_lines),
        la más reciente abajo.
        """
        line_h = 30
        available = (self.display_top - self.history_top - 10) // line_h
        count = max(0, min(self.config.history_lines, available))
        entries = history.last(count)

        y = self.display_top - 12
        for entry in reversed(entries):
            text = to_ascii(entry)
            scale = 0.7
            (tw, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 1)
            while tw > self.width - 32 and scale > 0.4:
                scale -= 0.05
                (tw, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 1)
            cv2.putText(img, text, (self.width - 16 - tw, y), cv2.FONT_HERSHEY_SIMPLEX,
                        scale, self.theme["secondary"], 1, cv2.LINE_AA)
            y -= line_h

    def draw_display(self, img, calc):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            calc (Calculator): Instancia de calculadora con estado actual

        Componentes:
            1. Expresión en curso (pequeña, parte superior)
            2. Número o resultado (grande, alineado a la derecha)

        Tamaño dinámico:
            La fuente se reduce hasta la mitad para que el número quepa;
            si aun así no cabe, se recortan los dígitos de la izquierda.
        """
        top, bottom = self.display_top, self.grid_top

        expr = to_ascii(calc.get_expression())
        if expr and expr != calc.get_display():
            (tw, _), _ = cv2.getTextSize(expr, cv2.FONT_HERSHEY_SIMPLEX, 0.7, 1)
            cv2.putText(img, expr, (max(16, self.width - 16 - tw), top + 28),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, self.theme["secondary"], 1, cv2.LINE_AA)

        display = to_ascii(calc.get_display())
        max_scale = 2.6
        scale = max_scale
        (tw, _), _ = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, scale, 3)
        while tw > self.width - 32 and scale > max_scale / 2:
            scale -= 0.1
            (tw, _), _ = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, scale, 3)
        while tw > self.width - 32 and len(display) > 1:
            display = display[1:]
            (tw, _), _ = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, scale, 3)

        cv2.putText(img, display, (self.width - 16 - tw, bottom - 24),
                    cv2.FONT_HERSHEY_DUPLEX, scale, self.theme["text"], 3, cv2.LINE_AA)

    def draw_buttons(self, img, layout):
        """
        Dibuja la botonera 4x4 en el orden actual de `layout`.

        El símbolo "÷" se dibuja a mano (raya y dos puntos) porque las
        fuentes de OpenCV no lo incluyen.
        """
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                token = layout.token_at(row, col)
                if token is None:
                    continue
                x, y, w, h = self.button_rect(row, col)
                cv2.rectangle(img, (x, y), (x + w - 1, y + h - 1), self.theme["button"], -1)
                cv2.rectangle(img, (x, y), (x + w - 1, y + h - 1), self.theme["button_border"], 1)
                cx, cy = x + w // 2, y + h // 2
                color = self.theme["button_text"]

                if token == "÷":
                    cv2.line(img, (cx - 16, cy), (cx + 16, cy), color, 3, cv2.LINE_AA)
                    cv2.circle(img, (cx, cy - 12), 4, color, -1, cv2.LINE_AA)
                    cv2.circle(img, (cx, cy + 12), 4, color, -1, cv2.LINE_AA)
                    continue

                text = to_ascii(token)
                (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, 1.4, 2)
                cv2.putText(img, text, (cx - tw // 2, cy + th // 2),
                            cv2.FONT_HERSHEY_DUPLEX, 1.4, color, 2, cv2.LINE_AA)

    # ------------------------------------------------------------------
    # Capas superpuestas
    # ------------------------------------------------------------------
    def _dim(self, img, opacity=0.6):
        overlay = img.copy()
        cv2.rectangle(overlay, (0, 0), (self.width, self.height), (0, 0, 0), -1)
        cv2.addWeighted(overlay, opacity, img, 1 - opacity, 0, img)

    def draw_menu(self, img, items):
        """Menú desplegable centrado sobre la ventana oscurecida."""
        self._dim(img)
        for index, (action, label) in enumerate(items):
            x, y, w, h = self.menu_item_rect(index, len(items))
            cv2.rectangle(img, (x, y), (x + w, y + h), self.theme["panel"], -1)
            cv2.rectangle(img, (x, y), (x + w, y + h), self.theme["panel_border"], 1)
            color = self.theme["accent"] if action == "cancel" else self.theme["text"]
            (tw, th), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, 0.7, 2)
            cv2.putText(img, label, (x + (w - tw) // 2, y + (h + th) // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2, cv2.LINE_AA)

    def draw_about(self, img, version):
        """
        Pantalla "Acerca de": nombre, versión, descripción y licencia.
        Cualquier clic o tecla la cierra.
        """
        self._dim(img, 0.75)
        x, y = 30, self.height // 2 - 200
        w, h = self.width - 60, 400
        cv2.rectangle(img, (x, y), (x + w, y + h), self.theme["panel"], -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), self.theme["panel_border"], 2)

        cv2.circle(img, (self.width // 2, y + 60), 32, self.theme["button"], -1, cv2.LINE_AA)
        cv2.putText(img, "=", (self.width // 2 - 14, y + 74), cv2.FONT_HERSHEY_DUPLEX, 1.2,
                    self.theme["button_text"], 2, cv2.LINE_AA)

        lines = [
            ("CALCULADORA TONTA", cv2.FONT_HERSHEY_DUPLEX, 0.9, self.theme["text"], 2),
            (f"Version {version}", cv2.FONT_HERSHEY_SIMPLEX, 0.6, self.theme["secondary"], 1),
            ("", None, 0, None, 0),
            ("Una calculadora sencilla con truco:", cv2.FONT_HERSHEY_SIMPLEX, 0.6, self.theme["text"], 1),
            ("a veces se equivoca a proposito.", cv2.FONT_HERSHEY_SIMPLEX, 0.6, self.theme["text"], 1),
            ("", None, 0, None, 0),
            ("Licencia MIT", cv2.FONT_HERSHEY_SIMPLEX, 0.55, self.theme["secondary"], 1),
            ("Pulse cualquier tecla para volver", cv2.FONT_HERSHEY_SIMPLEX, 0.5, self.theme["secondary"], 1),
        ]
        cy = y + 140
        for text, font, scale, color, thickness in lines:
            if not text:
                cy += 12
                continue
            (tw, _), _ = cv2.getTextSize(text, font, scale, thickness)
            cv2.putText(img, text, ((self.width - tw) // 2, cy), font, scale, color, thickness, cv2.LINE_AA)
            cy += 36

"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from config.preferences import AppearanceMode, Preferences
from config.settings import CalculatorConfig
from core.calculator import EQUALS, Calculator
from core.dumb_mode import DumbMode
from core.layout import ButtonLayout
from core.operations import Operation
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback

VERSION = "1.0"

KEY_ESC = 27
KEY_ENTER = (10, 13)
KEY_BACKSPACE = (8, 127)


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora tonta.

    Arquitectura:
        - Calculator: Máquina de estados y historial
        - ButtonLayout: Disposición de la botonera
        - DumbMode: Errores aleatorios y botonera desordenada
        - UIRenderer: Renderizado de la ventana y resolución de clics
        - VoiceFeedback: Anuncios por voz (opcional)
        - Preferences: Apariencia y modo tonto persistidos
        - CalculatorApp: Coordinador y bucle principal

    Cada pulsación es una transición síncrona: si el modo tonto está activo
    se desordena la botonera y después se procesa el botón pulsado.
    """

    def __init__(self, config=None, preferences=None, rng=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            preferences (Preferences): Preferencias persistidas (opcional)
            rng (random.Random): Fuente aleatoria del modo tonto (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional)

        Raises:
            ValueError: Si la configuración no es válida
        """
        self.config = (config if config else CalculatorConfig()).validate()
        self.preferences = preferences if preferences else Preferences()

        self.dumb = DumbMode(rng, self.config.dumb_error_probability,
                             enabled=self.preferences.dumb_mode)
        self.calc = Calculator(self.config.decimal_separator,
                               self.config.max_fraction_digits,
                               dumb_mode=self.dumb)
        self.layout = ButtonLayout(self.config.decimal_separator)
        self.ui = UIRenderer(self.config.window_width, self.config.window_height, self.config)
        self.ui.set_appearance(self.preferences.appearance_mode)
        self.voice = voice if voice else VoiceFeedback(self.config)

        self.showing_menu = False
        self.showing_about = False

        if self.dumb.enabled:
            print("✓ Modo tonto ACTIVADO")

    # ------------------------------------------------------------------
    # Acciones
    # ------------------------------------------------------------------
    def press(self, token):
        """
        Procesa la pulsación de un botón de la botonera.

        Args:
            token (str): Símbolo del botón

        Returns:
            str | None: Resultado si la pulsación evaluó la expresión
        """
        if self.dumb.enabled:
            self.dumb.shuffle(self.layout)

        result = self.calc.press(token)
        if result is not None:
            self.ui.show_feedback(f"= {result}", duration=60)
            self.voice.speak_result(result)
        elif token != EQUALS:
            self.voice.speak_token(token)
        return result

    def reset(self):
        """Reinicia el cálculo y restaura la botonera (doble clic en el display)."""
        self.calc.reset()
        self.layout.reset()
        self.ui.show_feedback("BORRADO")
        self.voice.speak("borrado")

    def clear_history(self):
        self.calc.history.clear()
        self.ui.show_feedback("HISTORIAL BORRADO")

    def toggle_dumb_mode(self):
        enabled = self.dumb.toggle()
        self.preferences.dumb_mode = enabled
        if not enabled:
            self.layout.reset()
        status = "ACTIVADO" if enabled else "DESACTIVADO"
        print(f"Modo tonto: {status}")
        self.ui.show_feedback(f"MODO TONTO {status}", duration=60)
        return enabled

    def set_appearance(self, mode):
        mode = AppearanceMode(mode)
        self.preferences.appearance_mode = mode
        self.ui.set_appearance(mode)
        print(f"Apariencia: {mode.value}")

    def toggle_appearance(self):
        """Oscuro → claro; claro o sistema → oscuro."""
        if self.preferences.appearance_mode is AppearanceMode.DARK:
            self.set_appearance(AppearanceMode.LIGHT)
        else:
            self.set_appearance(AppearanceMode.DARK)

    def toggle_voice(self):
        enabled = self.voice.toggle()
        status = "ACTIVADA" if enabled else "DESACTIVADA"
        print(f"Voz: {status}")
        self.ui.show_feedback(f"VOZ {status}", duration=60)
        if enabled:
            self.voice.speak("voz activada")
        return enabled

    def run_menu_action(self, action):
        """
        Ejecuta una opción del menú y lo cierra.

        Args:
            action (str): Acción devuelta por UIRenderer.menu_items
        """
        self.showing_menu = False
        if action == "clear_history":
            self.clear_history()
        elif action == "toggle_dumb":
            self.toggle_dumb_mode()
        elif action == "toggle_appearance":
            self.toggle_appearance()
        elif action == "system_appearance":
            self.set_appearance(AppearanceMode.SYSTEM)
        elif action == "about":
            self.showing_about = True

    def menu_items(self):
        return self.ui.menu_items(self.dumb.enabled, self.preferences.appearance_mode)

    # ------------------------------------------------------------------
    # Entrada
    # ------------------------------------------------------------------
    def handle_mouse(self, event, x, y, flags=0, param=None):
        """
        Callback de ratón de OpenCV.

        Comportamiento:
            - Pantalla "Acerca de" abierta: cualquier clic la cierra
            - Menú abierto: clic en una opción la ejecuta; fuera, lo cierra
            - Clic en "...": abre el menú
            - Clic en un botón: lo pulsa (un doble clic rápido pulsa dos veces)
            - Doble clic en el display: reinicia la calculadora
        """
        if event not in (cv2.EVENT_LBUTTONDOWN, cv2.EVENT_LBUTTONDBLCLK):
            return

        if self.showing_about:
            self.showing_about = False
            return

        if self.showing_menu:
            if event == cv2.EVENT_LBUTTONDOWN:
                action = self.ui.menu_item_at(x, y, self.menu_items())
                self.run_menu_action(action)
            return

        if self.ui.in_menu_button(x, y):
            self.showing_menu = True
            return

        token = self.ui.button_at(x, y, self.layout)
        if token is not None:
            self.press(token)
        elif event == cv2.EVENT_LBUTTONDBLCLK and self.ui.in_display(x, y):
            self.reset()

    def handle_key(self, key):
        """
        Procesa una tecla devuelta por cv2.waitKeyEx.

        Args:
            key (int): Código de tecla (-1 si no se pulsó ninguna)

        Returns:
            bool: False si la aplicación debe terminar

        Las teclas especiales (Insert, flechas, F1...) llegan con códigos
        mayores que 0xFF y se ignoran: su byte bajo coincide con letras
        como "c" o "h".
        """
        if key < 0 or key > 0xFF:
            return True

        if self.showing_about:
            self.showing_about = False
            return True
        if self.showing_menu:
            if key == KEY_ESC:
                self.showing_menu = False
            return True

        if key == KEY_ESC or key == ord('q'):
            return False
        if key in KEY_ENTER:
            self.press(EQUALS)
            return True
        if key in KEY_BACKSPACE:
            self.reset()
            return True

        char = chr(key)
        if char.isdigit():
            self.press(char)
        elif char in ".,":
            self.press(self.config.decimal_separator)
        elif char == "=":
            self.press(EQUALS)
        elif Operation.from_symbol(char) is not None:
            self.press(Operation.from_symbol(char).symbol)
        elif char == 'c':
            self.reset()
        elif char == 'd':
            self.toggle_dumb_mode()
        elif char == 't':
            self.toggle_appearance()
        elif char == 's':
            self.set_appearance(AppearanceMode.SYSTEM)
        elif char == 'h':
            self.clear_history()
        elif char == 'i':
            self.showing_about = True
        elif char == 'm':
            self.showing_menu = True
        elif char == 'v':
            self.toggle_voice()
        return True

    # ------------------------------------------------------------------
    # Renderizado y bucle
    # ------------------------------------------------------------------
    def render(self):
        """
        Dibuja un frame completo de la ventana.

        Returns:
            np.array: Imagen BGR lista para cv2.imshow
        """
        frame = self.ui.new_frame()
        self.ui.draw_menu_bar(frame, self.dumb.enabled, self.config.voice_enabled)
        self.ui.draw_history(frame, self.calc.history)
        self.ui.draw_display(frame, self.calc)
        self.ui.draw_buttons(frame, self.layout)
        self.ui.draw_feedback(frame)
        if self.showing_menu:
            self.ui.draw_menu(frame, self.menu_items())
        if self.showing_about:
            self.ui.draw_about(frame, VERSION)
        return frame

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar la ventana
            2. Mostrar frame y esperar teclas (~30 FPS)
            3. Los clics llegan por el callback de ratón
            4. Repetir hasta ESC, 'q' o cierre de la ventana
        """
        title = self.config.window_title

        print("\n" + "="*70)
        print("CALCULADORA TONTA")
        print("="*70)
        print("\nClic en los botones o teclado: 0-9 , + - * / Enter")
        print("Doble clic en el display (o 'c'): reiniciar")
        print("'...' o 'm': menu | 'd': modo tonto | 't': claro/oscuro | 's': sistema")
        print("'h': borrar historial | 'i': acerca de | 'v': voz")
        print("\nPresiona ESC o 'q' para salir")
        print("="*70 + "\n")

        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self.handle_mouse)

        while True:
            cv2.imshow(title, self.render())
            key = cv2.waitKeyEx(30)
            if not self.handle_key(key):
                break
            # Ventana cerrada con el botón del sistema
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                break

        cv2.destroyAllWindows()
        self.voice.wait(timeout=2)
        print("\nOK Aplicacion cerrada correctamente")

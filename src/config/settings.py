"""
Configuración de la calculadora.

Este módulo contiene la configuración centralizada: formato de números,
dimensiones de la ventana, modo tonto y feedback por voz.
"""

from core.operations import Operation

MIN_WINDOW_WIDTH = 240
MIN_WINDOW_HEIGHT = 480


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Opciones de la calculadora y de su interfaz
# Responsabilidades:
#   - Formato de números (separador decimal, decimales máximos)
#   - Dimensiones de la ventana
#   - Probabilidad de error del modo tonto
#   - Preferencias de voz (volumen, velocidad, idioma)
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora tonta.

    Las preferencias que el usuario cambia desde el menú (apariencia y modo
    tonto) no viven aquí sino en config.preferences, que las persiste.
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # FORMATO DE NÚMEROS
        # ====================================================================
        self.decimal_separator = ","        # Glifo del separador decimal
        self.max_fraction_digits = 10       # Máximo de decimales mostrados

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_width = 480             # Ancho en píxeles (= lado de la botonera)
        self.window_height = 860            # Alto en píxeles
        self.window_title = "Calculadora Tonta"
        self.history_lines = 6              # Entradas visibles en el historial

        # ====================================================================
        # MODO TONTO
        # ====================================================================
        self.dumb_error_probability = 0.3   # Probabilidad de falsear un resultado

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = False          # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # FEEDBACK VISUAL
        # ====================================================================
        self.feedback_duration = 40         # Frames que dura un mensaje temporal

    def validate(self):
        """
        Comprueba que la configuración es coherente.

        Raises:
            ValueError: Si algún valor está fuera de rango
        """
        sep = self.decimal_separator
        if (not isinstance(sep, str) or len(sep) != 1 or sep.isdigit()
                or sep == "=" or Operation.from_symbol(sep) is not None):
            raise ValueError(f"separador decimal no válido: {sep!r}")
        if not 0 <= int(self.max_fraction_digits) <= 15:
            raise ValueError("max_fraction_digits debe estar entre 0 y 15")
        if not 0.0 <= float(self.dumb_error_probability) <= 1.0:
            raise ValueError("dumb_error_probability debe estar entre 0.0 y 1.0")
        if self.window_width < MIN_WINDOW_WIDTH or self.window_height < MIN_WINDOW_HEIGHT:
            raise ValueError(
                f"ventana demasiado pequeña (mínimo {MIN_WINDOW_WIDTH}x{MIN_WINDOW_HEIGHT})")
        if self.window_height <= self.window_width:
            raise ValueError("la ventana debe ser más alta que ancha para la botonera")
        return self

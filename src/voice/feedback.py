"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para anunciar botones y resultados,
ejecutándose de forma asíncrona para no bloquear la ventana.
"""

import re
import threading
import pyttsx3
from collections import deque

from core.operations import Operation

NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
}

OPERATIONS_ES = {
    Operation.ADD: "más",
    Operation.SUBTRACT: "menos",
    Operation.MULTIPLY: "por",
    Operation.DIVIDE: "dividido",
}


def voice_matches_language(voice, language):
    """
    Comprueba si una voz de pyttsx3 habla el idioma `language` ('es', 'en', ...).

    Criterios:
        - Etiquetas de idioma de la voz (espeak: b'\\x05es'): "es" o "es-ES"
        - Segmento del identificador delimitado (SAPI: "TTS_MS_ES-ES_HELENA",
          espeak: "roa/es"); "\\Voices\\Tokens" no cuenta como "es"
    """
    for lang in getattr(voice, 'languages', None) or []:
        if isinstance(lang, bytes):
            lang = lang.decode(errors='ignore')
        tag = str(lang).lower().lstrip('\x05').replace('_', '-')
        if tag == language or tag.startswith(language + '-'):
            return True
    pattern = rf"(^|[^a-z]){re.escape(language)}([-_]|$)"
    return re.search(pattern, str(voice.id).lower()) is not None


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar dígitos, operaciones y resultados en español
#   - Ejecutar en hilo separado para no bloquear la ventana
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no toca el estado de la calculadora)
        - Cola de mensajes (máximo 5, se descartan los más antiguos)
        - Configuración de volumen, velocidad e idioma
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (CalculatorConfig): Configuración con las opciones de voz

        Si el motor no se puede inicializar (ej: falta espeak en Linux),
        la voz queda desactivada y la calculadora sigue funcionando.
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)  # Cola de máximo 5 mensajes
        self.decimal_separator = getattr(config, "decimal_separator", ",")
        self._thread = None

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False

    @property
    def available(self):
        return self.engine is not None

    def _configure_engine(self):
        """
        Configura el motor de voz con las preferencias del usuario.
        Busca una voz cuyo identificador o idiomas coincidan con voice_language.
        """
        if not self.engine:
            return

        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)

            language = self.config.voice_language.lower()
            for voice in self.engine.getProperty('voices') or []:
                if voice_matches_language(voice, language):
                    self.engine.setProperty('voice', voice.id)
                    print(f"✓ Voz seleccionada: {voice.name}")
                    break
            else:
                print(f"⚠ No se encontró voz para '{language}'. Usando voz predeterminada.")
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    def toggle(self):
        """
        Activa o desactiva la voz.

        Returns:
            bool: Nuevo estado (siempre False si no hay motor disponible)
        """
        self.config.voice_enabled = self.available and not self.config.voice_enabled
        return self.config.voice_enabled

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        self.message_queue.append(text)

        if not self.is_speaking:
            self.is_speaking = True
            self._thread = threading.Thread(target=self._process_queue, daemon=True)
            self._thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while len(self.message_queue) > 0:
            message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

        self.is_speaking = False

    def wait(self, timeout=None):
        """Espera a que termine la cola actual (usado al cerrar la aplicación)."""
        if self._thread is not None:
            self._thread.join(timeout)

    def speak_token(self, token):
        """
        Anuncia el botón pulsado.

        Args:
            token (str): Dígito, separador decimal u operador
        """
        if token in NUMBERS_ES:
            self.speak(NUMBERS_ES[token])
        elif token == self.decimal_separator:
            self.speak("coma")
        else:
            operation = Operation.from_symbol(token)
            if operation is not None:
                self.speak(OPERATIONS_ES[operation])

    def speak_result(self, result):
        """
        Reproduce el resultado de un cálculo de forma natural.

        Args:
            result (str): Resultado formateado (ej: "2,5" → "igual a 2 coma 5")
        """
        result_text = result.replace(self.decimal_separator, ' coma ').replace('-', 'menos ')
        self.speak(f"igual a {result_text}")

"""Tests del feedback por voz con un motor pyttsx3 simulado."""

from types import SimpleNamespace

import pytest

import voice.feedback as feedback
from config.settings import CalculatorConfig
from voice.feedback import VoiceFeedback


class FakeEngine:
    def __init__(self):
        self.properties = {}
        self.said = []
        self.voices = [
            SimpleNamespace(id="english", name="English", languages=[b"\x05en"]),
            SimpleNamespace(id="spanish", name="Spanish", languages=[b"\x05es"]),
        ]

    def setProperty(self, name, value):
        self.properties[name] = value

    def getProperty(self, name):
        if name == "voices":
            return self.voices
        return self.properties.get(name)

    def say(self, text):
        self.said.append(text)

    def runAndWait(self):
        pass


@pytest.fixture
def engine(monkeypatch):
    fake = FakeEngine()
    monkeypatch.setattr(feedback.pyttsx3, "init", lambda: fake)
    return fake


@pytest.fixture
def config():
    config = CalculatorConfig()
    config.voice_enabled = True
    return config


def speak_and_wait(voice, method, *args):
    getattr(voice, method)(*args)
    voice.wait(timeout=5)


def test_engine_is_configured(engine, config):
    VoiceFeedback(config)
    assert engine.properties["volume"] == config.voice_volume
    assert engine.properties["rate"] == config.voice_rate
    assert engine.properties["voice"] == "spanish"


SAPI_TOKENS = r"HKEY_LOCAL_MACHINE\SOFTWARE\Microsoft\Speech\Voices\Tokens"


def test_windows_voice_ids_select_spanish(engine, config, capsys):
    engine.voices = [
        SimpleNamespace(id=SAPI_TOKENS + r"\TTS_MS_EN-US_ZIRA_11.0",
                        name="Microsoft Zira Desktop", languages=[]),
        SimpleNamespace(id=SAPI_TOKENS + r"\TTS_MS_ES-ES_HELENA_11.0",
                        name="Microsoft Helena Desktop", languages=[]),
    ]
    VoiceFeedback(config)
    assert engine.properties["voice"].endswith("TTS_MS_ES-ES_HELENA_11.0")
    assert "Helena" in capsys.readouterr().out


def test_no_matching_voice_keeps_default(engine, config, capsys):
    engine.voices = [
        SimpleNamespace(id=SAPI_TOKENS + r"\TTS_MS_EN-US_ZIRA_11.0",
                        name="Microsoft Zira Desktop", languages=[]),
    ]
    VoiceFeedback(config)
    assert "voice" not in engine.properties
    assert "⚠" in capsys.readouterr().out


@pytest.mark.parametrize("voice_id, languages, expected", [
    ("spanish", [b"\x05es"], True),
    ("spanish-latin-am", [b"\x05es-419"], True),
    ("roa/es", [], True),
    ("english", [b"\x05en"], False),
    ("estonian", [b"\x05et"], False),
])
def test_voice_matches_language(voice_id, languages, expected):
    voice = SimpleNamespace(id=voice_id, languages=languages)
    assert feedback.voice_matches_language(voice, "es") is expected


def test_disabled_voice_is_silent(engine):
    voice = VoiceFeedback(CalculatorConfig())
    speak_and_wait(voice, "speak", "hola")
    assert engine.said == []


@pytest.mark.parametrize("token, spoken", [
    ("5", "cinco"),
    (",", "coma"),
    ("+", "más"),
    ("-", "menos"),
    ("×", "por"),
    ("÷", "dividido"),
])
def test_speak_token(engine, config, token, spoken):
    voice = VoiceFeedback(config)
    speak_and_wait(voice, "speak_token", token)
    assert engine.said == [spoken]


def test_unknown_token_is_silent(engine, config):
    voice = VoiceFeedback(config)
    speak_and_wait(voice, "speak_token", "?")
    assert engine.said == []


def test_speak_result(engine, config):
    voice = VoiceFeedback(config)
    speak_and_wait(voice, "speak_result", "2,5")
    speak_and_wait(voice, "speak_result", "-3")
    assert engine.said == ["igual a 2 coma 5", "igual a menos 3"]


def test_toggle(engine):
    config = CalculatorConfig()
    voice = VoiceFeedback(config)
    assert voice.toggle() is True
    assert config.voice_enabled is True
    assert voice.toggle() is False


def test_init_failure_disables_voice(monkeypatch, config, capsys):
    def broken_init():
        raise RuntimeError("sin espeak")

    monkeypatch.setattr(feedback.pyttsx3, "init", broken_init)
    voice = VoiceFeedback(config)
    assert voice.available is False
    assert config.voice_enabled is False
    assert voice.toggle() is False
    voice.speak("hola")
    assert "⚠" in capsys.readouterr().out

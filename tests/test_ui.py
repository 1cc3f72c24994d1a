"""Tests del renderizador: geometría de clics y dibujo sobre lienzos numpy."""

import pytest

cv2 = pytest.importorskip("cv2")

from config.preferences import AppearanceMode
from core.calculator import Calculator
from core.history import History
from core.layout import ButtonLayout
from ui.renderer import UIRenderer, to_ascii
from ui.theme import DARK, LIGHT, ORANGE, resolve_theme

WIDTH, HEIGHT = 480, 860


@pytest.fixture
def ui():
    return UIRenderer(WIDTH, HEIGHT)


def test_regions(ui):
    assert ui.grid_top == HEIGHT - WIDTH
    assert ui.history_top < ui.display_top < ui.grid_top


def test_button_at_default_layout(ui):
    layout = ButtonLayout()
    cell = WIDTH // 4
    assert ui.button_at(10, ui.grid_top + 10, layout) == "7"
    assert ui.button_at(cell + 10, ui.grid_top + cell + 10, layout) == "5"
    assert ui.button_at(WIDTH - 1, HEIGHT - 1, layout) == "+"
    assert ui.button_at(10, ui.grid_top - 1, layout) is None
    assert ui.button_at(-5, HEIGHT - 1, layout) is None


def test_display_and_menu_button_hits(ui):
    assert ui.in_display(100, ui.display_top + 5)
    assert not ui.in_display(100, ui.grid_top + 5)
    assert not ui.in_display(100, ui.history_top + 5)
    assert ui.in_menu_button(WIDTH - 30, 20)
    assert not ui.in_menu_button(20, 20)


def test_menu_items_follow_state(ui):
    labels = dict(ui.menu_items(False, AppearanceMode.DARK))
    assert labels["toggle_dumb"] == "Activar modo tonto"
    assert labels["toggle_appearance"] == "Modo claro"
    labels = dict(ui.menu_items(True, AppearanceMode.LIGHT))
    assert labels["toggle_dumb"] == "Desactivar modo tonto"
    assert labels["toggle_appearance"] == "Modo oscuro"


def test_menu_item_at(ui):
    items = ui.menu_items(False, AppearanceMode.SYSTEM)
    for index, (action, _) in enumerate(items):
        x, y, w, h = ui.menu_item_rect(index, len(items))
        assert ui.menu_item_at(x + w // 2, y + h // 2, items) == action
    assert ui.menu_item_at(5, 5, items) is None


def test_themes():
    assert resolve_theme(AppearanceMode.SYSTEM) is DARK
    assert resolve_theme(AppearanceMode.DARK) is DARK
    assert resolve_theme("light") is LIGHT


def test_new_frame_uses_theme_background(ui):
    frame = ui.new_frame()
    assert frame.shape == (HEIGHT, WIDTH, 3)
    assert frame[0, 0].tolist() == list(DARK["background"])
    ui.set_appearance(AppearanceMode.LIGHT)
    assert ui.new_frame()[0, 0].tolist() == list(LIGHT["background"])


def test_draw_buttons_fills_grid(ui):
    frame = ui.new_frame()
    ui.draw_buttons(frame, ButtonLayout())
    assert frame[ui.grid_top + 5, 5].tolist() == list(ORANGE)
    assert frame[ui.grid_top - 5, 5].tolist() == list(DARK["background"])


def test_draw_display_and_history(ui):
    calc = Calculator()
    for token in "12345+6=":
        calc.press(token)

    frame = ui.new_frame()
    ui.draw_display(frame, calc)
    assert frame[ui.display_top:ui.grid_top].any()

    frame = ui.new_frame()
    ui.draw_history(frame, calc.history)
    assert frame[ui.history_top:ui.display_top].any()
    assert not frame[ui.grid_top:].any()


def test_long_numbers_still_render(ui):
    calc = Calculator()
    for token in "9" * 60:
        calc.press(token)
    frame = ui.new_frame()
    ui.draw_display(frame, calc)
    assert frame[ui.display_top:ui.grid_top].any()


def test_feedback_counts_down(ui):
    ui.show_feedback("= 8", duration=3)
    frame = ui.new_frame()
    ui.draw_feedback(frame)
    assert ui.feedback_timer == 2
    for _ in range(5):
        ui.draw_feedback(frame)
    assert ui.feedback_timer == 0


def test_overlays_draw(ui):
    frame = ui.new_frame()
    ui.draw_menu_bar(frame, dumb_enabled=True, voice_enabled=True)
    ui.draw_menu(frame, ui.menu_items(True, AppearanceMode.DARK))
    ui.draw_about(frame, "1.0")
    ui.draw_history(frame, History())
    assert frame.any()


def test_to_ascii():
    assert to_ascii("6 ÷ 2 × 3 − 1") == "6 / 2 x 3 - 1"
    assert to_ascii("-∞") == "-inf"

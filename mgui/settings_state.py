"""The settings screen: a sound slider, sample widgets and a debug overlay."""

from __future__ import annotations

from typing import Dict, Optional

import pygame

from mgui.base import Color, Vector2
from mgui.button import Button, _default_font
from mgui.example_item import Example, ExampleListViewItem
from mgui.listview import ListView, ListViewAdapter
from mgui.scroll import Scroll
from mgui.select import Select
from mgui.slider import Slider
from mgui.state import State, StateData

_GAP = 50.0
_BUTTON_SIZE = (150.0, 50.0)
_CHARACTER_SIZE = 32
_DEBUG_CHARACTER_SIZE = 16
_SLIDER_HEIGHT = 16.0
_ITEM_HEIGHT = 60.0
_PRODUCT_COUNT = 20
_KEYBINDS_FILE = "mainmenustate_keybinds.ini"

_VERTICAL_LINE_LENGTH = 800.0
_HORIZONTAL_LINE_LENGTH = 1200.0


class SettingsState(State):
    """Settings screen with a volume slider, a product list and crosshair lines."""

    def __init__(self, data: StateData) -> None:
        super().__init__(data)
        self.background_size = Vector2()
        self.background_color = Color.CYAN
        self.text_color = Color.BLACK
        self.buttons: Dict[str, Button] = {}
        self.last_event = None

        self.sound_text = "Sound:"
        self.sound_text_position = Vector2()
        self.sound_value_text = ""
        self.sound_value_position = Vector2()

        self.debug_text = ""
        self.debug_text_position = Vector2(5.0, 5.0)

        self._label_font = self._text_font(_CHARACTER_SIZE)
        self._debug_font = self._text_font(_DEBUG_CHARACTER_SIZE)

        self.load_keybinds(self.data.config_dir / _KEYBINDS_FILE)
        self._init_gui()
        self.on_resize_window()

    def update_keyboard_input(self, event) -> None:
        """Remember the latest event; the settings screen has no keyboard shortcuts."""
        self.last_event = event

    def update_events(self, event) -> None:
        self.update_keyboard_input(event)
        for button in self.buttons.values():
            button.update_events(event, self.mouse_pos_view)
        self.sound_slider.update_events(event, self.mouse_pos_view)
        self.list_view.update_events(event, self.mouse_pos_view)
        self.select.update_events(event, self.mouse_pos_view)
        self.scroll.update_events(event, self.mouse_pos_view)

    def on_resize_window(self) -> None:
        center = self.window_center
        width, height = self.data.window.get_size()
        self.background_size = Vector2(float(width), float(height))

        back = self.buttons["BACK"]
        back.position = (width - _BUTTON_SIZE[0] - _GAP, height - _BUTTON_SIZE[1] - _GAP)
        self.buttons["APPLY"].position = (back.left - _BUTTON_SIZE[0] - _GAP, height - _BUTTON_SIZE[1] - _GAP)

        text_width, text_height = self._label_font.size(self.sound_text)
        self.sound_text_position = Vector2(center.x / 2.0 - text_width / 2.0, _GAP)
        self.sound_value_position = Vector2(3.0 * center.x / 2.0, _GAP)

        slider_start = self.sound_text_position.x + text_width + _GAP
        self.sound_slider.position = (slider_start, _GAP + text_height / 2.0)

        slider_end = self.sound_value_position.x - _GAP
        new_width = slider_end - slider_start
        if new_width > 0:
            self.sound_slider.set_size((new_width, _SLIDER_HEIGHT))

    def update_gui(self, dt: float) -> None:
        for button in self.buttons.values():
            button.update(self.mouse_pos_view)
        self.sound_slider.update(self.mouse_pos_view)
        self.list_view.update(self.mouse_pos_view)
        self.select.update(self.mouse_pos_view)
        self.scroll.update(self.mouse_pos_view)

    def update(self, dt: float) -> None:
        self.update_mouse_positions()
        self.update_gui(dt)
        x, y = self.mouse_pos_window
        self.debug_text = f"{int(x)} {int(y)}"

    def render_gui(self, surface: pygame.Surface) -> None:
        for button in self.buttons.values():
            button.draw(surface)

        self._blit_text(surface, self._label_font, self.sound_text, self.sound_text_position)
        self._blit_text(surface, self._label_font, self.sound_value_text, self.sound_value_position)
        self.sound_slider.draw(surface)

        self.list_view.draw(surface)
        self.select.draw(surface)
        self.scroll.draw(surface)

    def render(self, surface: pygame.Surface) -> None:
        width, height = self.background_size
        pygame.draw.rect(surface, tuple(self.background_color), pygame.Rect(0, 0, int(width), int(height)))

        self.render_gui(surface)

        mx, my = self.mouse_pos_view
        pygame.draw.line(surface, tuple(Color.RED), (mx, 0.0), (mx, _VERTICAL_LINE_LENGTH))
        pygame.draw.line(surface, tuple(Color.BLUE), (0.0, my), (_HORIZONTAL_LINE_LENGTH, my))

        self._blit_text(surface, self._debug_font, self.debug_text, self.debug_text_position)

    def _text_font(self, size: int) -> pygame.font.Font:
        return self._font(size) or _default_font(size)

    def _blit_text(self, surface, font, text: str, position: Vector2) -> None:
        if text:
            surface.blit(font.render(text, True, tuple(self.text_color)), (position.x, position.y))

    def _init_gui(self) -> None:
        button_font: Optional[pygame.font.Font] = self._font(_CHARACTER_SIZE)
        self.buttons["BACK"] = Button((100.0, 100.0), _BUTTON_SIZE, "Back", _CHARACTER_SIZE, font=button_font)
        self.buttons["APPLY"] = Button((100.0, 200.0), _BUTTON_SIZE, "Apply", _CHARACTER_SIZE, font=button_font)
        self.buttons["BACK"].on_pressed(self.end_state)

        self.sound_slider = Slider((100.0, 100.0), (250.0, _SLIDER_HEIGHT), 0, 100, 50)
        self.sound_slider.on_value_change(self._refresh_sound_value)
        self._refresh_sound_value()

        products = [
            Example(f"#{i}", 100.0 + i * 0.5, 0 if i % 100 == 0 else 5)
            for i in range(_PRODUCT_COUNT)
        ]
        adapter = ListViewAdapter(products, self._font(int(_ITEM_HEIGHT * 0.2)), _ITEM_HEIGHT, ExampleListViewItem)
        self.list_view = ListView((200.0, 200.0), (200.0, 300.0), adapter)

        self.select = Select((500.0, 200.0), (200.0, 100.0))
        self.scroll = Scroll((800.0, 200.0), (20.0, 200.0))

    def _refresh_sound_value(self) -> None:
        self.sound_value_text = f"{self.sound_slider.value}%"
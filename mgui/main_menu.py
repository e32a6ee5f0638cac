"""The main menu screen."""

from __future__ import annotations

from typing import Dict

import pygame

from mgui.base import Color, Vector2
from mgui.button import Button
from mgui.state import State, StateData

_GAP = 50.0
_BUTTON_SIZE = (250.0, 50.0)
_CHARACTER_SIZE = 32
_KEYBINDS_FILE = "mainmenustate_keybinds.ini"


class MainMenuState(State):
    """A column of buttons that open the other screens or quit."""

    def __init__(self, data: StateData) -> None:
        super().__init__(data)
        self.background_size = Vector2()
        self.background_color = Color.MAGENTA
        self.buttons: Dict[str, Button] = {}
        self.last_event = None

        self.load_keybinds(self.data.config_dir / _KEYBINDS_FILE)
        self._init_gui()
        self.on_resize_window()

    def update_keyboard_input(self, event) -> None:
        """Remember the latest event; the main menu has no keyboard shortcuts."""
        self.last_event = event

    def update_events(self, event) -> None:
        self.update_keyboard_input(event)
        for button in self.buttons.values():
            button.update_events(event, self.mouse_pos_view)

    def on_resize_window(self) -> None:
        center = self.window_center
        width, height = self.data.window.get_size()
        self.background_size = Vector2(float(width), float(height))

        first = self.buttons["GAME_STATE"]
        first.position = (center.x - 125.0, _GAP)

        second = self.buttons["SETTINGS_STATE"]
        second.position = (first.left, first.bottom + _GAP)

        self.buttons["DIALOG_BOX_STATE"].position = (first.left, second.bottom + _GAP)
        self.buttons["EXIT_STATE"].position = (first.left, height - 50.0 - _GAP)

    def update_gui(self) -> None:
        for button in self.buttons.values():
            button.update(self.mouse_pos_view)

    def update(self, dt: float) -> None:
        self.update_mouse_positions()
        self.update_gui()

    def render_gui(self, surface: pygame.Surface) -> None:
        for button in self.buttons.values():
            button.draw(surface)

    def render(self, surface: pygame.Surface) -> None:
        width, height = self.background_size
        pygame.draw.rect(surface, tuple(self.background_color), pygame.Rect(0, 0, int(width), int(height)))
        self.render_gui(surface)

    def _init_gui(self) -> None:
        font = self._font(_CHARACTER_SIZE)
        labels = {
            "GAME_STATE": ((100.0, 100.0), "New Game"),
            "SETTINGS_STATE": ((100.0, 200.0), "Settings"),
            "DIALOG_BOX_STATE": ((100.0, 300.0), "Dialog Box"),
            "EXIT_STATE": ((100.0, 300.0), "Quit"),
        }
        for name, (position, label) in labels.items():
            self.buttons[name] = Button(position, _BUTTON_SIZE, label, _CHARACTER_SIZE, font=font)

        self.buttons["SETTINGS_STATE"].on_pressed(self._open_settings)
        self.buttons["EXIT_STATE"].on_pressed(self.end_state)

    def _open_settings(self) -> None:
        from mgui.settings_state import SettingsState

        self.data.states.append(SettingsState(self.data))
"""The game loop: window, event dispatch and the stack of screens."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Dict, List, Optional

import pygame

from mgui.base import (
    Closed,
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseMoved,
    MouseWheelScrolled,
    Resized,
    Vector2,
)
from mgui.graphics_settings import GraphicsSettings
from mgui.main_menu import MainMenuState
from mgui.state import State, StateData

_DEFAULT_CONFIG_DIR = Path("config")
_GRAPHICS_FILE = "graphics.ini"
_SUPPORTED_KEYS_FILE = "supported_keys.ini"
_FONT_FILE = "font.ttf"
_GRID_SIZE = 50.0

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    6: MouseButton.EXTRA1,
    7: MouseButton.EXTRA2,
}


def load_supported_keys(path) -> Dict[str, int]:
    """Read ``name code`` pairs, stopping at the first code that is not an integer."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return {}
    tokens = text.split()
    keys: Dict[str, int] = {}
    for name, code in zip(tokens[::2], tokens[1::2]):
        try:
            keys[name] = int(code)
        except ValueError:
            break
    return keys


def _convert_event(raw):
    if raw.type == pygame.QUIT:
        return Closed()
    if raw.type == pygame.VIDEORESIZE:
        return Resized(int(raw.w), int(raw.h))
    if raw.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _MOUSE_BUTTONS.get(raw.button)
        if button is None:
            return None
        kind = MouseButtonPressed if raw.type == pygame.MOUSEBUTTONDOWN else MouseButtonReleased
        return kind(button, Vector2(*raw.pos))
    if raw.type == pygame.MOUSEMOTION:
        return MouseMoved(Vector2(*raw.pos))
    if raw.type == pygame.MOUSEWHEEL:
        return MouseWheelScrolled(float(raw.y), Vector2(*pygame.mouse.get_pos()))
    return None


class Game:
    """Owns the window and runs the screen on top of the state stack."""

    def __init__(self, config_dir=None) -> None:
        self.config_dir = Path(config_dir) if config_dir is not None else _DEFAULT_CONFIG_DIR
        self.dt = 0.0
        self.grid_size = _GRID_SIZE
        self._last_tick = time.perf_counter()
        self._clock = pygame.time.Clock()

        pygame.init()

        self.gfx_settings = GraphicsSettings()
        self.gfx_settings.load_from_file(self.config_dir / _GRAPHICS_FILE)

        self.window = self._create_window()
        self._open = True

        self.supported_keys = load_supported_keys(self.config_dir / _SUPPORTED_KEYS_FILE)

        font_file = self.config_dir / _FONT_FILE
        self.states: List[State] = []
        self.state_data = StateData(
            grid_size=self.grid_size,
            window=self.window,
            gfx_settings=self.gfx_settings,
            supported_keys=self.supported_keys,
            states=self.states,
            config_dir=self.config_dir,
            font_path=str(font_file) if font_file.is_file() else None,
        )
        self.states.append(MainMenuState(self.state_data))

    @property
    def is_open(self) -> bool:
        return self._open

    def update_dt(self) -> None:
        now = time.perf_counter()
        self.dt = now - self._last_tick
        self._last_tick = now

    def update_events(self) -> None:
        for raw in pygame.event.get():
            event = _convert_event(raw)
            if event is None:
                continue
            if isinstance(event, Closed):
                self._close()
            elif isinstance(event, Resized):
                self.gfx_settings.resolution = (event.width, event.height)
                surface = pygame.display.get_surface()
                if surface is not None:
                    self.window = surface
                    self.state_data.window = surface
                if self.states:
                    self.states[-1].on_resize_window()
            if self.states:
                self.states[-1].update_events(event)

    def update(self) -> None:
        self.update_events()

        if self.states:
            top = self.states[-1]
            top.update(self.dt)
            if top.quit:
                top.end_state()
                self.states.pop()
                if self.states:
                    self.states[-1].on_resize_window()
        else:
            self.end_application()

    def render(self) -> None:
        if not self._open:
            return
        self.window.fill((0, 0, 0))
        if self.states:
            self.states[-1].render(self.window)
        pygame.display.flip()

    def run(self) -> None:
        while self._open:
            self.update_dt()
            self.update()
            self.render()
            self._clock.tick(self.gfx_settings.frame_rate_limit)

    def end_application(self) -> None:
        """Announce the end of the application and close the window."""
        print("Ending Application!")
        self._close()

    def _create_window(self) -> pygame.Surface:
        settings = self.gfx_settings
        flags = pygame.FULLSCREEN if settings.fullscreen else pygame.RESIZABLE
        try:
            window = pygame.display.set_mode(settings.resolution, flags, vsync=int(settings.vertical_sync))
        except pygame.error:
            window = pygame.display.set_mode(settings.resolution, flags)
        pygame.display.set_caption(settings.title)
        return window

    def _close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the widget demo.")
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=_DEFAULT_CONFIG_DIR,
        help="directory holding graphics.ini, supported_keys.ini and keybind files",
    )
    args = parser.parse_args(argv)
    try:
        Game(args.config_dir).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
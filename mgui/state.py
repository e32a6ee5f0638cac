"""The shared data of the game screens and the base class of every screen."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from mgui.base import Vector2
from mgui.graphics_settings import GraphicsSettings


@dataclass
class StateData:
    """Everything a screen needs from the game that owns it."""

    grid_size: float = 0.0
    window: Optional[pygame.Surface] = None
    gfx_settings: Optional[GraphicsSettings] = None
    supported_keys: Dict[str, int] = field(default_factory=dict)
    states: List["State"] = field(default_factory=list)
    config_dir: Path = Path("config")
    font_path: Optional[str] = None
    pointer: Callable[[], Tuple[int, int]] = pygame.mouse.get_pos


class State(ABC):
    """One screen of the game; the top of the state stack is the active one."""

    def __init__(self, data: StateData) -> None:
        self.data = data
        self.keybinds: Dict[str, int] = {}
        self.paused = False
        self.keytime = 0.0
        self.keytime_max = 10.0
        self.mouse_pos_screen = Vector2()
        self.mouse_pos_window = Vector2()
        self.mouse_pos_view = Vector2()
        self.textures: Dict[str, pygame.Surface] = {}
        self._quit = False

    def update_mouse_positions(self) -> None:
        x, y = self.data.pointer()
        self.mouse_pos_screen = Vector2(x, y)
        self.mouse_pos_window = Vector2(x, y)
        self.mouse_pos_view = Vector2(float(x), float(y))

    def update_keytime(self, dt: float) -> None:
        if self.keytime < self.keytime_max:
            self.keytime += 100.0 * dt

    def get_keytime(self) -> bool:
        """Whether the key delay has elapsed; it restarts when it has."""
        if self.keytime >= self.keytime_max:
            self.keytime = 0.0
            return True
        return False

    @property
    def window_center(self) -> Vector2:
        width, height = self.data.window.get_size()
        return Vector2(width / 2.0, height / 2.0)

    @property
    def quit(self) -> bool:
        return self._quit

    def end_state(self) -> None:
        self._quit = True

    def pause_state(self) -> None:
        self.paused = True

    def unpause_state(self) -> None:
        self.paused = False

    def load_keybinds(self, path) -> None:
        """Read ``action key`` pairs and bind each action to a supported key code.

        A missing file binds nothing; a key that is not supported raises KeyError.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            return
        tokens = text.split()
        for action, key in zip(tokens[::2], tokens[1::2]):
            self.keybinds[action] = self.data.supported_keys[key]

    def _font(self, size: int) -> Optional[pygame.font.Font]:
        if self.data.font_path is None:
            return None
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(self.data.font_path, size)

    @abstractmethod
    def update_keyboard_input(self, event) -> None:
        """React to keyboard input."""

    @abstractmethod
    def update_events(self, event) -> None:
        """React to one input event."""

    @abstractmethod
    def on_resize_window(self) -> None:
        """Lay the screen out again for the current window size."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the screen by ``dt`` seconds."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the screen."""
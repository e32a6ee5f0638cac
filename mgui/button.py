"""A clickable push button with hover, pressed and disabled looks."""

from __future__ import annotations

import functools
from enum import Enum
from typing import Callable, Optional

import pygame

from mgui.base import (
    Color,
    FloatRect,
    GuiElement,
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    Transform,
    Vector2,
)

_OUTLINE_THICKNESS = 1.0
_DISABLED_ALPHA = 150


class ButtonState(Enum):
    NORMAL = 0
    HOVER = 1
    PRESSED = 2
    DISABLED = 3


@functools.lru_cache(maxsize=None)
def _default_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Button(GuiElement):
    """A rectangle with a centred label that runs a callback when clicked."""

    def __init__(
        self,
        position=(0.0, 0.0),
        size=(50.0, 50.0),
        text: str = "Text",
        character_size: int = 24,
        font: Optional[pygame.font.Font] = None,
        text_normal_color: Color = Color.BLACK,
        text_hover_color: Color = Color.WHITE,
        text_pressed_color: Color = Color(200, 200, 200, 255),
        normal_color: Color = Color.WHITE,
        hover_color: Color = Color.BLACK,
        pressed_color: Color = Color(60, 60, 60, 255),
        outline_normal_color: Color = Color.BLACK,
        outline_hover_color: Color = Color.BLACK,
        outline_pressed_color: Color = Color.BLACK,
        id: int = 0,
    ) -> None:
        super().__init__(position)
        self.size = Vector2(*size)
        self.font = font
        self.character_size = int(character_size)
        self.id = id

        self.text_normal_color = text_normal_color
        self.text_hover_color = text_hover_color
        self.text_pressed_color = text_pressed_color
        self.text_disabled_color = Color(text_normal_color.r, text_normal_color.g, text_normal_color.b, _DISABLED_ALPHA)
        self.normal_color = normal_color
        self.hover_color = hover_color
        self.pressed_color = pressed_color
        self.disabled_color = Color(normal_color.r, normal_color.g, normal_color.b, _DISABLED_ALPHA)
        self.outline_normal_color = outline_normal_color
        self.outline_hover_color = outline_hover_color
        self.outline_pressed_color = outline_pressed_color
        self.outline_disabled_color = Color(
            outline_pressed_color.r, outline_pressed_color.g, outline_pressed_color.b, _DISABLED_ALPHA
        )

        self.fill_color = normal_color
        self.text_color = text_normal_color
        self.outline_color = outline_normal_color

        self._state = ButtonState.NORMAL
        self._button_pressed = False
        self._button_released = False
        self._callback: Callable[[], None] = lambda: None
        self._text = ""
        self.set_text(text)

    def update_events(self, event, mouse_pos) -> None:
        if self._state is ButtonState.DISABLED:
            return

        hovered = self.is_hovered(mouse_pos)

        if isinstance(event, MouseButtonPressed) and event.button is MouseButton.LEFT and hovered:
            self._state = ButtonState.PRESSED
            self._button_pressed = True

        if isinstance(event, MouseButtonReleased) and event.button is MouseButton.LEFT and self._button_pressed:
            if hovered:
                self._callback()
            self._button_released = True
            self._button_pressed = False
            self._state = ButtonState.HOVER if hovered else ButtonState.NORMAL

        if not self._button_pressed:
            self._state = ButtonState.HOVER if hovered else ButtonState.NORMAL

    def update(self, mouse_pos) -> None:
        if self._button_released:
            self._button_released = False
            self._state = ButtonState.HOVER if self.is_hovered(mouse_pos) else ButtonState.NORMAL

        colors = {
            ButtonState.NORMAL: (self.normal_color, self.text_normal_color, self.outline_normal_color),
            ButtonState.HOVER: (self.hover_color, self.text_hover_color, self.outline_hover_color),
            ButtonState.PRESSED: (self.pressed_color, self.text_pressed_color, self.outline_pressed_color),
            ButtonState.DISABLED: (self.disabled_color, self.text_disabled_color, self.outline_disabled_color),
        }
        self.fill_color, self.text_color, self.outline_color = colors[self._state]

    @property
    def local_bounds(self) -> FloatRect:
        return self._outlined_bounds(self.size, _OUTLINE_THICKNESS)

    @property
    def is_pressed(self) -> bool:
        return self._state is ButtonState.PRESSED

    @property
    def state(self) -> ButtonState:
        return self._state

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text

    def set_disabled(self, disable: bool) -> None:
        self._state = ButtonState.DISABLED if disable else ButtonState.NORMAL

    def on_pressed(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def is_hovered(self, mouse_pos) -> bool:
        return self.transform.transform_rect(self.local_bounds).contains(mouse_pos)

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(surface, total, self.size, self.fill_color, self.outline_color, _OUTLINE_THICKNESS)
        if self._text:
            font = self.font or _default_font(self.character_size)
            center = (self.size.x / 2.0, self.size.y / 2.0)
            self._draw_text(surface, total, font, self._text, self.text_color, center)
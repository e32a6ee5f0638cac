"""A horizontal slider that picks an integer from a range by dragging a knob."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from mgui.base import (
    Color,
    FloatRect,
    GuiElement,
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseMoved,
    Transform,
    Vector2,
)

_OUTLINE_THICKNESS = 1.0
_INDICATOR_RADIUS_RATIO = 0.7


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Slider(GuiElement):
    """A track with a filled part and a round knob that can be dragged."""

    def __init__(
        self,
        position,
        size,
        min_value: int,
        max_value: int,
        default_value: int = 0,
        step: int = 1,
        background_color: Color = Color(192, 192, 192, 220),
        foreground_color: Color = Color(0, 100, 0, 220),
        indicator_color: Color = Color(240, 240, 240, 255),
    ) -> None:
        super().__init__(position)
        self.size = Vector2(*size)
        self.step = step
        self.min_value = min_value
        self.max_value = max_value
        self._value = default_value

        self.background_color = background_color
        self.foreground_color = foreground_color
        self.indicator_color = indicator_color
        self.outline_color = Color.BLACK

        self.foreground_width = 0.0
        self.indicator_radius = self.size.y * _INDICATOR_RADIUS_RATIO
        self.indicator_center = Vector2()

        self._callback: Callable[[], None] = lambda: None
        self._drag_offset_x = 0.0
        self._indicator_pressed = False

        self._update_indicator_position()

    def update_events(self, event, mouse_pos) -> None:
        indicator_total = self.transform @ self._indicator_transform()
        indicator_bounds = indicator_total.transform_rect(self._indicator_local_bounds())

        if (
            indicator_bounds.contains(mouse_pos)
            and isinstance(event, MouseButtonPressed)
            and event.button is MouseButton.LEFT
        ):
            self._indicator_pressed = True
            center_global = self.transform.transform_point(self.indicator_center)
            self._drag_offset_x = Vector2(*mouse_pos).x - center_global.x

        if self._indicator_pressed:
            if isinstance(event, MouseButtonReleased):
                if event.button is MouseButton.LEFT:
                    self._indicator_pressed = False
            elif isinstance(event, MouseMoved):
                self._handle_drag(mouse_pos)

    def update(self, mouse_pos) -> None:
        """A slider only changes in response to events."""

    @property
    def local_bounds(self) -> FloatRect:
        return self._outlined_bounds(self.size, _OUTLINE_THICKNESS)

    def set_size(self, size) -> None:
        self.size = Vector2(*size)
        self._update_indicator_position()

    @property
    def value(self) -> int:
        return self._value

    @property
    def dragging(self) -> bool:
        return self._indicator_pressed

    def on_value_change(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(
            surface, total, self.size, self.background_color, self.outline_color, _OUTLINE_THICKNESS
        )
        self._draw_rectangle(surface, total, (self.foreground_width, self.size.y), self.foreground_color)

        center = total.transform_point(self.indicator_center)
        radius = self.indicator_radius
        if radius > 0:
            pygame.draw.circle(surface, tuple(self.outline_color), tuple(center), radius + _OUTLINE_THICKNESS)
            pygame.draw.circle(surface, tuple(self.indicator_color), tuple(center), radius)

    def _indicator_transform(self) -> Transform:
        r = self.indicator_radius
        return Transform().translate((self.indicator_center.x - r, self.indicator_center.y - r))

    def _indicator_local_bounds(self) -> FloatRect:
        diameter = 2 * self.indicator_radius
        return self._outlined_bounds((diameter, diameter), _OUTLINE_THICKNESS)

    def _update_indicator_position(self) -> None:
        value_range = max(1, self.max_value - self.min_value)
        perc = _clamp((self._value - self.min_value) / value_range, 0.0, 1.0)
        self.foreground_width = self.size.x * perc
        self.indicator_center = Vector2(self.size.x * perc, self.size.y / 2.0)

    def _handle_drag(self, mouse_pos) -> None:
        track_left = self.position.x
        track_width = self.size.x

        new_x = _clamp(Vector2(*mouse_pos).x - self._drag_offset_x, track_left, track_left + track_width)
        perc = (new_x - track_left) / track_width if track_width > 0 else 0.0
        value_range = max(1, self.max_value - self.min_value)
        new_value = self.min_value + int(perc * value_range)

        if new_value != self._value:
            self._value = new_value
            self._update_indicator_position()
            self._callback()
"""A vertical scroll bar with arrow buttons and a draggable indicator."""

from __future__ import annotations

from typing import Callable, Optional

from mgui.base import (
    Color,
    FloatRect,
    GuiElement,
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseMoved,
    MouseWheelScrolled,
    Transform,
    Vector2,
)
from mgui.button import Button

_OUTLINE_THICKNESS = 1.0
_DEFAULT_INDICATOR_HEIGHT = 50.0


def _clamp(value, low, high):
    return min(max(value, low), high)


class Scroll(GuiElement):
    """An integer value in a range, shown as an indicator on a vertical track."""

    def __init__(self, position, size) -> None:
        super().__init__(position)
        self.size = Vector2(*size)
        width = self.size.x

        self._min_value = 0
        self._max_value = 100
        self.step = 1
        self._value = 0
        self._indicator_height = _DEFAULT_INDICATOR_HEIGHT
        self._indicator_top = 0.0
        self._drag_offset_y = 0.0
        self._indicator_pressed = False
        self._callback: Callable[[], None] = lambda: None

        self.fill_color = Color.BLUE
        self.outline_color = Color.BLACK
        self.indicator_color = Color.BLACK

        self.button_up = Button((0.0, 0.0), (width, width), "^", int(width))
        self.button_up.on_pressed(lambda: self._step_by(-1))

        self.button_down = Button((0.0, self.size.y - width), (width, width), "^", int(width))
        self.button_down.origin = (width / 2, width / 2)
        self.button_down.rotation = 180.0
        self.button_down.position = self.button_down.position + (width / 2, width / 2)
        self.button_down.on_pressed(lambda: self._step_by(1))

        self._update_indicator_position()

    def update_events(self, event, mouse_pos) -> None:
        local_mouse = self.map_global_to_local(mouse_pos)
        self.button_up.update_events(event, local_mouse)
        self.button_down.update_events(event, local_mouse)

        indicator_total = self.transform @ self._indicator_transform()
        indicator_bounds = indicator_total.transform_rect(
            FloatRect(Vector2(), Vector2(self.size.x, self._indicator_height))
        )
        if (
            indicator_bounds.contains(mouse_pos)
            and isinstance(event, MouseButtonPressed)
            and event.button is MouseButton.LEFT
        ):
            self._indicator_pressed = True
            top_global = self.transform.transform_point((0.0, self._indicator_top))
            self._drag_offset_y = Vector2(*mouse_pos).y - top_global.y

        if self._indicator_pressed:
            if isinstance(event, MouseButtonReleased):
                if event.button is MouseButton.LEFT:
                    self._indicator_pressed = False
            elif isinstance(event, MouseMoved):
                self._handle_drag(mouse_pos)

        if isinstance(event, MouseWheelScrolled) and self.contains(mouse_pos):
            self.scroll_wheel(int(event.delta))

    def update(self, mouse_pos) -> None:
        local_mouse = self.map_global_to_local(mouse_pos)
        self.button_up.update(local_mouse)
        self.button_down.update(local_mouse)

    @property
    def local_bounds(self) -> FloatRect:
        shape_area = self._outlined_bounds(self.size, _OUTLINE_THICKNESS)
        up_area = self.button_up.transform.transform_rect(self.button_up.local_bounds)
        down_area = self.button_down.transform.transform_rect(self.button_down.local_bounds)
        return self.rect_union(self.rect_union(shape_area, up_area), down_area)

    def scroll_wheel(self, delta: int) -> None:
        self._value -= delta * self.step
        self._clamp_value()
        self._update_indicator_position()
        self._callback()

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value
        self._clamp_value()
        self._update_indicator_position()

    @property
    def min_value(self) -> int:
        return self._min_value

    @min_value.setter
    def min_value(self, value: int) -> None:
        self._min_value = value
        self._clamp_value()
        self._update_indicator_position()

    @property
    def max_value(self) -> int:
        return self._max_value

    @max_value.setter
    def max_value(self, value: int) -> None:
        self._max_value = value
        self._clamp_value()
        self._update_indicator_position()

    @property
    def indicator_top(self) -> float:
        """Top of the indicator in the scroll bar's own coordinates."""
        return self._indicator_top

    @property
    def indicator_height(self) -> float:
        return self._indicator_height

    def set_indicator_height_ratio(self, ratio: float) -> None:
        ratio = _clamp(ratio, 0.0, 1.0)
        track = self._track_height()
        self._indicator_height = _clamp(track * ratio, self._button_up_height(), track)
        self._update_indicator_position()

    def on_value_change(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(surface, total, self.size, self.fill_color, self.outline_color, _OUTLINE_THICKNESS)
        self.button_up.draw(surface, total)
        self.button_down.draw(surface, total)
        self._draw_rectangle(
            surface,
            total @ self._indicator_transform(),
            (self.size.x, self._indicator_height),
            self.indicator_color,
        )

    def _step_by(self, amount: int) -> None:
        self._value += amount
        self._clamp_value()
        self._update_indicator_position()
        self._callback()

    def _indicator_transform(self) -> Transform:
        return Transform().translate((0.0, self._indicator_top))

    def _clamp_value(self) -> None:
        self._value = _clamp(self._value, self._min_value, self._max_value)

    def _update_indicator_position(self) -> None:
        value_range = max(1, self._max_value - self._min_value)
        perc = _clamp((self._value - self._min_value) / value_range, 0.0, 1.0)
        max_movement = self._track_height() - self._indicator_height
        self._indicator_top = self._button_up_height() + max_movement * perc

    def _handle_drag(self, mouse_pos) -> None:
        track_top = self.position.y + self._button_up_height()
        track_height = self._track_height()

        desired_top = Vector2(*mouse_pos).y - self._drag_offset_y
        bottom_limit = track_top + track_height - self._indicator_height
        clamped_top = _clamp(desired_top, track_top, bottom_limit)

        max_movement = bottom_limit - track_top
        perc = (clamped_top - track_top) / max_movement if max_movement > 0 else 0.0
        perc = _clamp(perc, 0.0, 1.0)

        value_range = max(1, self._max_value - self._min_value)
        new_value = self._min_value + int(perc * value_range)

        if new_value != self._value:
            self._value = new_value
            self._update_indicator_position()
            self._callback()

    def _button_up_height(self) -> float:
        return self.button_up.global_bounds.size.y

    def _track_height(self) -> float:
        return self.size.y - 2 * self._button_up_height()
"""A sample product record and the list row that displays it."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

import pygame

from mgui.base import Color, FloatRect, Transform, Vector2
from mgui.button import _default_font
from mgui.listview import ListViewItem

_ROW_WIDTH = 800.0
_TEXT_SCALE = 0.2
_SOLD_OUT_SUFFIX = " [ESGOTADO]"

_DEFAULT_BACKGROUND = Color(100, 100, 100)
_EVEN_BACKGROUND = Color(70, 70, 70)
_ODD_BACKGROUND = Color(90, 90, 90)
_SOLD_OUT_BACKGROUND = Color(150, 50, 50)


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class Example:
    """A product with a name, a price and the quantity in stock."""

    name: str = ""
    price: float = 0.0
    stock: int = 0


class ExampleListViewItem(ListViewItem):
    """A row showing a product's index, name and price, tinted by stock."""

    def __init__(self, font: Optional[pygame.font.Font], height: float) -> None:
        super().__init__()
        self.font = font
        self.size = Vector2(_ROW_WIDTH, float(height))
        self.character_size = max(1, int(height * _TEXT_SCALE))
        self.text_color = Color.WHITE
        self.text_position = Vector2(10.0, height * _TEXT_SCALE)
        self._background_color = _DEFAULT_BACKGROUND
        self._label = ""
        self.hovered = False

    def update_events(self, event, mouse_pos) -> None:
        """Refresh the hover flag when an event arrives; rows take no other input."""
        self.update(mouse_pos)

    def update(self, mouse_pos) -> None:
        """Record whether the mouse is over the row."""
        self.hovered = self.contains(Vector2(*mouse_pos))

    @property
    def local_bounds(self) -> FloatRect:
        return FloatRect(Vector2(), self.size)

    def update_with_data(self, data: Example, index: int) -> None:
        status = "" if data.stock > 0 else _SOLD_OUT_SUFFIX
        price = f"{_as_float32(data.price):f}"
        self._label = f"#{index}: {data.name} - R${price}{status}"

        self._background_color = _EVEN_BACKGROUND if index % 2 == 0 else _ODD_BACKGROUND
        if data.stock == 0:
            self._background_color = _SOLD_OUT_BACKGROUND

    @property
    def label(self) -> str:
        return self._label

    @property
    def background_color(self) -> Color:
        return self._background_color

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(surface, total, self.size, self._background_color)
        if self._label:
            font = self.font or _default_font(self.character_size)
            width, height = font.size(self._label)
            center = (self.text_position.x + width / 2.0, self.text_position.y + height / 2.0)
            self._draw_text(surface, total, font, self._label, self.text_color, center)
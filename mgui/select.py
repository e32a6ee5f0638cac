"""A plain selection box widget."""

from __future__ import annotations

from typing import Optional

from mgui.base import Color, FloatRect, GuiElement, Transform, Vector2

_OUTLINE_THICKNESS = 1.0


class Select(GuiElement):
    """A red outlined box; it does not react to input."""

    def __init__(self, position, size) -> None:
        super().__init__(position)
        self.size = Vector2(*size)
        self.fill_color = Color.RED
        self.outline_color = Color.BLACK

    def update_events(self, event, mouse_pos) -> None:
        """Input events leave a select box unchanged."""

    def update(self, mouse_pos) -> None:
        """A select box has no per-frame state to refresh."""

    @property
    def local_bounds(self) -> FloatRect:
        return self._outlined_bounds(self.size, _OUTLINE_THICKNESS)

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(surface, total, self.size, self.fill_color, self.outline_color, _OUTLINE_THICKNESS)
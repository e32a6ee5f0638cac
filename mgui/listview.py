"""A scrollable list that recycles a fixed pool of item views."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

import pygame

from mgui.base import Color, FloatRect, GuiElement, MouseWheelScrolled, Transform, Vector2
from mgui.scroll import Scroll

MAX_VIEWS_IN_BUFFER = 20
_SCROLL_BAR_WIDTH = 10.0
_OUTLINE_THICKNESS = 1.0

T = TypeVar("T")


class ListViewItem(GuiElement):
    """A reusable row view that a list binds to one data item at a time."""

    def __init__(self) -> None:
        super().__init__((0.0, 0.0))

    @abstractmethod
    def update_with_data(self, data, index: int) -> None:
        """Show ``data``, the item at ``index`` of the list."""


class ListViewAdapter(Generic[T]):
    """Supplies a list view with its data and creates the row views for it."""

    def __init__(
        self,
        data: Sequence[T],
        font: Any,
        item_height: float,
        view_factory: Callable[[Any, float], ListViewItem],
    ) -> None:
        self._data = tuple(data)
        self._font = font
        self._height = float(item_height)
        self._view_factory = view_factory

    @property
    def item_count(self) -> int:
        return len(self._data)

    @property
    def item_height(self) -> float:
        return self._height

    def create_view(self) -> ListViewItem:
        return self._view_factory(self._font, self._height)

    def update_view(self, view: ListViewItem, index: int) -> None:
        """Bind the view to the item at ``index``; indices past the end are ignored."""
        if 0 <= index < len(self._data):
            view.update_with_data(self._data[index], index)


class ListView(GuiElement):
    """A clipped, scrollable column of rows fed by an adapter."""

    def __init__(self, position, size, adapter: ListViewAdapter) -> None:
        super().__init__(position)
        self.size = Vector2(*size)
        self._adapter = adapter
        self._viewport = FloatRect(self.position, self.size)

        self.fill_color = Color.YELLOW
        self.outline_color = Color.BLACK

        self._scroll_offset = 0.0
        self._first_visible_item = 0
        self._items_to_show = 0

        self._view_buffer: List[ListViewItem] = [adapter.create_view() for _ in range(MAX_VIEWS_IN_BUFFER)]

        self._scroll_bar = Scroll(
            (self.size.x - _SCROLL_BAR_WIDTH, 0.0),
            (_SCROLL_BAR_WIDTH, self.size.y),
        )
        self._scroll_bar.on_value_change(self._calculate_scroll_layout)

        self._calculate_scroll_layout()
        self._setup_scroll_bar()

    def update_events(self, event, mouse_pos) -> None:
        local_mouse = self.map_global_to_local(mouse_pos)
        self._scroll_bar.update_events(event, local_mouse)

        if isinstance(event, MouseWheelScrolled) and self.global_bounds.contains(mouse_pos):
            self._scroll_bar.value = self._scroll_bar.value - int(event.delta)
            self._calculate_scroll_layout()

    def update(self, mouse_pos) -> None:
        self._scroll_bar.update(self.map_global_to_local(mouse_pos))

    @property
    def local_bounds(self) -> FloatRect:
        shape_area = self._outlined_bounds(self.size, _OUTLINE_THICKNESS)
        scroll_area = self._scroll_bar.transform.transform_rect(self._scroll_bar.local_bounds)
        return self.rect_union(shape_area, scroll_area)

    @property
    def scroll_bar(self) -> Scroll:
        return self._scroll_bar

    @property
    def first_visible_item(self) -> int:
        return self._first_visible_item

    @property
    def items_to_show(self) -> int:
        return self._items_to_show

    @property
    def scroll_offset(self) -> float:
        return self._scroll_offset

    def draw(self, surface, transform: Optional[Transform] = None) -> None:
        total = (transform or Transform()) @ self.transform
        self._draw_rectangle(surface, total, self.size, self.fill_color, self.outline_color, _OUTLINE_THICKNESS)

        origin = total.transform_point((0.0, 0.0))
        previous_clip = surface.get_clip()
        area = pygame.Rect(
            math.floor(origin.x),
            math.floor(origin.y),
            math.ceil(self.size.x),
            math.ceil(self.size.y),
        )
        surface.set_clip(previous_clip.clip(area))

        item_transform = Transform().translate(origin)
        item_height = self._adapter.item_height
        limit = min(self._items_to_show, MAX_VIEWS_IN_BUFFER)
        shift = self._scroll_offset - self._first_visible_item * item_height
        try:
            for slot, view in enumerate(self._view_buffer[:limit]):
                data_index = self._first_visible_item + slot
                if data_index >= self._adapter.item_count:
                    continue
                self._adapter.update_view(view, data_index)
                view.position = (0.0, slot * item_height - shift)
                view.draw(surface, item_transform)
        finally:
            surface.set_clip(previous_clip)

        self._scroll_bar.draw(surface, total)

    def _calculate_scroll_layout(self) -> None:
        item_height = self._adapter.item_height
        self._scroll_offset = max(0.0, float(self._scroll_bar.value * item_height))

        if self._viewport.size.y > 0 and item_height > 0:
            self._first_visible_item = int(self._scroll_offset / item_height)
            self._items_to_show = int(self._viewport.size.y / item_height) + 1
        else:
            self._first_visible_item = 0
            self._items_to_show = 0

    def _setup_scroll_bar(self) -> None:
        item_height = self._adapter.item_height
        item_count = self._adapter.item_count

        max_index = 0
        if item_count > 0 and item_height > 0:
            items_in_view = int(self._viewport.size.y / item_height)
            max_index = max(0, item_count - items_in_view)

        self._scroll_bar.min_value = 0
        self._scroll_bar.max_value = max_index
        self._scroll_bar.value = math.floor(self._scroll_offset / item_height + 0.5) if item_height > 0 else 0

        total_content_height = item_count * item_height
        ratio = self._viewport.size.y / total_content_height if total_content_height > 0 else 1.0
        self._scroll_bar.set_indicator_height_ratio(ratio)
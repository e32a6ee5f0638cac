import pygame
import pytest

from mgui.base import (
    FloatRect,
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseWheelScrolled,
    Vector2,
)
from mgui.listview import MAX_VIEWS_IN_BUFFER, ListView, ListViewAdapter, ListViewItem


class RecordingItem(ListViewItem):
    def __init__(self, font, height):
        super().__init__()
        self.font = font
        self.height = height
        self.bound = []
        self.drawn_at = []

    def update_events(self, event, mouse_pos):
        self.bound.append(("event", event))

    def update(self, mouse_pos):
        self.bound.append(("update", mouse_pos))

    @property
    def local_bounds(self):
        return FloatRect(Vector2(), Vector2(100, self.height))

    def update_with_data(self, data, index):
        self.bound.append((data, index))

    def draw(self, surface, transform=None):
        self.drawn_at.append(self.position)


def make_list(count=20, height=50.0, size=(200, 200), position=(10, 20)):
    created = []

    def factory(font, item_height):
        view = RecordingItem(font, item_height)
        created.append(view)
        return view

    data = [f"item-{i}" for i in range(count)]
    adapter = ListViewAdapter(data, "font", height, factory)
    return ListView(position, size, adapter), created, data


def bound_indices(views):
    return sorted(index for view in views for _, index in view.bound)


def test_adapter_reports_count_and_height():
    adapter = ListViewAdapter(["a", "b", "c"], None, 30.0, RecordingItem)
    assert adapter.item_count == 3
    assert adapter.item_height == 30.0


def test_create_view_uses_font_and_height():
    font = object()
    adapter = ListViewAdapter(["a"], font, 30.0, RecordingItem)
    view = adapter.create_view()
    assert view.font is font
    assert view.height == 30.0


def test_update_view_binds_item():
    adapter = ListViewAdapter(["a", "b", "c"], None, 30.0, RecordingItem)
    view = adapter.create_view()
    adapter.update_view(view, 2)
    assert view.bound == [("c", 2)]


def test_update_view_ignores_index_past_end():
    adapter = ListViewAdapter(["a", "b", "c"], None, 30.0, RecordingItem)
    view = adapter.create_view()
    adapter.update_view(view, 3)
    assert view.bound == []


def test_buffer_holds_fixed_number_of_views():
    _, created, _ = make_list()
    assert len(created) == MAX_VIEWS_IN_BUFFER


def test_initial_layout():
    lv, _, _ = make_list()
    assert lv.first_visible_item == 0
    assert lv.scroll_offset == 0.0
    assert lv.items_to_show == 5
    assert lv.scroll_bar.min_value == 0
    assert lv.scroll_bar.max_value == 16
    assert lv.scroll_bar.value == 0


def test_wheel_down_scrolls_one_item():
    lv, _, _ = make_list()
    lv.update_events(MouseWheelScrolled(-1.0), Vector2(15, 25))
    assert lv.scroll_bar.value == 1
    assert lv.first_visible_item == 1
    assert lv.scroll_offset == pytest.approx(50.0)


def test_wheel_up_is_clamped_at_top():
    lv, _, _ = make_list()
    lv.update_events(MouseWheelScrolled(3.0), Vector2(15, 25))
    assert lv.scroll_bar.value == 0
    assert lv.first_visible_item == 0


def test_wheel_down_is_clamped_at_bottom():
    lv, _, _ = make_list()
    lv.update_events(MouseWheelScrolled(-100.0), Vector2(15, 25))
    assert lv.scroll_bar.value == lv.scroll_bar.max_value
    assert lv.first_visible_item == lv.scroll_bar.max_value


def test_wheel_outside_list_is_ignored():
    lv, _, _ = make_list()
    lv.update_events(MouseWheelScrolled(-1.0), Vector2(900, 900))
    assert lv.scroll_bar.value == 0
    assert lv.first_visible_item == 0


def test_down_button_advances_list():
    lv, _, _ = make_list()
    bar = lv.scroll_bar
    down = bar.button_down
    center = (down.size.x / 2.0, down.size.y / 2.0)
    point = lv.transform.transform_point(bar.transform.transform_point(down.transform.transform_point(center)))
    lv.update_events(MouseButtonPressed(MouseButton.LEFT), point)
    lv.update_events(MouseButtonReleased(MouseButton.LEFT), point)
    assert bar.value == 1
    assert lv.first_visible_item == 1


def test_draw_binds_visible_rows_in_order():
    lv, created, data = make_list()
    lv.update_events(MouseWheelScrolled(-3.0), Vector2(15, 25))
    lv.draw(pygame.Surface((400, 400)))
    first = lv.first_visible_item
    assert bound_indices(created) == list(range(first, first + lv.items_to_show))
    for slot, view in enumerate(created[: lv.items_to_show]):
        assert view.bound == [(data[first + slot], first + slot)]
        assert view.drawn_at[-1] == Vector2(0.0, slot * 50.0)


def test_draw_stops_at_end_of_data():
    lv, created, _ = make_list(count=3)
    lv.draw(pygame.Surface((400, 400)))
    assert bound_indices(created) == [0, 1, 2]


def test_draw_is_limited_to_buffer_size():
    lv, created, _ = make_list(count=100, height=5.0)
    lv.draw(pygame.Surface((400, 400)))
    assert lv.items_to_show > MAX_VIEWS_IN_BUFFER
    assert bound_indices(created) == list(range(MAX_VIEWS_IN_BUFFER))


def test_empty_list_has_nothing_to_scroll():
    lv, created, _ = make_list(count=0)
    lv.draw(pygame.Surface((400, 400)))
    assert lv.scroll_bar.max_value == 0
    assert bound_indices(created) == []


def test_draw_paints_yellow_background_and_restores_clip():
    lv, _, _ = make_list()
    surface = pygame.Surface((400, 400))
    clip_before = surface.get_clip()
    lv.draw(surface)
    assert tuple(surface.get_at((10 + 5, 20 + 5))) == (255, 255, 0, 255)
    assert surface.get_clip() == clip_before


def test_local_bounds_cover_background_and_scroll_bar():
    lv, _, _ = make_list()
    bounds = lv.local_bounds
    assert bounds.contains((5, 5))
    assert bounds.contains((lv.size.x - 5, 5))
import pygame
import pytest

from mgui.base import (
    MouseButton,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseMoved,
    MouseWheelScrolled,
    Vector2,
)
from mgui.scroll import Scroll


@pytest.fixture
def scroll():
    return Scroll((800.0, 200.0), (20.0, 200.0))


def _click(scroll, point):
    scroll.update_events(MouseButtonPressed(MouseButton.LEFT), point)
    scroll.update_events(MouseButtonReleased(MouseButton.LEFT), point)


def test_defaults(scroll):
    assert scroll.value == 0
    assert scroll.min_value == 0
    assert scroll.max_value == 100
    assert scroll.indicator_height == 50.0


def test_value_setter_clamps(scroll):
    scroll.value = 500
    assert scroll.value == 100
    scroll.value = -5
    assert scroll.value == 0


def test_range_setters_clamp_value(scroll):
    scroll.value = 80
    scroll.max_value = 10
    assert scroll.value == 10
    scroll.min_value = 20
    assert scroll.value == 10 or scroll.value == 20
    assert scroll.min_value == 20


def test_value_setter_does_not_call_callback(scroll):
    calls = []
    scroll.on_value_change(lambda: calls.append(1))
    scroll.value = 30
    assert calls == []


def test_indicator_spans_track_ends(scroll):
    scroll.value = scroll.min_value
    top_at_min = scroll.indicator_top
    scroll.value = scroll.max_value
    top_at_max = scroll.indicator_top
    assert top_at_min < top_at_max
    assert top_at_min + top_at_max + scroll.indicator_height == pytest.approx(scroll.size.y)


def test_scroll_wheel_moves_against_delta(scroll):
    calls = []
    scroll.on_value_change(lambda: calls.append(scroll.value))
    scroll.value = 5
    scroll.scroll_wheel(1)
    assert scroll.value == 4
    scroll.scroll_wheel(-3)
    assert scroll.value == 7
    assert calls == [4, 7]


def test_scroll_wheel_clamps(scroll):
    scroll.scroll_wheel(10)
    assert scroll.value == 0


def test_full_ratio_fills_track(scroll):
    scroll.value = scroll.min_value
    top = scroll.indicator_top
    scroll.set_indicator_height_ratio(1.0)
    assert scroll.indicator_height + 2 * top == pytest.approx(scroll.size.y)
    scroll.value = scroll.max_value
    assert scroll.indicator_top == pytest.approx(top)


def test_zero_ratio_gives_minimum_height(scroll):
    scroll.value = scroll.min_value
    button_height = scroll.indicator_top
    scroll.set_indicator_height_ratio(0.0)
    assert scroll.indicator_height == pytest.approx(button_height)
    scroll.set_indicator_height_ratio(-3.0)
    assert scroll.indicator_height == pytest.approx(button_height)


def test_up_button_decrements(scroll):
    calls = []
    scroll.on_value_change(lambda: calls.append(scroll.value))
    scroll.value = 5
    _click(scroll, Vector2(810.0, 210.0))
    assert scroll.value == 4
    assert calls == [4]


def test_down_button_increments(scroll):
    scroll.value = 5
    _click(scroll, Vector2(810.0, 390.0))
    assert scroll.value == 6


def test_wheel_event_inside_scrolls(scroll):
    scroll.value = 10
    scroll.update_events(MouseWheelScrolled(2.0), Vector2(810.0, 300.0))
    assert scroll.value == 8


def test_wheel_event_outside_ignored(scroll):
    scroll.value = 10
    scroll.update_events(MouseWheelScrolled(2.0), Vector2(10.0, 10.0))
    assert scroll.value == 10


def test_drag_indicator_to_ends(scroll):
    calls = []
    scroll.on_value_change(lambda: calls.append(scroll.value))
    grab = Vector2(810.0, scroll.position.y + scroll.indicator_top + scroll.indicator_height / 2)
    scroll.update_events(MouseButtonPressed(MouseButton.LEFT), grab)
    scroll.update_events(MouseMoved(), Vector2(810.0, 5000.0))
    assert scroll.value == scroll.max_value
    scroll.update_events(MouseMoved(), Vector2(810.0, -5000.0))
    assert scroll.value == scroll.min_value
    assert calls == [scroll.max_value, scroll.min_value]


def test_release_ends_drag(scroll):
    grab = Vector2(810.0, scroll.position.y + scroll.indicator_top + 1.0)
    scroll.update_events(MouseButtonPressed(MouseButton.LEFT), grab)
    scroll.update_events(MouseButtonReleased(MouseButton.LEFT), grab)
    scroll.update_events(MouseMoved(), Vector2(810.0, 5000.0))
    assert scroll.value == 0


def test_bounds_cover_shape(scroll):
    bounds = scroll.global_bounds
    assert bounds.contains((800.0, 200.0))
    assert bounds.contains((819.0, 399.0))
    assert not bounds.contains((900.0, 300.0))


def test_draw_paints_track():
    surface = pygame.Surface((40, 220))
    scroll = Scroll((0.0, 0.0), (20.0, 200.0))
    scroll.draw(surface)
    assert tuple(surface.get_at((10, 150)))[:3] == (0, 0, 255)
from dataclasses import replace

import pytest

from blogdesk.models import AppType, WindowState
from blogdesk.resize import ResizeDirection, ResizeSession

VW, VH = 1920, 1080


def make_window(**changes):
    window = WindowState(AppType.TERMINAL, 2, "Terminal", 200, 150, 600, 400)
    return replace(window, **changes)


def test_direction_parses_from_string():
    assert ResizeDirection("top-left") is ResizeDirection.TOP_LEFT
    assert ResizeDirection("bottom-right") is ResizeDirection.BOTTOM_RIGHT


def test_right_grows_by_pointer_delta():
    window = make_window()
    session = ResizeSession(window, "right", 800, 300)
    session.apply(window, 850, 300, VW, VH)
    assert window.width == session.orig_width + 50
    assert window.x == session.orig_x
    assert window.height == session.orig_height


def test_right_clamps_to_minimum_width():
    window = make_window()
    session = ResizeSession(window, ResizeDirection.RIGHT, 800, 300)
    session.apply(window, -5000, 300, VW, VH)
    assert window.width == 200


def test_right_clamps_to_viewport():
    window = make_window()
    session = ResizeSession(window, "right", 800, 300)
    session.apply(window, 9000, 300, VW, VH)
    assert window.x + window.width == VW


def test_left_keeps_right_edge_fixed():
    window = make_window()
    right_edge = window.x + window.width
    session = ResizeSession(window, "left", 200, 300)
    session.apply(window, 250, 300, VW, VH)
    assert window.x == 250
    assert window.x + window.width == right_edge


def test_top_keeps_bottom_edge_fixed():
    window = make_window()
    bottom_edge = window.y + window.height
    session = ResizeSession(window, "top", 400, 150)
    session.apply(window, 400, 180, VW, VH)
    assert window.y == 180
    assert window.y + window.height == bottom_edge


def test_top_clamps_to_minimum_height():
    window = make_window()
    bottom_edge = window.y + window.height
    session = ResizeSession(window, "top", 400, 150)
    session.apply(window, 400, 5000, VW, VH)
    assert window.height == 100
    assert window.y + window.height == bottom_edge


def test_top_right_changes_width_and_top():
    window = make_window()
    bottom_edge = window.y + window.height
    session = ResizeSession(window, "top-right", 800, 150)
    session.apply(window, 830, 140, VW, VH)
    assert window.x == session.orig_x
    assert window.width == session.orig_width + 30
    assert window.y + window.height == bottom_edge


def test_top_left_keeps_bottom_right_corner():
    window = make_window()
    corner = (window.x + window.width, window.y + window.height)
    session = ResizeSession(window, "top-left", 200, 150)
    session.apply(window, 260, 170, VW, VH)
    assert (window.x, window.y) == (260, 170)
    assert (window.x + window.width, window.y + window.height) == corner


def test_bottom_right_clamps_to_viewport():
    window = make_window()
    session = ResizeSession(window, "bottom-right", 800, 550)
    session.apply(window, 9000, 9000, VW, VH)
    assert window.x + window.width == VW
    assert window.y + window.height == VH


def test_bottom_left_keeps_right_edge_and_top():
    window = make_window()
    right_edge = window.x + window.width
    session = ResizeSession(window, "bottom-left", 200, 550)
    session.apply(window, 180, 570, VW, VH)
    assert window.y == session.orig_y
    assert window.x + window.width == right_edge
    assert window.height == session.orig_height + 20


def test_apply_is_relative_to_start():
    window = make_window()
    session = ResizeSession(window, "bottom", 400, 550)
    session.apply(window, 400, 600, VW, VH)
    first = replace(window)
    session.apply(window, 400, 600, VW, VH)
    assert window == first


def test_unknown_direction_leaves_window_untouched():
    window = make_window()
    before = replace(window)
    session = ResizeSession(window, "middle", 400, 300)
    session.apply(window, 900, 900, VW, VH)
    assert window == before


def test_other_window_untouched():
    window = make_window()
    other = make_window(id=99)
    before = replace(other)
    session = ResizeSession(window, "right", 800, 300)
    session.apply(other, 900, 300, VW, VH)
    assert other == before


def test_impossible_bounds_raise():
    window = make_window(height=50)
    session = ResizeSession(window, "top", 400, 150)
    with pytest.raises(ValueError, match="clamp"):
        session.apply(window, 400, 160, VW, VH)
"""Resizing a window by dragging one of its edges or corners."""

from __future__ import annotations

from enum import Enum

from blogdesk.models import WindowState

MIN_WIDTH = 200
MIN_HEIGHT = 100


class ResizeDirection(Enum):
    """Edge or corner grabbed to resize a window."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"


def _clamp(value: int, low: int, high: int) -> int:
    if low > high:
        raise ValueError(f"invalid clamp bounds: {low} > {high}")
    return max(low, min(value, high))


def _parse_direction(direction: ResizeDirection | str) -> ResizeDirection | None:
    if isinstance(direction, ResizeDirection):
        return direction
    try:
        return ResizeDirection(direction)
    except ValueError:
        return None


class ResizeSession:
    """A resize in progress, anchored at the window's geometry when it began.

    An unrecognised direction yields a session that leaves windows untouched.
    """

    def __init__(
        self,
        window: WindowState,
        direction: ResizeDirection | str,
        start_x: int,
        start_y: int,
    ) -> None:
        self.window_id = window.id
        self.direction = _parse_direction(direction)
        self.start_x = start_x
        self.start_y = start_y
        self.orig_x = window.x
        self.orig_y = window.y
        self.orig_width = window.width
        self.orig_height = window.height

    def apply(
        self,
        window: WindowState,
        x: int,
        y: int,
        viewport_width: int,
        viewport_height: int,
    ) -> WindowState:
        """Update ``window`` for a pointer at (x, y) and return it."""
        if window.id != self.window_id or self.direction is None:
            return window

        dx = x - self.start_x
        dy = y - self.start_y
        ox, oy = self.orig_x, self.orig_y
        ow, oh = self.orig_width, self.orig_height

        def top() -> tuple[int, int]:
            new_y = _clamp(oy + dy, 0, oy + oh - MIN_HEIGHT)
            new_height = _clamp(oh - dy, MIN_HEIGHT, viewport_height)
            return new_y, new_height

        def left() -> tuple[int, int]:
            new_x = _clamp(ox + dx, 0, ox + ow - MIN_WIDTH)
            new_width = _clamp(ow - dx, MIN_WIDTH, viewport_width)
            return new_x, new_width

        match self.direction:
            case ResizeDirection.TOP:
                window.y, window.height = top()
            case ResizeDirection.TOP_RIGHT:
                new_y, new_height = top()
                new_width = _clamp(ow + dx, MIN_WIDTH, viewport_width - ox)
                window.y, window.height, window.width = new_y, new_height, new_width
            case ResizeDirection.TOP_LEFT:
                new_x, new_width = left()
                new_y, new_height = top()
                window.x, window.y = new_x, new_y
                window.width, window.height = new_width, new_height
            case ResizeDirection.RIGHT:
                window.width = _clamp(ow + dx, MIN_WIDTH, viewport_width - window.x)
            case ResizeDirection.BOTTOM:
                window.height = _clamp(oh + dy, MIN_HEIGHT, viewport_height - window.y)
            case ResizeDirection.BOTTOM_RIGHT:
                window.width = _clamp(ow + dx, MIN_WIDTH, viewport_width - window.x)
                window.height = _clamp(oh + dy, MIN_HEIGHT, viewport_height - window.y)
            case ResizeDirection.BOTTOM_LEFT:
                new_x, new_width = left()
                new_height = _clamp(oh + dy, MIN_HEIGHT, viewport_height - oy)
                window.x, window.width, window.height = new_x, new_width, new_height
            case ResizeDirection.LEFT:
                window.x, window.width = left()
        return window
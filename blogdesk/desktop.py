"""The desktop: a set of windows that open, close, stack, move and resize."""

from __future__ import annotations

import argparse
import itertools
import sys
import threading
from collections.abc import Iterable
from pathlib import Path

from blogdesk.models import (
    WINDOW_COORD_X,
    WINDOW_COORD_Y,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    AppType,
    UploadedFile,
    WindowState,
)
from blogdesk.rendering import render_responses, render_terminal
from blogdesk.resize import ResizeDirection, ResizeSession
from blogdesk.upload import (
    DEFAULT_BASE_URL,
    GENERATED_DATA,
    ResponseStore,
    UploadError,
    send_files,
)

DEFAULT_VIEWPORT_WIDTH = 1280
DEFAULT_VIEWPORT_HEIGHT = 800

VIEWER_TITLE = "Markdown Viewer"
VIEWER_X = 300
VIEWER_Y = 200
VIEWER_Z_INDEX = 100

_window_ids = itertools.count(1000)
_window_ids_lock = threading.Lock()


def generate_window_id() -> int:
    """Return a fresh window id; ids start at 1000 and increase by one."""
    with _window_ids_lock:
        return next(_window_ids)


def default_windows() -> list[WindowState]:
    """The windows a new desktop starts with."""
    return [
        WindowState(
            app_type=AppType.MD_GEN,
            id=1,
            title="Markdown Generator",
            x=WINDOW_COORD_X,
            y=WINDOW_COORD_Y,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            is_open=False,
            z_index=0,
        ),
        WindowState(
            app_type=AppType.TERMINAL,
            id=2,
            title="Terminal",
            x=200,
            y=150,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            is_open=True,
            z_index=0,
        ),
    ]


def _clamp(value: int, low: int, high: int) -> int:
    if low > high:
        raise ValueError(f"invalid clamp bounds: {low} > {high}")
    return max(low, min(value, high))


class Desktop:
    """Window manager state for a viewport of a given size.

    Operations on an id that names no window leave the desktop unchanged
    and return ``None``.
    """

    def __init__(
        self,
        viewport_width: int = DEFAULT_VIEWPORT_WIDTH,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
        windows: Iterable[WindowState] | None = None,
    ) -> None:
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.windows: list[WindowState] = (
            default_windows() if windows is None else list(windows)
        )
        self.z_counter = 1
        self._resize: ResizeSession | None = None

    def _find(self, window_id: int) -> WindowState | None:
        return next((w for w in self.windows if w.id == window_id), None)

    def _raise(self, window: WindowState) -> None:
        window.z_index = self.z_counter
        self.z_counter += 1

    def open_windows(self) -> list[WindowState]:
        """Windows currently shown, in desktop order."""
        return [w for w in self.windows if w.is_open]

    def open(self, window_id: int) -> WindowState | None:
        """Show a window and bring it to the front."""
        window = self._find(window_id)
        if window is not None:
            window.is_open = True
            self._raise(window)
        return window

    def close(self, window_id: int) -> WindowState | None:
        """Hide a window and restore its default geometry."""
        window = self._find(window_id)
        if window is not None:
            window.is_open = False
            window.x = WINDOW_COORD_X
            window.y = WINDOW_COORD_Y
            window.width = WINDOW_WIDTH
            window.height = WINDOW_HEIGHT
        return window

    def focus(self, window_id: int) -> WindowState | None:
        """Bring a window to the front."""
        window = self._find(window_id)
        if window is not None:
            self._raise(window)
        return window

    def start_drag(self, window_id: int, client_x: int, client_y: int) -> WindowState | None:
        """Begin moving a window grabbed at the given pointer position."""
        window = self._find(window_id)
        if window is not None:
            window.is_dragging = True
            window.drag_offset = (int(client_x - window.x), int(client_y - window.y))
        return window

    def drag_to(self, window_id: int, client_x: int, client_y: int) -> WindowState | None:
        """Move a dragged window with the pointer, keeping it inside the viewport."""
        window = self._find(window_id)
        if window is None or not window.is_dragging:
            return None
        off_x, off_y = window.drag_offset
        window.x = _clamp(client_x - off_x, 0, self.viewport_width - window.width)
        window.y = _clamp(client_y - off_y, 0, self.viewport_height - window.height)
        return window

    def end_drag(self, window_id: int) -> WindowState | None:
        """Stop dragging a window."""
        window = self._find(window_id)
        if window is not None:
            window.is_dragging = False
        return window

    def start_resize(
        self,
        window_id: int,
        direction: ResizeDirection | str,
        client_x: int,
        client_y: int,
    ) -> ResizeSession | None:
        """Begin resizing a window from the given edge or corner."""
        window = self._find(window_id)
        if window is None:
            return None
        self._resize = ResizeSession(window, direction, client_x, client_y)
        return self._resize

    def resize_to(self, client_x: int, client_y: int) -> WindowState | None:
        """Resize the window under resize for a pointer at the given position."""
        if self._resize is None:
            return None
        window = self._find(self._resize.window_id)
        if window is None:
            return None
        return self._resize.apply(
            window, client_x, client_y, self.viewport_width, self.viewport_height
        )

    def end_resize(self) -> None:
        """Finish the resize in progress, if any."""
        self._resize = None

    def add_viewer(self) -> WindowState:
        """Open a new markdown viewer window and return it."""
        window = WindowState(
            app_type=AppType.MY_DOCS_RE,
            id=generate_window_id(),
            title=VIEWER_TITLE,
            x=VIEWER_X,
            y=VIEWER_Y,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            is_open=True,
            z_index=VIEWER_Z_INDEX,
        )
        self.windows.append(window)
        return window

    def generate(
        self,
        files: Iterable[UploadedFile],
        store: ResponseStore = GENERATED_DATA,
        base_url: str = DEFAULT_BASE_URL,
    ) -> WindowState | None:
        """Send files for generation; on success store the reply and open a viewer.

        A failed request is reported on stderr and yields ``None``.
        """
        try:
            response = send_files(list(files), base_url)
        except UploadError as exc:
            print(f"Upload error: {exc}", file=sys.stderr)
            return None
        store.set(response)
        return self.add_viewer()


def main(argv: list[str] | None = None) -> int:
    """Show the greeting, or generate posts from files and print them as HTML."""
    parser = argparse.ArgumentParser(
        prog="blogdesk", description="Generate blog posts from uploaded files."
    )
    parser.add_argument("files", nargs="*", type=Path, help="files to upload")
    parser.add_argument("--url", default=DEFAULT_BASE_URL, help="generation service address")
    args = parser.parse_args(argv)

    if not args.files:
        print(render_terminal())
        return 0

    try:
        uploads = [
            UploadedFile(name=path.name, contents=path.read_text(encoding="utf-8"))
            for path in args.files
        ]
    except OSError as exc:
        print(f"cannot read file: {exc}", file=sys.stderr)
        return 1

    store = ResponseStore()
    desktop = Desktop()
    if desktop.generate(uploads, store, args.url) is None:
        return 1
    for block in render_responses(store.get()):
        print(block)
    return 0
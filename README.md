# blogdesk

blogdesk turns source files into blog posts. It uploads files to a generation
service, which answers with one Markdown response per file, and renders each
response to HTML. It also keeps the state of a small desktop of windows
(position, size, stacking order, open or closed) that a front end can draw.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The command

```
blogdesk
```

With no arguments it prints the terminal greeting as an HTML `<pre><code>`
block.

```
blogdesk [--url URL] FILE [FILE ...]
```

With files, it reads each one as UTF-8 text, posts them to the generation
service (`--url`, default `http://localhost:8000`) and prints the HTML of each
generated response. It exits with status 1 if a file cannot be read or the
request fails; the error is written to stderr.

## Using it as a library

### Windows

`blogdesk.desktop.Desktop` holds a list of `WindowState` records for a viewport
of a given size (1280 × 800 by default). Without a `windows` argument it starts
with `default_windows()`: a closed "Markdown Generator" window and an open
"Terminal" window.

```python
from blogdesk.desktop import Desktop, default_windows

desk = Desktop(1280, 800, default_windows())
desk.open(1)                 # open the Markdown Generator window and raise it
desk.start_drag(1, 250, 210) # grab the title bar
desk.drag_to(1, 400, 300)    # move it; it stays inside the viewport
desk.end_drag(1)

desk.start_resize(1, "bottom-right", 800, 600)
desk.resize_to(900, 650)     # widths stay at least 200, heights at least 100
desk.end_resize()

desk.close(1)                # closing restores the default position and size
```

`open`, `focus` and the drag operations return the window they changed, or
`None` if no window has that id. `open_windows()` lists the windows that are
shown. Resize directions are the values of `blogdesk.resize.ResizeDirection`
(`"top"`, `"right"`, `"bottom"`, `"left"`, `"top-left"`, `"top-right"`,
`"bottom-left"`, `"bottom-right"`); an unknown direction leaves the window
unchanged.

### Generating posts

```python
from blogdesk.models import UploadedFile
from blogdesk.upload import ResponseStore
from blogdesk.rendering import render_responses

store = ResponseStore()
files = [UploadedFile(name="notes.md", contents="# Notes")]
viewer = desk.generate(files, store, "http://localhost:8000")

for html in render_responses(store.get()):
    print(html)
```

`Desktop.generate` posts the files as multipart form data (parts named
`files`) to `<base_url>/files/`, stores the parsed `GeneratedResponse` in the
store and opens a new "Markdown Viewer" window, which it returns. If the
request fails it prints `Upload error: ...` to stderr and returns `None`.

To send files without a desktop, call `blogdesk.upload.send_files(files,
base_url)`; it returns a `GeneratedResponse` and raises
`blogdesk.upload.UploadError` on a connection failure, a non-2xx status or a
reply that does not have the expected shape.

### Rendering

- `blogdesk.rendering.markdown_to_html(text)` renders CommonMark with tables
  and strikethrough.
- `render_responses(response)` returns one HTML string per generated file, or
  `["**File not found**"]` when `response` is `None`.
- `render_terminal()` returns the greeting as escaped HTML.

### Data types

`blogdesk.models` also defines `BlogCard` and `BlogPost` with `from_dict` and
`to_dict`, and `FileResponse` / `GeneratedResponse` with `from_dict`; these
raise `ValueError` on missing fields or fields of the wrong type.

## What it does not do

blogdesk draws nothing: there is no graphical desktop, window chrome or file
drop area. `Desktop` only tracks window state and reacts to the pointer
coordinates it is given. It does not include the generation service either; it
needs one listening at the given address.
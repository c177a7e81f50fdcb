"""HTML rendering of generated markdown and the terminal greeting."""

from __future__ import annotations

import html

from markdown_it import MarkdownIt

from blogdesk.models import GREETINGS, GeneratedResponse

NOT_FOUND = "**File not found**"

_MARKDOWN = MarkdownIt("commonmark").enable(["table", "strikethrough"])


def markdown_to_html(markdown_input: str) -> str:
    """Render markdown, with tables and strikethrough, to HTML."""
    return _MARKDOWN.render(markdown_input)


def render_responses(response: GeneratedResponse | None) -> list[str]:
    """Render each generated file to HTML, or a not-found notice if there is none."""
    if response is None:
        return [NOT_FOUND]
    return [markdown_to_html(item.response) for item in response.data]


def render_terminal() -> str:
    """Return the terminal's greeting as a preformatted HTML block."""
    return f"<pre><code>{html.escape(GREETINGS, quote=False)}</code></pre>"
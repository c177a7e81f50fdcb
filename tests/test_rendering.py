import html

from blogdesk.models import GREETINGS, FileResponse, GeneratedResponse
from blogdesk.rendering import markdown_to_html, render_responses, render_terminal


def test_heading():
    assert markdown_to_html("# Title") == "<h1>Title</h1>\n"


def test_table_enabled():
    source = "| a | b |\n|---|---|\n| 1 | 2 |\n"
    output = markdown_to_html(source)
    assert "<table>" in output
    assert "<td>1</td>" in output


def test_strikethrough_enabled():
    output = markdown_to_html("~~gone~~")
    assert "gone" in output
    assert "~~" not in output


def test_render_responses_none():
    assert render_responses(None) == ["**File not found**"]


def test_render_responses_keeps_order():
    response = GeneratedResponse(
        message="ok",
        data=[
            FileResponse(filename="a.md", response="# First"),
            FileResponse(filename="b.md", response="*second*"),
        ],
    )
    rendered = render_responses(response)
    assert rendered == [markdown_to_html("# First"), markdown_to_html("*second*")]
    assert "First" in rendered[0]
    assert "<em>second</em>" in rendered[1]


def test_render_responses_empty_data():
    assert render_responses(GeneratedResponse(message="ok", data=[])) == []


def test_render_terminal_wraps_greeting():
    output = render_terminal()
    prefix, suffix = "<pre><code>", "</code></pre>"
    assert output.startswith(prefix)
    assert output.endswith(suffix)
    inner = output[len(prefix):-len(suffix)]
    assert html.unescape(inner) == GREETINGS
"""Data types shared across the desktop: window state, uploads and blog records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

WINDOW_COORD_X = 200
WINDOW_COORD_Y = 200
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 400

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

GREETINGS = r""" _                _                   
| |    __ _ _ __ | |_ ___ _ __ _ __   
| |   / _` | '_ \| __/ _ \ '__| '_ \  
| |__| (_| | | | | ||  __/ |  | | | | 
|_____\__,_|_| |_|\__\___|_|  |_| |_| 
 |_ _|_ _|                            
  | | | |                             
  | | | | _                           
 |___|___(_)  
"""


class AppType(Enum):
    """Kind of application a desktop window hosts."""

    TERMINAL = "terminal"
    SETTINGS = "settings"
    MD_GEN = "md_gen"
    MY_DOCS_RE = "my_docs_re"
    MY_DOCS = "my_docs"
    BROWSE = "browse"


@dataclass(frozen=True)
class App:
    """A launchable application entry."""

    id: str
    name: str


@dataclass
class WindowState:
    """Position, size and status of one desktop window."""

    app_type: AppType
    id: int
    title: str
    x: int
    y: int
    width: int
    height: int
    is_dragging: bool = False
    drag_offset: tuple[int, int] = (0, 0)
    is_open: bool = False
    z_index: int = 0


@dataclass(frozen=True)
class UploadedFile:
    """A file picked by the user, held as text."""

    name: str
    contents: str


def _field(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(
            f"invalid type for field `{key}`: expected {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class FileResponse:
    """Generated text for one uploaded file."""

    filename: str
    response: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileResponse:
        return cls(
            filename=_field(data, "filename", str),
            response=_field(data, "response", str),
        )


@dataclass(frozen=True)
class GeneratedResponse:
    """Reply of the generation service."""

    message: str
    data: list[FileResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GeneratedResponse:
        message = _field(data, "message", str)
        items = _field(data, "data", list)
        return cls(message=message, data=[FileResponse.from_dict(item) for item in items])


@dataclass(frozen=True)
class BlogCard:
    """Summary of a blog post as shown in a listing."""

    id: int
    posted_by: str
    title: str
    summary: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlogCard:
        card_id = _field(data, "id", int)
        if not _I32_MIN <= card_id <= _I32_MAX:
            raise ValueError(f"field `id` out of range: {card_id}")
        return cls(
            id=card_id,
            posted_by=_field(data, "posted_by", str),
            title=_field(data, "title", str),
            summary=_field(data, "summary", str),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "posted_by": self.posted_by,
            "title": self.title,
            "summary": self.summary,
        }


@dataclass(frozen=True)
class BlogPost:
    """A full blog post."""

    id: int
    posted_by: str
    title: str
    content: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlogPost:
        post_id = _field(data, "id", int)
        if post_id < 0:
            raise ValueError(f"field `id` must not be negative: {post_id}")
        return cls(
            id=post_id,
            posted_by=_field(data, "posted_by", str),
            title=_field(data, "title", str),
            content=_field(data, "content", str),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "posted_by": self.posted_by,
            "title": self.title,
            "content": self.content,
        }
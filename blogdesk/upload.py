"""Sending uploaded files to the generation service and keeping its reply."""

from __future__ import annotations

import threading
from collections.abc import Iterable

import requests

from blogdesk.models import GeneratedResponse, UploadedFile

DEFAULT_BASE_URL = "http://localhost:8000"


class UploadError(Exception):
    """The generation service could not be reached or gave a bad reply."""


class ResponseStore:
    """Thread-safe holder for the latest generated response."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._response: GeneratedResponse | None = None

    def get(self) -> GeneratedResponse | None:
        with self._lock:
            return self._response

    def set(self, response: GeneratedResponse | None) -> None:
        with self._lock:
            self._response = response


GENERATED_DATA = ResponseStore()


def send_files(
    files: Iterable[UploadedFile], base_url: str = DEFAULT_BASE_URL
) -> GeneratedResponse:
    """Post ``files`` as multipart parts named ``files`` and parse the reply."""
    parts = [
        ("files", (item.name, item.contents.encode("utf-8"), "application/octet-stream"))
        for item in files
    ]
    try:
        response = requests.post(f"{base_url}/files/", files=parts)
    except requests.RequestException as exc:
        raise UploadError(str(exc)) from exc

    if not 200 <= response.status_code < 300:
        status = f"{response.status_code} {response.reason or ''}".rstrip()
        raise UploadError(f"HTTP Error {status}: {response.text}")

    try:
        return GeneratedResponse.from_dict(response.json())
    except ValueError as exc:
        raise UploadError(f"invalid response: {exc}") from exc
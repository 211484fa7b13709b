"""Serve actions through WSGI.

    >>> from wsgiref.simple_server import make_server
    >>> make_server("", 8000, to_wsgi(Show)).serve_forever()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .throwable import reason_phrase
from .types import Environ, Headers, ResponseTriple, StartResponse


def status_line(code: Any) -> str:
    """Format ``code`` as a WSGI status line, e.g. ``"200 OK"``."""
    phrase = reason_phrase(code)
    if phrase == str(code):
        phrase = "Unknown"
    return f"{code} {phrase}"


def encode_headers(headers: Headers | None) -> list[tuple[str, str]]:
    if not headers:
        return []
    return [(str(name), str(value)) for name, value in headers.items()]


def encode_body(body: Iterable[Any], charset: str = "utf-8") -> list[bytes]:
    chunks = []
    for chunk in body:
        if isinstance(chunk, str):
            chunk = chunk.encode(charset)
        elif isinstance(chunk, (bytearray, memoryview)):
            chunk = bytes(chunk)
        elif not isinstance(chunk, bytes):
            chunk = str(chunk).encode(charset)
        chunks.append(chunk)
    return chunks


def to_wsgi(factory: Callable[[], Callable[[Environ], ResponseTriple]]) -> Callable:
    """Wrap an action class (or any zero-argument factory of actions) as a WSGI app.

    A new action is created for each request.
    """
    configuration = getattr(factory, "configuration", None)
    charset = configuration.default_charset if configuration is not None else "utf-8"

    def application(environ: Environ, start_response: StartResponse) -> list[bytes]:
        status, headers, body = factory()(environ)
        start_response(status_line(status), encode_headers(headers))
        return encode_body(body, charset)

    return application

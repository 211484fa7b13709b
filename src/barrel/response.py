"""Response assembly for actions.

An action never builds the final ``(status, headers, body)`` triple by hand.
It sets whichever parts it cares about and :meth:`Response.produce` fills in
the rest:

    >>> response = Response()
    >>> response.status = 201
    >>> response.body = "Created"
    >>> response.headers["Location"] = "/books/1"
    >>> response.produce()
    (201, {'Location': '/books/1'}, ['Created'])
"""

from __future__ import annotations

from typing import Any

from .types import Headers, ResponseTriple

DEFAULT_RESPONSE_CODE = 200
DEFAULT_RESPONSE_BODY: list[Any] = []

# Iterable in Python, but each is a single body chunk
_SINGLE_CHUNK_TYPES = (str, bytes, bytearray, memoryview)


def normalize_body(value: Any) -> Any:
    """Wrap ``value`` in a list unless it is already a sequence of chunks.

    ``None`` means no chunks at all.
    """
    if value is None:
        return []
    if isinstance(value, _SINGLE_CHUNK_TYPES) or not hasattr(value, "__iter__"):
        return [value]
    return value


class Response:
    """Per-request response state.

    ``status`` and ``body`` stay unset until assigned. ``headers`` is a
    mapping owned by the response and returned by reference, so callers
    mutate it in place.
    """

    def __init__(self, headers: Headers | None = None):
        self._status: Any = None
        self._body: Any = None
        self._headers: Headers | None = {} if headers is None else headers

    @property
    def status(self) -> Any:
        """Stored status code, ``None`` if never set."""
        return self._status

    @status.setter
    def status(self, code: Any) -> None:
        self.set_status(code)

    def set_status(self, code: Any) -> None:
        """Store ``code`` verbatim."""
        self._status = code

    @property
    def body(self) -> Any:
        """Stored, normalized body, ``None`` if never set."""
        return self._body

    @body.setter
    def body(self, value: Any) -> None:
        self.set_body(value)

    def set_body(self, value: Any) -> None:
        """Store ``value`` as the body, wrapping single chunks in a list."""
        self._body = normalize_body(value)

    @property
    def headers(self) -> Headers | None:
        """Live header mapping."""
        return self._headers

    @headers.setter
    def headers(self, value: Headers | None) -> None:
        self._headers = value

    def get_headers(self) -> Headers | None:
        return self._headers

    def produce(self) -> ResponseTriple:
        """Return the ``(status, headers, body)`` triple.

        Unset status defaults to 200 and unset body to a new empty list.
        """
        status = DEFAULT_RESPONSE_CODE if self._status is None else self._status
        body = list(DEFAULT_RESPONSE_BODY) if self._body is None else self._body
        return status, self.get_headers(), body

    def reset(self) -> None:
        """Forget everything set so far."""
        self._status = None
        self._body = None
        self._headers = {}

    def __repr__(self) -> str:
        return f"<Response {self._status if self._status is not None else DEFAULT_RESPONSE_CODE}>"

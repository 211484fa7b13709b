"""Halting actions and mapping exceptions to status codes."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from .errors import Halt

SERVER_ERROR = 500


def reason_phrase(code: Any) -> str:
    """Standard reason phrase for ``code``, or ``str(code)`` when unknown."""
    try:
        return HTTPStatus(int(code)).phrase
    except (TypeError, ValueError):
        return str(code)


def halt(code: int, message: Any = None) -> None:
    """Stop the current action, answering with ``code``."""
    raise Halt(code, message)


def lookup(handlers: dict[type[BaseException], int], exc: BaseException) -> int | None:
    """Find the status registered for ``exc``.

    Walks the exception's MRO so the most specific registration wins.
    """
    for klass in type(exc).__mro__:
        if klass in handlers:
            return handlers[klass]
    return None


__all__ = ["Halt", "SERVER_ERROR", "halt", "lookup", "reason_phrase"]

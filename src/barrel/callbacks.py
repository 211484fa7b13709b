"""Ordered callback chains run around an action's main logic."""

from __future__ import annotations

import inspect
from collections.abc import Iterator
from typing import Any

from loguru import logger

from .types import Hook


class CallbackChain:
    """An ordered collection of callbacks.

    A callback is either a callable, invoked with the chain's arguments, or
    the name of a method on the context the chain runs against.
    """

    def __init__(self, callbacks: list[Hook | str] | None = None):
        self._callbacks: list[Hook | str] = list(callbacks or [])

    def append(self, *callbacks: Hook | str) -> None:
        """Add callbacks at the end of the chain."""
        self._callbacks.extend(callbacks)

    def run(self, context: Any, *args: Any) -> None:
        """Invoke every callback in registration order.

        Return values are ignored. The first exception stops the chain and
        propagates.
        """
        for callback in self._callbacks:
            if isinstance(callback, str):
                method = getattr(context, callback)
                if _accepts_arguments(method):
                    method(*args)
                else:
                    method()
            else:
                callback(*args)

    def copy(self) -> CallbackChain:
        return CallbackChain(self._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __iter__(self) -> Iterator[Hook | str]:
        return iter(self._callbacks)

    def __repr__(self) -> str:
        return f"CallbackChain({self._callbacks!r})"


def _accepts_arguments(method: Any) -> bool:
    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError):
        logger.debug(f"Cannot inspect signature of {method!r}, passing arguments")
        return True
    return bool(signature.parameters)

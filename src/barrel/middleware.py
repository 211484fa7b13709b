"""Run third-party middleware as before callbacks.

A middleware here is anything callable with the raw request environment.
Classes and pre-built instances are treated the same way: the object is
called as it is, so anything needing construction or configuration must be
set up before it is registered.

    >>> class Create(Action):
    ...     middleware = [SessionLoader, Throttle(limit=10)]
    >>> Create.use(AuditTrail())

At request time each middleware receives ``params.env`` in the order it was
registered. They all share the same environment, so earlier middleware can
prepare data (a session, a user) for later ones and for the action itself.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from .callbacks import CallbackChain
from .types import Hook, Middleware


def adapt(middleware: Middleware) -> Hook:
    """Wrap ``middleware`` into a hook taking the request context."""

    def hook(params: Any) -> None:
        middleware(params.env)

    hook.__name__ = f"middleware_{getattr(middleware, '__name__', type(middleware).__name__)}"
    hook.middleware = middleware
    return hook


def use(chain: CallbackChain, middleware: Middleware) -> Hook:
    """Append ``middleware`` to ``chain`` and return the registered hook."""
    hook = adapt(middleware)
    chain.append(hook)
    logger.debug(f"Registered middleware {middleware!r}")
    return hook

"""Type definitions shared across barrel."""

from collections.abc import Callable, Iterable, MutableMapping
from typing import Any

# WSGI-style request environment
Environ = MutableMapping[str, Any]

# Response parts
Status = int
Headers = dict[str, Any]
Body = Iterable[Any]
ResponseTriple = tuple[Status, Headers | None, Body]

# A middleware is anything callable with the raw environment
Middleware = Callable[[Environ], Any]

# Hooks receive the request context; their return value is ignored
Hook = Callable[..., Any]

# WSGI
StartResponse = Callable[[str, list[tuple[str, str]]], Any]

"""Request context handed to callbacks and to ``Action.call``."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .types import Environ

ROUTER_PARAMS_KEY = "router.params"


class Params(Mapping[str, Any]):
    """Route parameters plus the raw request environment.

    ``env`` is the environment itself, not a copy: changes made by middleware
    are visible to everything that runs after it.
    """

    def __init__(self, env: Environ):
        self.env = env

    @property
    def _params(self) -> Mapping[str, Any]:
        return self.env.get(ROUTER_PARAMS_KEY) or {}

    def __getitem__(self, key: str) -> Any:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._params)

    def __repr__(self) -> str:
        return f"Params({self.to_dict()!r})"

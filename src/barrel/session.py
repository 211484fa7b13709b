"""Access to the session mapping stored in the request environment.

barrel does not store sessions. A session middleware is expected to load one
into the environment and to persist it afterwards. Third-party WSGI session
middleware writes under its own key (beaker uses ``"beaker.session"``), so
the action's ``Configuration.session_key`` must name that key; the default
``SESSION_KEY`` only suits middleware written for barrel:

    >>> class Show(Action):
    ...     configuration = Configuration(session_key="beaker.session")
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from .types import Environ

SESSION_KEY = "barrel.session"


def get_session(env: Environ, key: str = SESSION_KEY) -> MutableMapping[str, Any]:
    """Return the session in ``env``, creating an empty one if missing."""
    session = env.get(key)
    if session is None:
        session = env[key] = {}
    return session

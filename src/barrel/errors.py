"""Exception hierarchy for barrel actions.

Exception Hierarchy:
    BarrelError: Base exception for all barrel errors
    ├── ConfigurationError: Configuration loading failures
    └── Halt: Stops an action and answers with a given status

The middleware adapter and the response assembler raise nothing of their own.
Errors coming from third-party middleware, or from a request context missing
its environment, propagate unchanged to whoever runs the hook chain.

Example:
    >>> class Show(Action):
    ...     def call(self, params):
    ...         if "id" not in params:
    ...             self.halt(404)
"""

from __future__ import annotations

from typing import Any


class BarrelError(Exception):
    """Base exception for all barrel-related errors."""

    pass


class ConfigurationError(BarrelError):
    """Raised when a configuration source cannot be loaded.

    This occurs when:
    - A configuration file does not exist
    - A configuration file has an unsupported extension
    - A configuration file does not contain a mapping
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class Halt(BarrelError):
    """Raised to interrupt an action and respond immediately.

    The action catches it, uses ``code`` as the response status and
    ``message`` (or the reason phrase of ``code``) as the body.
    """

    def __init__(self, code: int, message: Any = None):
        super().__init__(f"Halted with status {code}")
        self.code = code
        self.message = message

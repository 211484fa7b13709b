"""barrel - request-handling actions with pluggable middleware."""

from loguru import logger

__version__ = "0.1.0"

from barrel.action import Action
from barrel.callbacks import CallbackChain
from barrel.config import Configuration
from barrel.errors import BarrelError, ConfigurationError, Halt
from barrel.middleware import adapt, use
from barrel.params import Params
from barrel.response import DEFAULT_RESPONSE_BODY, DEFAULT_RESPONSE_CODE, Response
from barrel.session import SESSION_KEY
from barrel.wsgi import to_wsgi

__all__ = [
    # Actions
    "Action",
    "Params",
    "Response",
    "DEFAULT_RESPONSE_CODE",
    "DEFAULT_RESPONSE_BODY",
    "SESSION_KEY",
    # Middleware and callbacks
    "CallbackChain",
    "adapt",
    "use",
    # Configuration and errors
    "Configuration",
    "BarrelError",
    "ConfigurationError",
    "Halt",
    # Serving
    "to_wsgi",
]

# Disabled by default, users can enable with logger.enable("barrel")
logger.disable("barrel")

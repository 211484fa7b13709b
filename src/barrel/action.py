"""The request-handling unit.

An action subclasses :class:`Action` and implements :meth:`Action.call`.
Middleware and callbacks registered on the class run around ``call``; the
action sets status, headers and body through small setters and the final
``(status, headers, body)`` triple is assembled once ``call`` returns.

Example:
    >>> class Create(Action):
    ...     middleware = [load_session]
    ...
    ...     def call(self, params):
    ...         self.status = 201
    ...         self.headers["Location"] = f"/books/{params['id']}"
    ...         self.body = "Created"
    >>>
    >>> Create()({"router.params": {"id": "1"}})
    (201, {'Location': '/books/1'}, ['Created'])
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, Sequence
from typing import Any, ClassVar

from loguru import logger

from . import exposure, middleware as middleware_adapter, throwable
from .callbacks import CallbackChain
from .config import Configuration
from .errors import Halt
from .params import Params
from .response import Response
from .session import get_session
from .types import Environ, Headers, Hook, Middleware, ResponseTriple


class Action:
    """Base class for actions.

    Class-level registrations (middleware, callbacks, exposures, exception
    handlers) are copied into every subclass when it is created, so adding
    to a subclass never changes its parent or siblings.
    """

    configuration: ClassVar[Configuration] = Configuration()
    middleware: ClassVar[Sequence[Middleware]] = ()

    _before_callbacks: ClassVar[CallbackChain] = CallbackChain()
    _after_callbacks: ClassVar[CallbackChain] = CallbackChain()
    _exposures: ClassVar[tuple[str, ...]] = ()
    _exception_handlers: ClassVar[dict[type[BaseException], int]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._before_callbacks = cls._before_callbacks.copy()
        cls._after_callbacks = cls._after_callbacks.copy()
        cls._exposures = tuple(cls._exposures)
        cls._exception_handlers = dict(cls._exception_handlers)

        # Only middleware declared on this class; inherited ones are already
        # in the copied chain
        for mw in cls.__dict__.get("middleware", ()):
            cls.use(mw)

    def __init__(self) -> None:
        self._response = Response()
        self._env: Environ = {}
        self.params: Params | None = None

    # Class-level registration

    @classmethod
    def use(cls, middleware: Middleware) -> Middleware:
        """Run ``middleware`` with the raw environment before ``call``.

        The middleware is used as it is, class or instance. Several calls
        register several middleware, run in registration order.
        """
        middleware_adapter.use(cls._before_callbacks, middleware)
        return middleware

    @classmethod
    def before(cls, *callbacks: Hook | str) -> Any:
        """Register callbacks run before ``call``.

        Callbacks are callables receiving the params, or names of methods on
        the action. Also usable as a decorator on a single function.
        """
        cls._before_callbacks.append(*callbacks)
        return callbacks[0] if len(callbacks) == 1 else None

    @classmethod
    def after(cls, *callbacks: Hook | str) -> Any:
        """Register callbacks run after ``call``."""
        cls._after_callbacks.append(*callbacks)
        return callbacks[0] if len(callbacks) == 1 else None

    @classmethod
    def expose(cls, *names: str) -> None:
        """Publish the given instance attributes through :attr:`exposures`."""
        cls._exposures = cls._exposures + tuple(n for n in names if n not in cls._exposures)

    @classmethod
    def handle_exception(cls, exc_type: type[BaseException], code: int) -> None:
        """Answer with ``code`` whenever ``exc_type`` escapes the action."""
        cls._exception_handlers[exc_type] = code

    @classmethod
    def app(cls, *args: Any, **kwargs: Any) -> Callable[[Environ], ResponseTriple]:
        """Return a callable building a fresh action for every request."""

        def endpoint(environ: Environ) -> ResponseTriple:
            return cls(*args, **kwargs)(environ)

        endpoint.__name__ = cls.__name__
        return endpoint

    # Request handling

    def call(self, params: Params) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement call(params)")

    def __call__(self, environ: Environ) -> ResponseTriple:
        self._reset(environ)
        params = self.params = Params(environ)
        name = type(self).__name__
        logger.debug(f"{name} handling request")

        try:
            self._before_callbacks.run(self, params)
            self.call(params)
            self._after_callbacks.run(self, params)
        except Halt as exc:
            logger.debug(f"{name} halted with status {exc.code}")
            self._respond_with(exc.code, exc.message)
        except Exception as exc:
            self._rescue(exc)

        response = self.response()
        logger.debug(f"{name} responded with status {response[0]}")
        return response

    def _reset(self, environ: Environ) -> None:
        self._response.reset()
        self._env = environ
        self.params = None
        for name in self._exposures:
            self.__dict__.pop(name, None)

    def _rescue(self, exc: Exception) -> None:
        code = throwable.lookup(self._exception_handlers, exc)
        if code is not None:
            logger.info(f"{type(self).__name__} mapped {type(exc).__name__} to status {code}")
            self._respond_with(code)
            return

        if not self.configuration.handle_exceptions:
            raise

        logger.exception(f"Unhandled error in {type(self).__name__}")
        self._respond_with(throwable.SERVER_ERROR)

    def _respond_with(self, code: int, message: Any = None) -> None:
        self.status = code
        self.body = throwable.reason_phrase(code) if message is None else message

    def halt(self, code: int, message: Any = None) -> None:
        """Stop processing and respond with ``code``."""
        throwable.halt(code, message)

    # Response state

    @property
    def status(self) -> Any:
        return self._response.status

    @status.setter
    def status(self, code: Any) -> None:
        self._response.set_status(code)

    @property
    def body(self) -> Any:
        return self._response.body

    @body.setter
    def body(self, value: Any) -> None:
        self._response.set_body(value)

    @property
    def headers(self) -> Headers | None:
        """Response headers, mutable in place."""
        return self._response.get_headers()

    def response(self) -> ResponseTriple:
        """The ``(status, headers, body)`` triple for the current state."""
        return self._response.produce()

    # Request helpers

    @property
    def env(self) -> Environ:
        return self._env

    @property
    def session(self) -> MutableMapping[str, Any]:
        return get_session(self._env, self.configuration.session_key)

    @property
    def exposures(self) -> dict[str, Any]:
        return exposure.collect(self, self._exposures)

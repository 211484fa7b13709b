"""Shared test fixtures and utilities."""

import pytest


@pytest.fixture
def environ():
    """Create a minimal WSGI-style request environment."""
    return {
        "REQUEST_METHOD": "GET",
        "PATH_INFO": "/books/1",
        "QUERY_STRING": "",
        "router.params": {"id": "1"},
    }


class RecordingMiddleware:
    """Middleware that records every environment it is called with."""

    def __init__(self, name="recorder", log=None):
        self.name = name
        self.log = log if log is not None else []
        self.calls = []

    def __call__(self, env):
        self.calls.append(env)
        self.log.append(self.name)
        return "ignored"


class Context:
    """Bare request context exposing only an environment."""

    def __init__(self, env):
        self.env = env


@pytest.fixture
def call_log():
    """Shared list middleware and callbacks append to, to check ordering."""
    return []


@pytest.fixture
def recorder(call_log):
    """Factory for recording middleware sharing ``call_log``."""

    def make(name="recorder"):
        return RecordingMiddleware(name, call_log)

    return make


@pytest.fixture
def context():
    """Factory for bare request contexts."""
    return Context

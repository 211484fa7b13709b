"""Tests for session access and exposures."""

from dataclasses import replace

from barrel.action import Action
from barrel.config import Configuration
from barrel.session import SESSION_KEY, get_session


class TestSession:
    """Test session access."""

    def test_reads_session_from_environment(self, environ):
        """Test the session loaded by middleware is returned."""
        def load_session(env):
            env[SESSION_KEY] = {"user_id": 42}

        class Show(Action):
            middleware = [load_session]

            def call(self, params):
                self.body = str(self.session["user_id"])

        assert Show()(environ)[2] == ["42"]

    def test_creates_session_when_missing(self, environ):
        """Test writing to a missing session stores it in the environment."""
        class Login(Action):
            def call(self, params):
                self.session["user_id"] = 7

        Login()(environ)
        assert environ[SESSION_KEY] == {"user_id": 7}

    def test_custom_session_key(self, environ):
        """Test the configured key is used."""
        environ["beaker.session"] = {"flash": "hi"}

        class Show(Action):
            configuration = Configuration(session_key="beaker.session")

            def call(self, params):
                self.body = self.session["flash"]

        assert Show()(environ)[2] == ["hi"]

    def test_third_party_session_key(self, environ):
        """Test a session written by beaker-style middleware under its own key."""
        def beaker_style(env):
            env["beaker.session"] = {"user_id": 9}

        class Default(Action):
            middleware = [beaker_style]

            def call(self, params):
                self.body = str(self.session.get("user_id"))

        class Configured(Default):
            configuration = replace(Action.configuration, session_key="beaker.session")

        assert Default()(dict(environ))[2] == ["None"]
        assert Configured()(dict(environ))[2] == ["9"]

    def test_get_session_keeps_existing(self):
        """Test an existing session object is returned as-is."""
        session = {"a": 1}
        env = {SESSION_KEY: session}
        assert get_session(env) is session


class TestExposures:
    """Test exposing action attributes."""

    def test_exposures(self, environ):
        """Test exposed attributes are published with params."""
        class Show(Action):
            def call(self, params):
                self.book = {"id": params["id"]}

        Show.expose("book", "author")
        action = Show()
        action(environ)

        exposures = action.exposures
        assert exposures["book"] == {"id": "1"}
        assert exposures["author"] is None
        assert exposures["params"] is action.params

    def test_expose_is_deduplicated(self):
        """Test exposing a name twice keeps one entry."""
        class Show(Action):
            pass

        Show.expose("book")
        Show.expose("book", "shelf")
        assert Show._exposures == ("book", "shelf")

    def test_exposures_do_not_leak(self):
        """Test exposures on a subclass stay there."""
        class Base(Action):
            pass

        Base.expose("book")

        class Child(Base):
            pass

        Child.expose("author")

        assert Base._exposures == ("book",)
        assert Child._exposures == ("book", "author")

    def test_reused_instance_drops_previous_exposures(self, environ):
        """Test attributes exposed by one request are gone in the next."""
        class Show(Action):
            def call(self, params):
                if params["id"] == "1":
                    self.book = "secret"

        Show.expose("book")
        action = Show()

        action(environ)
        assert action.exposures["book"] == "secret"

        action({"router.params": {"id": "2"}})
        assert action.exposures["book"] is None
        assert "book" not in vars(action)

"""Configuration for actions."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from .errors import ConfigurationError
from .session import SESSION_KEY


@dataclass(frozen=True)
class Configuration:
    """Settings shared by every action of a class.

    Instances are immutable because subclasses share their parent's
    configuration. Derive a changed copy with ``dataclasses.replace``.

    Attributes:
        handle_exceptions: Turn unmapped exceptions into a 500 response
            instead of letting them propagate.
        session_key: Environment key the session middleware stores sessions under.
        default_charset: Encoding used for text body chunks on the wire.
    """

    handle_exceptions: bool = True
    session_key: str = SESSION_KEY
    default_charset: str = "utf-8"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Configuration:
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key in known:
                kwargs[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        return cls(**kwargs)

    @classmethod
    def from_env(cls, prefix: str = "BARREL_") -> Configuration:
        """Build a configuration from ``<prefix><FIELD>`` environment variables."""
        kwargs = {}
        for f in fields(cls):
            value = os.environ.get(f"{prefix}{f.name.upper()}")
            if value is not None:
                kwargs[f.name] = _convert_value(value)
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: str | Path) -> Configuration:
        """Load a YAML or JSON configuration file."""
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}", source=str(path))

        with open(path) as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            elif path.suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration format: {path.suffix}", source=str(path)
                )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {path}", source=str(path)
            )

        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)


def _convert_value(value: str) -> Any:
    """Convert an environment string to bool, int or float where possible."""
    if not value:
        return value

    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value

"""Process-wide configuration for webminify.

Settings come from a JSON file at ~/.webminify/config.json, overlaid by
WEBMINIFY_* environment variables. The result is built once at startup and
handed to the Minifier; it cannot be changed afterwards.
"""

import json
import os
from collections.abc import Mapping
from types import MappingProxyType

from .log import get_logger
from .options import PROCESS_CONFIG_KEYS

ENV_PREFIX = "WEBMINIFY_"

_log = get_logger("config")


def _coerce_env(key: str, raw: str):
    if isinstance(PROCESS_CONFIG_KEYS[key], bool):
        return raw.lower() in ("1", "true", "yes")
    return raw


class ProcessConfig(Mapping):
    """Read-only mapping of process-config keys to values.

    Only keys listed in PROCESS_CONFIG_KEYS are kept. A key mapped to None is
    treated as unset, so the call-site value or default applies.
    """

    def __init__(self, values: Mapping | None = None):
        kept = {}
        for key, value in (values or {}).items():
            if key not in PROCESS_CONFIG_KEYS:
                _log.debug("Dropping unknown config key %r", key)
                continue
            if value is None:
                continue
            kept[key] = value
        self._values = MappingProxyType(kept)

    @classmethod
    def load(cls, path: str | None = None, environ: Mapping | None = None) -> "ProcessConfig":
        """Load config from file, then overlay env vars."""
        values = {}

        if path is None:
            from webminify import data_dir  # noqa: PLC0415

            path = os.path.join(data_dir(), "config.json")

        if os.path.exists(path):
            try:
                with open(path) as f:
                    user_config = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                _log.warning("Ignoring unreadable config file %s: %s", path, e)
            else:
                if isinstance(user_config, dict):
                    values.update(user_config)
                else:
                    _log.warning("Ignoring config file %s: top level is not an object", path)

        environ = os.environ if environ is None else environ
        for key in PROCESS_CONFIG_KEYS:
            env_val = environ.get(ENV_PREFIX + key.upper())
            if env_val is not None:
                values[key] = _coerce_env(key, env_val)

        return cls(values)

    def __getitem__(self, key):
        return self._values[key]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"ProcessConfig({dict(self._values)!r})"

    def to_dict(self) -> dict:
        return dict(self._values)

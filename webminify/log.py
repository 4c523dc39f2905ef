"""Logger setup shared by the webminify modules.

Debug output goes to <data_dir>/minify.log when WEBMINIFY_DEBUG=true,
otherwise the package logger stays silent.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DEBUG_ENV = "WEBMINIFY_DEBUG"

_root = logging.getLogger("webminify")
_configured = False


def _debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV, "").lower() in ("1", "true", "yes")


def _configure():
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    if _debug_enabled():
        from webminify import data_dir  # noqa: PLC0415

        log_dir = data_dir()
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(os.path.join(log_dir, "minify.log"))
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _root.addHandler(handler)
        _root.setLevel(logging.DEBUG)
    else:
        _root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the ``webminify.<name>`` logger."""
    _configure()
    return logging.getLogger(f"webminify.{name}")


def enable_stderr(level=logging.DEBUG):
    """Attach a stderr handler to the package logger (used by the CLI)."""
    _configure()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _root.addHandler(handler)
    _root.setLevel(level)
    return handler

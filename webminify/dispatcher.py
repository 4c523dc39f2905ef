"""Minification dispatcher: routes text to the engine for its content kind."""

import threading
from collections.abc import Mapping

from .config import ProcessConfig
from .engines import ENGINE_CLASSES
from .kinds import ContentKind
from .log import get_logger
from .options import resolve_options

_log = get_logger("dispatcher")


class Minifier:
    """Resolves options for a call and hands the text to one engine.

    The process config is fixed at construction. Engines are built on first
    use, at most once per kind, and reused for every later call.
    """

    def __init__(self, process_config: Mapping | None = None, engine_factories=None):
        if not isinstance(process_config, ProcessConfig):
            process_config = ProcessConfig(process_config)
        self._config = process_config
        self._factories = dict(ENGINE_CLASSES)
        if engine_factories:
            self._factories.update(
                {ContentKind.parse(k): f for k, f in engine_factories.items()}
            )
        self._engines = {}
        self._lock = threading.Lock()

    @property
    def process_config(self) -> ProcessConfig:
        return self._config

    def engine(self, kind):
        """Return the engine for ``kind``, building it on first use."""
        kind = ContentKind.parse(kind)
        engine = self._engines.get(kind)
        if engine is not None:
            return engine
        with self._lock:
            engine = self._engines.get(kind)
            if engine is None:
                _log.debug("Building %s engine", kind.value)
                engine = self._factories[kind]()
                self._engines[kind] = engine
        return engine

    def warm_up(self):
        """Build every engine now rather than on first use."""
        for kind in ContentKind:
            self.engine(kind)

    def minify(self, kind, text: str | None, overrides: Mapping | None = None) -> str | None:
        """Minify ``text`` as ``kind`` ("html", "js" or "css").

        Returns None when ``text`` is None, whatever the kind. Otherwise raises
        UnknownEngineError for any other kind. Errors raised by an engine
        propagate unchanged.
        """
        if text is None:
            return None
        kind = ContentKind.parse(kind)

        options = resolve_options(kind, overrides, self._config)
        result = self.engine(kind).compact(text, options)
        _log.debug("Minified %s: %d -> %d chars", kind.value, len(text), len(result))
        return result

"""Base class for compaction engines."""

from abc import ABC, abstractmethod

from ..kinds import ContentKind


class CompactionEngine(ABC):
    """Minifies text of one content kind.

    Engines hold no per-call state: a single instance is built per kind and
    shared by every call, from any thread.
    """

    kind: ContentKind

    @property
    def name(self) -> str:
        return self.kind.value

    @abstractmethod
    def compact(self, text: str, options) -> str:
        """Return the minified form of ``text`` under ``options``."""

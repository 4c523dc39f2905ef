"""Content kinds understood by the dispatcher."""

from enum import Enum

from .errors import UnknownEngineError


class ContentKind(Enum):
    HTML = "html"
    JAVASCRIPT = "js"
    CSS = "css"

    @classmethod
    def parse(cls, value) -> "ContentKind":
        """Return the member for ``value`` (a member or its tag).

        Tags are matched exactly: ``"JS"`` is not ``"js"``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownEngineError(value) from None

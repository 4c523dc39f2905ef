"""Exceptions raised by the minification dispatcher."""


class MinifyError(Exception):
    """Base class for webminify errors."""


class UnknownEngineError(MinifyError, ValueError):
    """Raised when a caller asks for a content kind with no engine."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"unknown engine: {kind}")

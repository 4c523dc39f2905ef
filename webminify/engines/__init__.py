"""Compaction engines, one per content kind."""

from ..kinds import ContentKind
from .base import CompactionEngine
from .html import HtmlEngine
from .script import ScriptEngine
from .style import StyleEngine

ENGINE_CLASSES = {
    ContentKind.HTML: HtmlEngine,
    ContentKind.JAVASCRIPT: ScriptEngine,
    ContentKind.CSS: StyleEngine,
}

__all__ = [
    "ENGINE_CLASSES",
    "CompactionEngine",
    "HtmlEngine",
    "ScriptEngine",
    "StyleEngine",
]

"""HTML engine backed by htmlmin, with nested <script>/<style> compaction.

htmlmin never touches the bodies of <script> and <style> elements, so those
are minified first with the JavaScript and CSS engines at the levels given
by ``do_javascript`` and ``do_stylesheet``. A falsy level leaves them as is.
"""

import re

import htmlmin

from ..kinds import ContentKind
from .base import CompactionEngine
from .script import ScriptEngine
from .style import StyleEngine

_SCRIPT_RE = re.compile(r"(<script\b([^>]*)>)(.*?)(</script\s*>)", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.IGNORECASE | re.DOTALL)
_TYPE_RE = re.compile(r"""(?:^|\s)type\s*=\s*(["']?)([^"'\s>]*)\1""", re.IGNORECASE)

_JS_TYPES = frozenset(
    {
        "",
        "module",
        "text/javascript",
        "application/javascript",
        "application/x-javascript",
        "text/ecmascript",
        "application/ecmascript",
    }
)


def _is_javascript(attrs: str) -> bool:
    m = _TYPE_RE.search(attrs)
    if not m:
        return True
    return m.group(2).strip().lower() in _JS_TYPES


class HtmlEngine(CompactionEngine):
    kind = ContentKind.HTML

    def __init__(self, script_engine=None, style_engine=None):
        self.script_engine = script_engine or ScriptEngine()
        self.style_engine = style_engine or StyleEngine()

    def compact(self, text: str, options) -> str:
        if options.do_javascript:
            text = self._compact_scripts(text, options.do_javascript)
        if options.do_stylesheet:
            text = self._compact_styles(text, options.do_stylesheet)

        html5 = bool(options.html5)
        return htmlmin.minify(
            text,
            remove_comments=bool(options.remove_comments),
            remove_empty_space=bool(options.remove_newlines),
            reduce_boolean_attributes=html5,
            remove_optional_attribute_quotes=html5,
        )

    def _compact_scripts(self, text: str, level) -> str:
        def repl(m):
            if not _is_javascript(m.group(2)) or not m.group(3).strip():
                return m.group(0)
            body = self.script_engine.compact_level(m.group(3), level)
            return m.group(1) + body + m.group(4)

        return _SCRIPT_RE.sub(repl, text)

    def _compact_styles(self, text: str, level) -> str:
        def repl(m):
            if not m.group(2).strip():
                return m.group(0)
            return m.group(1) + self.style_engine.compact_level(m.group(2), level) + m.group(3)

        return _STYLE_RE.sub(repl, text)

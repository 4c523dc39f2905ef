"""JavaScript engine backed by rjsmin."""

import rjsmin

from ..kinds import ContentKind
from ..log import get_logger
from .base import CompactionEngine

_log = get_logger("engines.script")

# Levels that drop every comment, including /*! ... */ license blocks.
# rjsmin never renames identifiers, so these all produce the same output.
_AGGRESSIVE = ("shrink", "obfuscate", "best")
LEVELS = ("clean", *_AGGRESSIVE)


class ScriptEngine(CompactionEngine):
    kind = ContentKind.JAVASCRIPT

    def compact(self, text: str, options) -> str:
        return self.compact_level(text, options.compress)

    def compact_level(self, text: str, level) -> str:
        if level not in LEVELS:
            _log.debug("Unknown js compress level %r, using 'clean'", level)
            level = "clean"
        return rjsmin.jsmin(text, keep_bang_comments=level not in _AGGRESSIVE)

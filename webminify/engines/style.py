"""CSS engine backed by rcssmin."""

import re

import rcssmin

from ..kinds import ContentKind
from ..log import get_logger
from .base import CompactionEngine

_log = get_logger("engines.style")

LEVELS = ("minify", "pretty")

# Strings and comments are matched whole so braces inside them are skipped.
_TOKEN_RE = re.compile(r"""("(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'|/\*.*?\*/|\})""", re.DOTALL)


def _break_rules(css: str) -> str:
    """Put a newline after every closing brace outside strings and comments."""

    def repl(m):
        token = m.group(0)
        return token + "\n" if token == "}" else token

    return _TOKEN_RE.sub(repl, css).rstrip("\n")


class StyleEngine(CompactionEngine):
    """``minify`` puts everything on one line without comments; ``pretty``
    keeps /*! */ comments and starts each rule on its own line."""

    kind = ContentKind.CSS

    def compact(self, text: str, options) -> str:
        return self.compact_level(text, options.compress)

    def compact_level(self, text: str, level) -> str:
        if level not in LEVELS:
            _log.debug("Unknown css compress level %r, using 'minify'", level)
            level = "minify"
        if level == "pretty":
            return _break_rules(rcssmin.cssmin(text, keep_bang_comments=True))
        return rcssmin.cssmin(text, keep_bang_comments=False)

"""Option resolution: process config > call-site overrides > defaults.

Each content kind has a fixed schema. For HTML the call-site key and the
process-config key share a name. For JavaScript and CSS the call-site key is
``compress`` while the process config uses ``js_compress``/``css_compress``,
so a single settings block can configure all three engines.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple

from .kinds import ContentKind
from .log import get_logger

_log = get_logger("options")


class OptionField(NamedTuple):
    name: str
    call_key: str
    config_key: str
    default: Any


@dataclass(frozen=True)
class HtmlOptions:
    remove_comments: Any = True
    remove_newlines: Any = True
    js_compress: Any = "best"
    css_compress: Any = "minify"
    html5: Any = True

    @property
    def do_javascript(self):
        """Compress level for inline <script> bodies."""
        return self.js_compress

    @property
    def do_stylesheet(self):
        """Compress level for inline <style> bodies."""
        return self.css_compress


@dataclass(frozen=True)
class ScriptOptions:
    compress: Any = "best"


@dataclass(frozen=True)
class StyleOptions:
    compress: Any = "minify"


OPTION_SCHEMAS = {
    ContentKind.HTML: (
        OptionField("remove_comments", "remove_comments", "remove_comments", True),
        OptionField("remove_newlines", "remove_newlines", "remove_newlines", True),
        OptionField("js_compress", "js_compress", "js_compress", "best"),
        OptionField("css_compress", "css_compress", "css_compress", "minify"),
        OptionField("html5", "html5", "html5", True),
    ),
    ContentKind.JAVASCRIPT: (OptionField("compress", "compress", "js_compress", "best"),),
    ContentKind.CSS: (OptionField("compress", "compress", "css_compress", "minify"),),
}

_RECORDS = {
    ContentKind.HTML: HtmlOptions,
    ContentKind.JAVASCRIPT: ScriptOptions,
    ContentKind.CSS: StyleOptions,
}


def _collect_config_keys() -> dict:
    keys = {}
    for fields in OPTION_SCHEMAS.values():
        for field in fields:
            keys.setdefault(field.config_key, field.default)
    return keys


# process-config key -> built-in default (its type drives env coercion)
PROCESS_CONFIG_KEYS = _collect_config_keys()


def call_keys(kind) -> frozenset:
    """Call-site keys recognized for ``kind``."""
    return frozenset(f.call_key for f in OPTION_SCHEMAS[ContentKind.parse(kind)])


def _lookup(source: Mapping, key: str):
    """Return (present, value); a None value counts as absent."""
    value = source.get(key)
    return value is not None, value


def resolve_options(kind, overrides: Mapping | None = None, process_config: Mapping | None = None):
    """Build the option record for one call.

    Every field of the record is populated: the process config wins when it
    holds a value, then the call-site overrides, then the built-in default.
    Values are not validated; engines receive whatever resolves.
    """
    kind = ContentKind.parse(kind)
    overrides = overrides or {}
    process_config = process_config or {}
    schema = OPTION_SCHEMAS[kind]

    ignored = set(overrides) - {f.call_key for f in schema}
    if ignored:
        names = ", ".join(sorted(map(str, ignored)))
        _log.debug("Ignoring unknown %s options: %s", kind.value, names)

    values = {}
    for field in schema:
        found, value = _lookup(process_config, field.config_key)
        if not found:
            found, value = _lookup(overrides, field.call_key)
        if not found:
            value = field.default
        values[field.name] = value

    return _RECORDS[kind](**values)

"""CLI entry point for webminify: version, minify, config."""

import argparse
import json
import sys

from webminify import __version__
from webminify.config import ProcessConfig
from webminify.dispatcher import Minifier
from webminify.errors import MinifyError
from webminify.log import enable_stderr

_TRUE = ("1", "true", "yes")
_FALSE = ("0", "false", "no")


def _parse_setting(item):
    """Parse a KEY=VALUE override; boolean-looking values become bools."""
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {item!r}")
    lowered = value.lower()
    if lowered in _TRUE:
        return key, True
    if lowered in _FALSE:
        return key, False
    return key, value


def cmd_version(_args):
    """Print current version."""
    print(f"webminify v{__version__}")


def cmd_minify(args):
    """Minify a file (or stdin) and write the result to a file (or stdout)."""
    minifier = Minifier(ProcessConfig.load(args.config))

    try:
        if args.file and args.file != "-":
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        else:
            text = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = minifier.minify(args.kind, text, dict(args.set or []))
    except MinifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if not args.output:
        sys.stdout.write(result)
        return

    try:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(result)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_config(args):
    """Print the effective process configuration as JSON."""
    config = ProcessConfig.load(args.config)
    print(json.dumps(config.to_dict(), indent=2, sort_keys=True))


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="webminify",
        description="webminify: minify HTML, JavaScript and CSS",
    )
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # version
    subparsers.add_parser("version", help="Show current version")

    # minify
    minify_parser = subparsers.add_parser("minify", help="Minify a file or stdin")
    minify_parser.add_argument("kind", help="Content kind: html, js or css")
    minify_parser.add_argument("file", nargs="?", help="Input file (default: stdin)")
    minify_parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    minify_parser.add_argument(
        "--set",
        action="append",
        type=_parse_setting,
        metavar="KEY=VALUE",
        help="Call-site option override (repeatable)",
    )
    minify_parser.add_argument("--config", help="Path to a JSON config file")

    # config
    config_parser = subparsers.add_parser("config", help="Show effective configuration")
    config_parser.add_argument("--config", help="Path to a JSON config file")

    args = parser.parse_args(argv)

    if args.debug:
        enable_stderr()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    commands = {
        "version": cmd_version,
        "minify": cmd_minify,
        "config": cmd_config,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()

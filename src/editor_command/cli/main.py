# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import json
import shlex

from .. import __version__
from .._util.ansi import (
    gray as _gray,
    green as _green,
    supports_color as _supports_color,
    yes_no as _yes_no,
)
from .._util.logging_utils import _log_debug
from ..builder import EditorInvocation
from ..core.config import (
    config_builder,
    config_sources,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
)
from ..core.paths import state_root as _state_root
from ..errors import EditorCommandError


def _cmd_resolve(
    paths: list[str], priority: str | None, default: str | None, as_json: bool
) -> None:
    """Print the editor invocation for *paths*."""
    try:
        builder = config_builder(paths, priority=priority, default=default)
        invocation = builder.build()
    except EditorCommandError as exc:
        _log_debug(f"resolve failed: {exc}")
        raise SystemExit(str(exc)) from exc

    _log_debug(f"resolved {builder.command!r} -> {invocation.argv}")
    print(_format_invocation(invocation, as_json))


def _format_invocation(invocation: EditorInvocation, as_json: bool) -> str:
    if as_json:
        return json.dumps({"program": invocation.program, "args": list(invocation.args)})
    return shlex.join(invocation.argv)


def _cmd_sources(priority: str | None, default: str | None) -> None:
    """List every source in precedence order and mark the one that wins."""
    color_enabled = _supports_color()
    winner_found = False
    try:
        sources = config_sources(priority, default)
    except EditorCommandError as exc:
        _log_debug(f"sources failed: {exc}")
        raise SystemExit(str(exc)) from exc

    print("Editor command sources (highest precedence first):")
    for label, value in sources:
        shown = "(unset)" if value is None else repr(value)
        line = f"- {label}: {_gray(shown, color_enabled)}"
        if value is not None and not winner_found:
            winner_found = True
            line += f"  {_green('<- selected', color_enabled)}"
        print(line)
    if not winner_found:
        print("No source is set.")


def _print_config() -> None:
    """Display config search order and writable locations."""
    color_enabled = _supports_color()
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(gcfg.is_file(), color_enabled)})"
    )
    print("- Global config search order:")
    for p in _global_config_search_paths():
        print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(p.is_file(), color_enabled)})")

    print("Writable locations (write):")
    print(f"- Debug log: {_gray(str(_state_root() / 'editor-command.log'), color_enabled)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="editor-command",
        description="editor-command – resolve the command that opens files in your editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Source precedence:\n"
            "  --command → config editor.command → $VISUAL → $EDITOR\n"
            "  → --default → config editor.default\n"
            "\n"
            "Example:\n"
            "  eval \"$(editor-command resolve 'my notes.md')\""
        ),
    )
    parser.add_argument("--version", action="version", version=f"editor-command {__version__}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_resolve = sub.add_parser("resolve", help="Print the editor command for the given files")
    p_resolve.add_argument("paths", nargs="*", metavar="PATH", help="Files to open")
    p_resolve.add_argument("--command", help="Override command (beats config and environment)")
    p_resolve.add_argument("--default", help="Fallback command when nothing else is set")
    p_resolve.add_argument(
        "--json", action="store_true", help="Print program and args as a JSON object"
    )

    p_sources = sub.add_parser("sources", help="Show every command source and which one wins")
    p_sources.add_argument("--command", help="Override command")
    p_sources.add_argument("--default", help="Fallback command")

    sub.add_parser("config", help="Show configuration and log paths")

    args = parser.parse_args(argv)

    if args.cmd == "resolve":
        _cmd_resolve(args.paths, args.command, args.default, args.json)
    elif args.cmd == "sources":
        _cmd_sources(args.command, args.default)
    elif args.cmd == "config":
        _print_config()
    else:
        parser.error("Unknown command")


if __name__ == "__main__":
    main()

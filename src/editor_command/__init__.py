# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""editor-command package.

Build a command that opens files in the user's configured editor, taken from
an app-specific override, ``$VISUAL``, ``$EDITOR`` or a fallback.

Modules:
- editor_command.builder: EditorBuilder, EditorInvocation, editor_command()
- editor_command.errors: EditorCommandError and its subclasses
- editor_command.core: global YAML config and platform paths
- editor_command.cli: CLI entry point (editor-command)
- editor_command._util: internal helpers (ansi, logging)
"""

from .builder import EditorBuilder, EditorInvocation, editor_command
from .errors import (
    ConfigError,
    EditorCommandError,
    EmptyCommandError,
    NoCommandError,
    ParseError,
)

__all__ = [
    "EditorBuilder",
    "EditorInvocation",
    "editor_command",
    "ConfigError",
    "EditorCommandError",
    "EmptyCommandError",
    "NoCommandError",
    "ParseError",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("editor-command")
except PackageNotFoundError:
    # Development mode when package is not installed
    import tomllib
    from pathlib import Path

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["tool"]["poetry"]["version"]
    else:
        __version__ = "unknown"

# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Global YAML config and the source chain built from it.

Config file (``config.yml``)::

    editor:
      command: code --wait   # app-specific override, beats $VISUAL/$EDITOR
      default: nano          # fallback when nothing else is set
"""

import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from ..builder import EditorBuilder, StrPath
from ..errors import ConfigError
from .paths import APP_NAME, config_root


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If EDITOR_COMMAND_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (EDITOR_COMMAND_CONFIG_DIR or XDG)
        2) sys.prefix/etc/editor-command/config.yml
        3) /etc/editor-command/config.yml
    """
    env_file = os.environ.get("EDITOR_COMMAND_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / APP_NAME / "config.yml"
    etc_cfg = Path("/etc") / APP_NAME / "config.yml"
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit EDITOR_COMMAND_CONFIG_FILE is returned even if missing so the
    user can see where the tool is looking.  If nothing exists, return the
    last candidate.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    """Load the global config file, or ``{}`` if there is none.

    Raises:
        ConfigError: the file exists but cannot be read or is not valid YAML.
    """
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load config file {cfg_path}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. ``editor: vim``), returns
    ``{}`` so callers can always use ``.get()``.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value


def _editor_setting(key: str) -> str | None:
    value = get_global_section("editor").get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"Invalid config value editor.{key}: expected a command string, "
            f"got {type(value).__name__}"
        )
    return value


def get_editor_command() -> str | None:
    """Return ``editor.command`` from global config, or None if not set."""
    return _editor_setting("command")


def get_editor_default() -> str | None:
    """Return ``editor.default`` from global config, or None if not set."""
    return _editor_setting("default")


def config_sources(
    priority: str | None = None,
    default: str | None = None,
) -> list[tuple[str, str | None]]:
    """Return ``(label, value)`` for every source, highest precedence first.

    Environment variables are read here, at call time.
    """
    return [
        ("--command", priority),
        ("config editor.command", get_editor_command()),
        ("VISUAL", os.environ.get("VISUAL")),
        ("EDITOR", os.environ.get("EDITOR")),
        ("--default", default),
        ("config editor.default", get_editor_default()),
    ]


def config_builder(
    paths: Iterable[StrPath] = (),
    priority: str | None = None,
    default: str | None = None,
) -> EditorBuilder:
    """Return a builder fed with the full source chain and *paths*.

    Precedence: *priority*, ``editor.command``, ``$VISUAL``, ``$EDITOR``,
    *default*, ``editor.default``.
    """
    return (
        EditorBuilder()
        .source(priority)
        .source(get_editor_command())
        .environment()
        .source(default)
        .source(get_editor_default())
        .paths(paths)
    )

# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while assembling an editor command.

All of them derive from :class:`EditorCommandError` so callers can handle the
whole family with a single ``except`` clause.  Messages are stable and meant
to be shown to the user as-is.
"""


class EditorCommandError(Exception):
    """Base class for every editor command failure."""


class NoCommandError(EditorCommandError):
    """No source produced a command string."""

    def __init__(self) -> None:
        super().__init__("VISUAL and EDITOR environment variables are undefined")


class EmptyCommandError(EditorCommandError):
    """A command was selected but it contains no words."""

    def __init__(self) -> None:
        super().__init__("Editor command is empty")


class ParseError(EditorCommandError):
    """The selected command is not valid shell-like syntax.

    ``detail`` holds the tokenizer's own message; its ``ValueError`` is
    chained as ``__cause__`` by the raiser.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid editor command: {detail}")
        self.detail = detail


class ConfigError(EditorCommandError):
    """The global ``config.yml`` cannot be read or holds an invalid editor setting."""

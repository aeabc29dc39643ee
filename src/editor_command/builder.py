# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Resolve the user's editor command and build an invocation for it.

The command is taken from the first *present* source offered to an
:class:`EditorBuilder`.  The usual chain, in decreasing precedence, is:

  1. an app-specific override (``source(priority)``)
  2. ``$VISUAL``
  3. ``$EDITOR``            (2 and 3 via ``environment()``)
  4. a static fallback      (``source(default)``)

The winning string is split with :func:`shlex.split` into a program and its
arguments, and every registered path is appended as one trailing argument::

    invocation = (
        EditorBuilder()
        .source(app_config.editor)
        .environment()
        .source("vi")
        .path(Path("notes.md"))
        .build()
    )
    subprocess.run(invocation.argv, check=False)

Nothing here spawns a process.
"""

import os
import shlex
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import EmptyCommandError, NoCommandError, ParseError

# Checked in this order by EditorBuilder.environment()
ENV_VARS: tuple[str, ...] = ("VISUAL", "EDITOR")

StrPath = str | os.PathLike[str]


@dataclass(frozen=True)
class EditorInvocation:
    """A resolved editor command, ready to hand to ``subprocess``."""

    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        """Return ``[program, *args]``."""
        return [self.program, *self.args]


class EditorBuilder:
    """Accumulate editor command sources and target paths.

    The first source that is not ``None`` wins; later offers are ignored.
    An empty string counts as present: it wins and then fails in
    :meth:`build` with :class:`EmptyCommandError` instead of silently
    falling through to a lower-priority source.

    A builder is meant to be filled and consumed within one call sequence.
    It does no locking.
    """

    def __init__(self) -> None:
        self._command: str | None = None
        self._paths: list[str] = []

    @property
    def command(self) -> str | None:
        """The selected raw command string, or ``None`` if nothing won yet."""
        return self._command

    @property
    def target_paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def source(self, source: str | None) -> "EditorBuilder":
        """Offer *source* as the command unless one is already selected."""
        if self._command is None and source is not None:
            self._command = source
        return self

    def sources(self, sources: Iterable[str | None]) -> "EditorBuilder":
        """Offer each of *sources* in order."""
        for source in sources:
            self.source(source)
        return self

    def environment(self) -> "EditorBuilder":
        """Offer ``$VISUAL`` then ``$EDITOR``.

        The variables are read now, not at :meth:`build` time, so changing
        the environment afterwards does not affect this builder.
        """
        for name in ENV_VARS:
            self.source(os.environ.get(name))
        return self

    def path(self, path: StrPath) -> "EditorBuilder":
        """Append *path* as a trailing argument."""
        self._paths.append(os.fspath(path))
        return self

    def paths(self, paths: Iterable[StrPath]) -> "EditorBuilder":
        for path in paths:
            self.path(path)
        return self

    def build(self) -> EditorInvocation:
        """Split the selected command and append the target paths.

        Raises:
            NoCommandError: no source was present.
            ParseError: the command has a dangling quote or similar.
            EmptyCommandError: the command contains no words.
        """
        if self._command is None:
            raise NoCommandError()

        words = split_command(self._command)
        if not words:
            raise EmptyCommandError()

        program, *base_args = words
        return EditorInvocation(program=program, args=(*base_args, *self._paths))


def split_command(command: str) -> list[str]:
    """Split *command* into shell words, raising :class:`ParseError` on bad syntax."""
    try:
        return shlex.split(command)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def editor_command(
    path: StrPath,
    priority: str | None = None,
    default: str | None = None,
) -> EditorInvocation:
    """Build an invocation that opens *path* in the user's editor.

    Sources, in decreasing precedence: *priority*, ``$VISUAL``, ``$EDITOR``,
    *default*.  *priority* is meant for an app-specific configured command,
    *default* for a fallback when everything else is undefined.
    """
    return EditorBuilder().source(priority).environment().source(default).path(path).build()

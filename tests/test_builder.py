# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import unittest
from pathlib import Path

from test_utils import lock_env

from editor_command.builder import EditorBuilder, EditorInvocation, editor_command, split_command
from editor_command.errors import (
    EditorCommandError,
    EmptyCommandError,
    NoCommandError,
    ParseError,
)


class EditorCommandTests(unittest.TestCase):
    """Tests for editor_command()."""

    def test_source_precedence(self) -> None:
        cases = [
            # name, priority, VISUAL, EDITOR, default, program, args
            ("priority", "zed", "ted", "fred", "ded", "zed", []),
            ("visual", None, "ted", "fred", "ded", "ted", []),
            ("editor", None, None, "fred", "ded", "fred", []),
            ("default", None, None, None, "ded", "ded", []),
            ("with_args", "ned --wait 60s", None, None, None, "ned", ["--wait", "60s"]),
            (
                "quotes",
                "ned '--single \" quotes' \"--double ' quotes\"",
                None,
                None,
                None,
                "ned",
                ['--single " quotes', "--double ' quotes"],
            ),
        ]
        for name, priority, visual, editor, default, program, args in cases:
            with self.subTest(name):
                with lock_env({"VISUAL": visual, "EDITOR": editor}):
                    invocation = editor_command(Path("file.yml"), priority, default)
                self.assertEqual(invocation.program, program)
                self.assertEqual(list(invocation.args), [*args, "file.yml"])

    def test_no_command(self) -> None:
        with lock_env({"VISUAL": None, "EDITOR": None}):
            with self.assertRaises(NoCommandError) as ctx:
                editor_command(Path("file.yml"))
        self.assertEqual(
            str(ctx.exception), "VISUAL and EDITOR environment variables are undefined"
        )

    def test_empty_command(self) -> None:
        with self.assertRaises(EmptyCommandError) as ctx:
            editor_command(Path("file.yml"), "")
        self.assertEqual(str(ctx.exception), "Editor command is empty")

    def test_invalid_command(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            editor_command(Path("file.yml"), "'unclosed quote")
        self.assertEqual(str(ctx.exception), "Invalid editor command: No closing quotation")
        self.assertEqual(ctx.exception.detail, "No closing quotation")
        self.assertIsInstance(ctx.exception.__cause__, ValueError)


class EditorBuilderScenarioTests(unittest.TestCase):
    def test_visual_beats_editor(self) -> None:
        with lock_env({"VISUAL": "vim", "EDITOR": "emacs"}):
            invocation = EditorBuilder().environment().path("file.txt").build()
        self.assertEqual(invocation, EditorInvocation("vim", ("file.txt",)))

    def test_override_beats_environment_and_fallback(self) -> None:
        with lock_env({"VISUAL": "vim", "EDITOR": "emacs"}):
            builder = EditorBuilder().source("code --wait").environment().source("vi")
        invocation = builder.path("file.txt").build()
        self.assertEqual(invocation.program, "code")
        self.assertEqual(invocation.args, ("--wait", "file.txt"))

    def test_fallback_when_environment_unset(self) -> None:
        with lock_env({"VISUAL": None, "EDITOR": None}):
            builder = EditorBuilder().source(None).environment().source("vi")
        self.assertEqual(builder.path("file.txt").build().argv, ["vi", "file.txt"])

    def test_empty_override_only(self) -> None:
        with self.assertRaises(EmptyCommandError):
            EditorBuilder().source("").build()

    def test_whitespace_override_is_empty(self) -> None:
        with self.assertRaises(EmptyCommandError):
            EditorBuilder().source(" \t ").path("file.txt").build()

    def test_unclosed_quote(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            EditorBuilder().source("'unclosed quote").build()
        self.assertIn("No closing quotation", str(ctx.exception))

    def test_nothing_offered(self) -> None:
        with self.assertRaises(NoCommandError):
            EditorBuilder().path("file.txt").build()

    def test_errors_share_base_class(self) -> None:
        for exc in (NoCommandError(), EmptyCommandError(), ParseError("x")):
            self.assertIsInstance(exc, EditorCommandError)


class EditorBuilderPropertyTests(unittest.TestCase):
    def test_first_present_source_wins(self) -> None:
        offers = [None, None, "second --flag", "third", None, "fourth"]
        builder = EditorBuilder().sources(offers)
        self.assertEqual(builder.command, "second --flag")
        self.assertEqual(builder.build().argv, ["second", "--flag"])

    def test_empty_source_wins_over_later_source(self) -> None:
        builder = EditorBuilder().source(None).source("").source("vim")
        self.assertEqual(builder.command, "")
        with self.assertRaises(EmptyCommandError):
            builder.build()

    def test_absent_offers_never_change_selection(self) -> None:
        builder = EditorBuilder().source(None).source(None)
        self.assertIsNone(builder.command)
        builder.source("nano").source(None).source(None)
        self.assertEqual(builder.command, "nano")

    def test_environment_is_read_when_offered(self) -> None:
        with lock_env({"VISUAL": "vim", "EDITOR": "emacs"}):
            builder = EditorBuilder().environment()
            os.environ["VISUAL"] = "nano"
            os.environ.pop("EDITOR")
            invocation = builder.build()
        self.assertEqual(invocation.program, "vim")

    def test_environment_unset_then_set_later(self) -> None:
        with lock_env({"VISUAL": None, "EDITOR": None}):
            builder = EditorBuilder().environment()
            os.environ["EDITOR"] = "emacs"
            with self.assertRaises(NoCommandError):
                builder.build()

    def test_editor_used_when_visual_unset(self) -> None:
        with lock_env({"VISUAL": None, "EDITOR": "emacs -nw"}):
            invocation = EditorBuilder().environment().source("vi").build()
        self.assertEqual(invocation.argv, ["emacs", "-nw"])

    def test_paths_follow_base_args_in_order(self) -> None:
        paths = ["b.txt", Path("a.txt"), "b.txt", Path("dir with space/c.txt")]
        invocation = EditorBuilder().source("ed -a -b -c").paths(paths).build()
        self.assertEqual(
            invocation.args,
            ("-a", "-b", "-c", "b.txt", "a.txt", "b.txt", os.fspath(Path("dir with space/c.txt"))),
        )

    def test_paths_registered_before_source(self) -> None:
        invocation = EditorBuilder().path("one").path("two").source("vi").build()
        self.assertEqual(invocation.argv, ["vi", "one", "two"])
        self.assertEqual(EditorBuilder().path("one").target_paths, ("one",))

    def test_no_paths(self) -> None:
        self.assertEqual(EditorBuilder().source("code --wait").build().args, ("--wait",))

    def test_path_with_shell_characters_is_one_argument(self) -> None:
        invocation = EditorBuilder().source("vi").path("it's $HOME \"x\".txt").build()
        self.assertEqual(invocation.args, ("it's $HOME \"x\".txt",))


class SplitCommandTests(unittest.TestCase):
    def test_plain_words(self) -> None:
        self.assertEqual(split_command("  vim  -p  "), ["vim", "-p"])

    def test_quoted_program(self) -> None:
        self.assertEqual(
            split_command("'/opt/My Editor/bin/edit' --new-window"),
            ["/opt/My Editor/bin/edit", "--new-window"],
        )

    def test_dangling_double_quote(self) -> None:
        with self.assertRaises(ParseError):
            split_command('code "--wait')

    def test_blank(self) -> None:
        self.assertEqual(split_command(""), [])


if __name__ == "__main__":
    unittest.main()

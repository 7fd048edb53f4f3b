"""Functional tests for PARASEMPRE's CLI help and version output.

A new user, unfamiliar with the tool, looks for help at each level of the
command tree.
"""

from __future__ import annotations

import re
from textwrap import dedent
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

import parasempre
from parasempre.entrypoints.cli import main

if TYPE_CHECKING:
    from click.testing import Result

# pylint: disable=magic-value-comparison

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only


def _normalize(s: str) -> str:
    """Return `s` with leading/trailing space trimmed and internal whitespace collapsed."""
    return re.sub(r"\s+", " ", s.strip())


def _text(result: Result) -> str:
    return ANSI_RE.sub("", result.output)


class TestNewParasempreUser:
    """A new user of PARASEMPRE tries to get help."""

    @staticmethod
    @pytest.mark.parametrize("args", ([], ["-h"], ["--help"]))
    def test_help_output(args: list[str]):
        """The long HELP prose and the command groups are shown."""
        result = CliRunner().invoke(main.parasempre, args)
        text = _text(result)
        assert _normalize(dedent(main.HELP)) in _normalize(text), "HELP text not rendered."
        assert "Usage:" in text
        assert "Options:" in text
        for group in ("db", "guests", "users"):
            assert re.search(rf"^\s+{group}\b", text, re.MULTILINE), group

    @staticmethod
    @pytest.mark.parametrize(
        ("group", "commands"),
        [
            ("guests", ("list", "show", "add", "update", "delete", "import")),
            ("users", ("register", "check", "whoami", "roster", "seed")),
        ],
    )
    def test_group_help(group: str, commands: tuple[str, ...]):
        """Each group lists its commands."""
        result = CliRunner().invoke(main.parasempre, [group, "--help"])
        assert result.exit_code == 0, result.output
        text = _text(result)
        for command in commands:
            assert re.search(rf"^\s+{command}\b", text, re.MULTILINE), command

    @staticmethod
    def test_version_output():
        """User runs --version and sees the version string."""
        result = CliRunner().invoke(main.parasempre, ["--version"])
        assert result.exit_code == 0
        assert parasempre.__version__ in result.output

"""Unit tests for the Rich output helpers (goscaffold.utils)."""

from __future__ import annotations

import pytest

from goscaffold.utils import print_error, print_summary_table

pytestmark = pytest.mark.unit


class TestOutputHelpers:
    def test_print_error_goes_to_stderr(self, capsys):
        print_error("directory /tmp/demo already exists")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "Error: directory /tmp/demo already exists"

    def test_print_error_is_single_line(self, capsys):
        print_error("x" * 300)
        assert capsys.readouterr().err.count("\n") == 1

    def test_print_error_escapes_markup(self, capsys):
        print_error("bad name [red]")
        assert "[red]" in capsys.readouterr().err

    def test_print_summary_table(self, capsys):
        print_summary_table({"Project": "demo", "Type": "cli"}, title="Config")
        out = capsys.readouterr().out
        assert "Config" in out
        assert "Project" in out
        assert "demo" in out

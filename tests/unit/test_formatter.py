"""Tests for output formatting."""

import io
import json

from rich.console import Console

from htmlchunker.output import OutputFormatter, get_formatter


def _pretty_formatter() -> tuple[OutputFormatter, io.StringIO]:
    buffer = io.StringIO()
    formatter = OutputFormatter(force_pretty=True, _console=Console(file=buffer, width=100))
    return formatter, buffer


class TestOutputFormatter:
    """Tests for OutputFormatter."""

    def test_force_json(self, capsys):
        get_formatter(json_flag=True).output({"success": True, "depth": {"default": 2}})

        assert json.loads(capsys.readouterr().out) == {"success": True, "depth": {"default": 2}}

    def test_quiet_outputs_nothing(self, capsys):
        get_formatter(json_flag=True, quiet=True).output({"success": True})

        assert capsys.readouterr().out == ""

    def test_json_flag_wins_over_pretty(self):
        assert get_formatter(json_flag=True, pretty_flag=True).use_json is True
        assert get_formatter(pretty_flag=True).use_json is False

    def test_pretty_depth_table(self):
        formatter, buffer = _pretty_formatter()

        formatter.output(
            {
                "success": True,
                "depth": {"default": 3, "overrides": {"1": 2, "8": 5}},
                "chapters": [{"chapter": 1, "level": 2}, {"chapter": 2, "level": 3}],
            }
        )

        text = buffer.getvalue()
        assert "Default level: 3 (subsection)" in text
        assert "Chapter overrides (2)" in text
        assert "paragraph" in text
        assert "Effective levels (2 chapters)" in text

    def test_pretty_config(self):
        formatter, buffer = _pretty_formatter()

        formatter.output(
            {
                "success": True,
                "input": "book.html",
                "outdir": "html_chunks",
                "depth": {"default": 1, "overrides": {}},
                "stale": False,
            }
        )

        text = buffer.getvalue()
        assert "book.html" in text
        assert "Up to date" in text
        assert "chapter" in text

    def test_unknown_structure_falls_back_to_json(self, capsys):
        formatter, buffer = _pretty_formatter()

        formatter.output({"success": True, "other": 1})

        assert json.loads(capsys.readouterr().out) == {"success": True, "other": 1}
        assert buffer.getvalue() == ""

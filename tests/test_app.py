#!/usr/bin/env python3
"""
Test script for the command line application and its helpers.

Covers:
1. Text layout parsing
2. Console rendering
3. Settings persistence
4. main() exit codes

Usage:
    python tests/test_app.py
    pytest tests/
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from unittest import mock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from script_runner import run_tests

import main as app_main
from main import EXIT_INVALID_INPUT, EXIT_NO_SOLUTION, EXIT_SOLVED, Application, main, parse_args
from unblock.layout import load_layout, parse_layout
from unblock.render import format_move, render_text
from unblock.settings import DEFAULT_SETTINGS, load_settings, save_settings
from unblock.solver import Block, Direction, LayoutError, Move, Orientation, TileKind

ONE_MOVE_LAYOUT = """
# the blocker in column 3 slides up once
......
...A..
ZZ.A..
...B..
...B..
...B..
"""

STUCK_LAYOUT = """
......
......
ZZAA..
......
......
......
"""

TWO_MOVE_LAYOUT = """
......
....BB
ZZ..A.
....A.
...CCC
......
"""


class working_directory:
    """Run a block of code inside a fresh temporary directory."""

    def __enter__(self) -> Path:
        self._previous = os.getcwd()
        self._tmp = tempfile.TemporaryDirectory()
        os.chdir(self._tmp.name)
        return Path(self._tmp.name)

    def __exit__(self, *exc):
        os.chdir(self._previous)
        self._tmp.cleanup()


# -- layout -----------------------------------------------------------------------


def test_parse_layout():
    blocks, size = parse_layout(ONE_MOVE_LAYOUT)
    assert size == 6
    assert blocks == [
        Block.vertical(0, 1, 3),
        Block.horizontal(1, 2, 0, prisoner=True),
        Block.vertical(2, 3, 3, length=3),
    ]


def test_parse_layout_alternatives():
    blocks, size = parse_layout("**.\n.aa\n...")
    assert size == 3
    assert blocks[0].kind is TileKind.PRISONER
    assert blocks[1].orientation is Orientation.HORIZONTAL
    assert blocks[1].length == 2

    spaced, _ = parse_layout("z z . # prisoner\n. a a\n. . .")
    assert spaced == blocks


def test_parse_layout_rejects_malformed():
    bad_layouts = [
        "",                      # empty
        "ZZ.\n...",              # not square
        "ZZ.\nA..\n...",         # single-tile block
        "ZZ.\nAA.\n.A.",         # bent block
        "ZZ.\n...\nA.A",         # gap
        "ZZ!\n...\n...",         # unknown character
    ]
    for text in bad_layouts:
        with pytest.raises(LayoutError):
            parse_layout(text)


def test_load_layout():
    with working_directory() as tmp:
        path = tmp / "puzzle.txt"
        path.write_text(ONE_MOVE_LAYOUT, encoding="utf-8")
        blocks, size = load_layout(path)
        assert size == 6 and len(blocks) == 3

        with pytest.raises(LayoutError):
            load_layout(tmp / "missing.txt")


# -- rendering --------------------------------------------------------------------


def test_render_text_draws_exit_on_prisoner_row():
    blocks = [Block.horizontal(0, 2, 0, prisoner=True), Block.vertical(1, 0, 3)]
    lines = render_text(blocks, 4).splitlines()

    assert len(lines) == 4 + 2
    assert lines[0] == "+" + "-" * 12 + "+"
    assert lines[-1] == lines[0]
    assert lines[1] == "|" + "   " * 3 + "BB " + "|"
    assert lines[3] == "|ZZ ZZ " + "   " * 2 + " "
    for row in (1, 2, 4):
        assert lines[row].endswith("|")


def test_format_move():
    blocks, _ = parse_layout(ONE_MOVE_LAYOUT)
    assert format_move(Move(0, Direction.UP, 1), blocks) == "A up 1"
    assert format_move(Move(1, Direction.RIGHT, 4), blocks) == "Z right 4"
    # Unknown ids fall back to the plain move text
    assert format_move(Move(9, Direction.LEFT, 2), blocks) == str(Move(9, Direction.LEFT, 2))


# -- settings ---------------------------------------------------------------------


def test_settings_defaults_when_missing():
    with working_directory() as tmp:
        assert load_settings(tmp / "config.json") == DEFAULT_SETTINGS


def test_settings_round_trip_and_merge():
    with working_directory() as tmp:
        path = tmp / "config.json"
        save_settings({"strategy_name": "bfs", "step_through": True}, path)
        loaded = load_settings(path)
        assert loaded["step_through"] is True
        # Keys absent from the file come from the defaults
        assert loaded["board_size"] == DEFAULT_SETTINGS["board_size"]


def test_settings_invalid_json():
    with working_directory() as tmp:
        path = tmp / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS


# -- application ------------------------------------------------------------------


def test_main_solves_layout():
    with working_directory() as tmp:
        path = tmp / "puzzle.txt"
        path.write_text(ONE_MOVE_LAYOUT, encoding="utf-8")
        assert main(["--layout", str(path)]) == EXIT_SOLVED


def test_main_reports_no_solution():
    with working_directory() as tmp:
        path = tmp / "stuck.txt"
        path.write_text(STUCK_LAYOUT, encoding="utf-8")
        assert main(["--layout", str(path)]) == EXIT_NO_SOLUTION


def test_main_rejects_invalid_input():
    with working_directory() as tmp:
        no_prisoner = tmp / "no_prisoner.txt"
        no_prisoner.write_text("AA.\n...\n...", encoding="utf-8")
        assert main(["--layout", str(no_prisoner)]) == EXIT_INVALID_INPUT
        assert main(["--layout", str(tmp / "missing.txt")]) == EXIT_INVALID_INPUT
        assert main(["--rgb", str(tmp / "missing.rgb")]) == EXIT_INVALID_INPUT


def test_main_saves_settings():
    with working_directory() as tmp:
        path = tmp / "puzzle.txt"
        path.write_text(ONE_MOVE_LAYOUT, encoding="utf-8")
        assert main(["--layout", str(path), "--strategy", "bfs", "--save-settings"]) == EXIT_SOLVED

        with open(tmp / "config.json", 'r', encoding='utf-8') as f:
            saved = json.load(f)
        assert saved["strategy_name"] == "bfs"
        assert saved["step_through"] is False


def test_main_saves_settings_whatever_the_outcome():
    with working_directory() as tmp:
        stuck = tmp / "stuck.txt"
        stuck.write_text(STUCK_LAYOUT, encoding="utf-8")
        assert main(["--layout", str(stuck), "--step", "--save-settings"]) == EXIT_NO_SOLUTION
        assert load_settings(tmp / "config.json")["step_through"] is True

        (tmp / "config.json").unlink()
        missing = str(tmp / "missing.txt")
        assert main(["--layout", missing, "--save-settings"]) == EXIT_INVALID_INPUT
        assert (tmp / "config.json").exists()


def test_logging_is_configured_before_settings_load():
    calls = []

    def fake_load_settings():
        calls.append("settings")
        return dict(DEFAULT_SETTINGS)

    with working_directory() as tmp:
        path = tmp / "puzzle.txt"
        path.write_text(ONE_MOVE_LAYOUT, encoding="utf-8")
        with mock.patch.object(app_main, "configure_logging",
                               side_effect=lambda debug: calls.append("logging")), \
                mock.patch.object(app_main, "load_settings", side_effect=fake_load_settings):
            assert main(["--layout", str(path)]) == EXIT_SOLVED
    assert calls == ["logging", "settings"]


def test_step_through_stops_asking_at_end_of_input():
    with working_directory() as tmp:
        path = tmp / "puzzle.txt"
        path.write_text(TWO_MOVE_LAYOUT, encoding="utf-8")
        with mock.patch("builtins.input", side_effect=EOFError) as fake_input:
            assert main(["--layout", str(path), "--step"]) == EXIT_SOLVED
        # Asked once after the first move, then printed the rest
        assert fake_input.call_count == 1


def test_non_numeric_board_size_setting():
    with working_directory() as tmp:
        save_settings({"board_size": "big"}, tmp / "config.json")
        path = tmp / "puzzle.txt"
        path.write_text(ONE_MOVE_LAYOUT, encoding="utf-8")

        application = Application(parse_args(["--layout", str(path)]))
        assert application.board_size == 6
        assert main(["--layout", str(path)]) == EXIT_SOLVED


def test_script_runner_counts_unraised_errors_as_failures():
    def test_passes():
        pass

    def test_expected_error_missing():
        with pytest.raises(ValueError):
            pass

    assert run_tests("RUNNER", {"test_passes": test_passes}) == 0
    assert run_tests("RUNNER", {"test_passes": test_passes,
                                "test_expected_error_missing": test_expected_error_missing}) == 1


def main_tests():
    """Run all tests."""
    return run_tests("APPLICATION TESTS", globals())


if __name__ == "__main__":
    sys.exit(main_tests())

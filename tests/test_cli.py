"""CLI tests run through click's CliRunner."""

from click.testing import CliRunner

from note2tab import __version__
from note2tab.cli import main
from note2tab.session import USAGE


def _invoke(*args: str):
    return CliRunner().invoke(main, list(args))


def test_single_note() -> None:
    result = _invoke("0")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "e|------|",
        "B|------|",
        "G|------|",
        "D|---0--|",
        "A|---5--|",
        "E|--10--|",
    ]


def test_negative_positions_and_shift_are_not_options() -> None:
    result = _invoke("-l", "-s", "-12", "7", "-7")
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "E10 A5 D0 "


def test_chord_with_key() -> None:
    result = _invoke("-l", "-k", "#3", "(0 2 3)")
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "E10 A8 D6 "


def test_no_arguments_prints_usage() -> None:
    result = _invoke()
    assert result.exit_code == 1
    assert USAGE in result.output


def test_duplicate_flag_prints_usage() -> None:
    result = _invoke("-c", "g", "-c", "f", "0")
    assert result.exit_code == 1
    assert USAGE in result.output


def test_invalid_clef() -> None:
    result = _invoke("-c", "x", "0")
    assert result.exit_code == 1
    assert "note2tab: Invalid clef" in result.output
    assert "|" not in result.output


def test_invalid_note_keeps_earlier_output() -> None:
    result = _invoke("-l", "0", "q1")
    assert result.exit_code == 1
    assert result.output.startswith("E10 A5 D0 \n")
    assert "note2tab: 'q': Invalid accidental" in result.output


def test_key_position_out_of_range() -> None:
    result = _invoke("-k", "#12", "0")
    assert result.exit_code == 1
    assert "note2tab: 12 out of range" in result.output


def test_version_option() -> None:
    result = _invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_option() -> None:
    result = _invoke("-h")
    assert result.exit_code == 0
    assert "tablature" in result.output

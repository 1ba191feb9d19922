"""Unit tests for renderers used by the note2tab session."""

from note2tab.tab_models import TabResult
from note2tab.tab_renderers import DiagramRenderer, OneLineRenderer


def _sample_tab() -> TabResult:
    return TabResult((10, 5, 0, None, None, None))


def test_diagram_prints_high_string_first() -> None:
    content = DiagramRenderer().render(_sample_tab())
    assert content == (
        "e|------|\n"
        "B|------|\n"
        "G|------|\n"
        "D|---0--|\n"
        "A|---5--|\n"
        "E|--10--|\n"
    )


def test_diagram_cells_keep_their_width() -> None:
    content = DiagramRenderer().render(TabResult((23, 9, None, 0, 12, 1)))
    widths = {len(line) for line in content.splitlines()}
    assert widths == {len("E|------|")}


def test_diagram_of_unplayable_note_is_all_dashes() -> None:
    content = DiagramRenderer().render(TabResult())
    assert content.count("|------|") == 6


def test_one_line_lists_used_strings_low_to_high() -> None:
    assert OneLineRenderer().render(_sample_tab()) == "E10 A5 D0 \n"


def test_one_line_high_string_has_no_trailing_space() -> None:
    tab = TabResult((None, None, 2, 2, 3, 2))
    assert OneLineRenderer().render(tab) == "D2 G2 B3 e2\n"


def test_one_line_of_unplayable_note_is_empty_line() -> None:
    assert OneLineRenderer().render(TabResult()) == "\n"


def test_diagram_voicings_are_separated_by_blank_line() -> None:
    tabs = [_sample_tab(), TabResult((None, 5, 3, 2, None, None))]
    chunks = list(DiagramRenderer().render_voicings(tabs))
    assert len(chunks) == 3
    assert chunks[1] == "\n"
    assert "".join(chunks).count("\n\n") == 1


def test_one_line_voicings_have_no_separator() -> None:
    tabs = [_sample_tab(), TabResult((None, 5, 3, 2, None, None))]
    content = "".join(OneLineRenderer().render_voicings(tabs))
    assert content == "E10 A5 D0 \nA5 D3 G2 \n"


def test_no_voicings_render_nothing() -> None:
    assert list(DiagramRenderer().render_voicings([])) == []

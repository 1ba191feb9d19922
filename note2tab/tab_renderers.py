"""Renderer implementations for tablature output formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from note2tab.tab_models import STANDARD_TUNING, StringTuning, TabResult


class TabRenderer(ABC):
    """Abstract tablature renderer."""

    def __init__(self, tuning: tuple[StringTuning, ...] = STANDARD_TUNING) -> None:
        self.tuning = tuning

    @property
    @abstractmethod
    def voicing_separator(self) -> str:
        """Text written between successive voicings of one chord."""

    @abstractmethod
    def render(self, tab: TabResult) -> str:
        """Render one TabResult, including its trailing newline."""

    def render_voicings(self, voicings: Iterable[TabResult]) -> Iterable[str]:
        """Render chord voicings lazily, separators included."""
        for index, tab in enumerate(voicings):
            if index > 0:
                yield self.voicing_separator
            yield self.render(tab)


class DiagramRenderer(TabRenderer):
    """
    Draw a small fretboard diagram, highest string first::

        e|------|
        B|---1--|
        G|---0--|
        D|---2--|
        A|------|
        E|------|
    """

    _EMPTY_CELL: str = "------"

    @property
    def voicing_separator(self) -> str:
        return "\n"

    def _cell(self, fret: int | None) -> str:
        if fret is None:
            return self._EMPTY_CELL
        if fret >= 10:
            return f"--{fret}--"
        return f"---{fret}--"

    def render(self, tab: TabResult) -> str:
        lines = [
            f"{string.label}|{self._cell(fret)}|"
            for string, fret in zip(self.tuning, tab.frets)
        ]
        return "\n".join(reversed(lines)) + "\n"


class OneLineRenderer(TabRenderer):
    """List used strings low to high on one line, e.g. ``D0 G2 B3 ``."""

    @property
    def voicing_separator(self) -> str:
        return ""

    def render(self, tab: TabResult) -> str:
        last = len(self.tuning) - 1
        cells = [
            f"{string.label}{fret}" + ("" if index == last else " ")
            for index, (string, fret) in enumerate(zip(self.tuning, tab.frets))
            if fret is not None
        ]
        return "".join(cells) + "\n"

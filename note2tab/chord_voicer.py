"""ChordVoicer: Strategy pattern for laying chord notes out across the strings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from note2tab.errors import ChordTooLarge
from note2tab.fretboard import map_note
from note2tab.tab_models import MAX_NOTES, STANDARD_TUNING, Clef, Note, StringTuning, TabResult


# ── Abstract base ────────────────────────────────────────────────────────────

class VoicingStrategy(ABC):
    """
    Abstract Strategy for turning a chord into playable TabResults.

    Concrete subclasses implement ``voice()``; every voicing they yield
    plays each chord note on its own string.
    """

    def __init__(
        self,
        clef: Clef = Clef.G,
        tuning: tuple[StringTuning, ...] = STANDARD_TUNING,
    ) -> None:
        self.clef = clef
        self.tuning = tuning

    def _check_size(self, notes: Sequence[Note]) -> None:
        if len(notes) > MAX_NOTES:
            raise ChordTooLarge(MAX_NOTES)

    @abstractmethod
    def voice(self, notes: Sequence[Note]) -> Iterator[TabResult]:
        """
        Yield voicings for a chord.

        Args:
            notes: The chord's resolved notes, in any order.

        Raises:
            ChordTooLarge: If the chord has more notes than there are strings.
        """


# ── Concrete strategy ────────────────────────────────────────────────────────

class SlidingWindowVoicer(VoicingStrategy):
    """
    Greedy voicing search over a sliding lowest-string window.

    Algorithm
    ---------
    Notes are sorted by staff position. For each start string ``k`` (0, 1,
    ...) while enough strings remain above it:

    1. Each note, lowest first, is mapped onto the fretboard and placed on
       the first free string ``>= k`` where it can be played.
    2. If any note found no free string the search ends there; later
       windows are not tried even if they could have worked.
    3. Otherwise the assignment is yielded as one voicing.

    The search is first-fit and never backtracks, so it can miss
    fingerings an exhaustive search would find.
    """

    def voice(self, notes: Sequence[Note]) -> Iterator[TabResult]:
        self._check_size(notes)
        if not notes:
            return
        ordered = sorted(notes, key=lambda note: note.pos)
        string_count = len(self.tuning)
        mapped = [map_note(note, self.clef, self.tuning) for note in ordered]

        for start in range(string_count - len(ordered) + 1):
            strings: list[int | None] = [None] * string_count
            for tab in mapped:
                for index in range(start, string_count):
                    if strings[index] is None and tab.frets[index] is not None:
                        strings[index] = tab.frets[index]
                        break

            voicing = TabResult(tuple(strings))
            if voicing.used_strings < len(ordered):
                return
            yield voicing

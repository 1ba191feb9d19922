"""FretboardMapper: finds the fret that sounds a note on each guitar string."""

from __future__ import annotations

from note2tab.pitch_resolver import step_up
from note2tab.tab_models import (
    FRET_COUNT,
    STANDARD_TUNING,
    Clef,
    Note,
    StringTuning,
    TabResult,
)


def find_fret(note: Note, string: StringTuning, clef: Clef = Clef.G) -> int | None:
    """
    Return the lowest fret on *string* that sounds *note*, or None.

    The open string's pitch class and position are walked up one fret at a
    time. A fret matches only when both the pitch class and the staff
    position agree, which keeps enharmonic notes in other octaves apart.
    """
    name = string.open_note.name
    pos = string.open_note.pos + clef.position_offset
    for fret in range(FRET_COUNT):
        if name == note.name and pos == note.pos:
            return fret
        name, pos = step_up(name, pos)
    return None


def map_note(
    note: Note,
    clef: Clef = Clef.G,
    tuning: tuple[StringTuning, ...] = STANDARD_TUNING,
) -> TabResult:
    """Map *note* onto every string of *tuning*."""
    return TabResult(tuple(find_fret(note, string, clef) for string in tuning))

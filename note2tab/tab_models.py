"""Data models shared by the resolver, the fretboard mapper and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

MAX_ACCIDENTALS: Final[int] = 9  # entries in one key signature
MAX_NOTES: Final[int] = 6        # notes in one chord, one per string
FRET_COUNT: Final[int] = 24      # frets 0..23

# ── Scale tables ─────────────────────────────────────────────────────────────

#: Chromatic scale in German spelling: "b" is B flat, "h" is B natural.
CHROMATIC_SCALE: Final[tuple[str, ...]] = (
    "c", "#c", "d", "#d", "e", "f",
    "#f", "g", "#g", "a", "b", "h",
)

G_CLEF_SCALE: Final[tuple[str, ...]] = ("d", "e", "f", "g", "a", "h", "c")
F_CLEF_SCALE: Final[tuple[str, ...]] = ("f", "g", "a", "h", "c", "d", "e")


def is_natural(pitch_class: int) -> bool:
    """True when the chromatic entry carries no sharp or flat."""
    return CHROMATIC_SCALE[pitch_class % 12][0] not in "#b"


class Clef(Enum):
    """Staff clef: selects the diatonic scale and the fretboard octave offset."""

    G = "g"
    F = "f"

    @property
    def scale(self) -> tuple[str, ...]:
        return G_CLEF_SCALE if self is Clef.G else F_CLEF_SCALE

    @property
    def position_offset(self) -> int:
        """Shift applied to open-string positions so both clefs share octaves."""
        return 0 if self is Clef.G else 12


@dataclass(frozen=True)
class KeyAccidental:
    """One key-signature entry: a sharp (+1) or flat (-1) on a staff position."""

    sign: int
    pos: int

    def matches(self, pos: int) -> bool:
        """True when *pos* is this entry's position in any octave."""
        return (pos - self.pos) % 7 == 0


@dataclass(frozen=True)
class KeySignature:
    """Ordered key-signature accidentals; the empty signature is C major."""

    accidentals: tuple[KeyAccidental, ...] = ()

    def accidental_for(self, pos: int) -> int:
        """Sign of the first entry matching *pos*, or 0 when none does."""
        for entry in self.accidentals:
            if entry.matches(pos):
                return entry.sign
        return 0


@dataclass(frozen=True)
class Note:
    """
    A resolved note.

    Attributes:
        pos:            Diatonic staff position after accidentals and shift.
        name:           Pitch class, an index into CHROMATIC_SCALE (0=c ... 11=h).
        acc:            Accumulated accidental (negative = flats, positive = sharps).
        forced_natural: True when the token carried the ``%`` marker.
    """

    pos: int
    name: int
    acc: int = 0
    forced_natural: bool = False


@dataclass(frozen=True)
class StringTuning:
    """An open guitar string: its display label and the note it sounds."""

    label: str
    open_note: Note


#: Standard tuning, low to high. Position 0 is the open D string in the G clef.
STANDARD_TUNING: Final[tuple[StringTuning, ...]] = (
    StringTuning("E", Note(pos=-6, name=4)),
    StringTuning("A", Note(pos=-3, name=9)),
    StringTuning("D", Note(pos=0, name=2)),
    StringTuning("G", Note(pos=3, name=7)),
    StringTuning("B", Note(pos=5, name=11)),
    StringTuning("e", Note(pos=8, name=4)),
)


@dataclass(frozen=True)
class TabResult:
    """
    One fret (or None for an unused string) per string, low to high.

    A TabResult describes a single note or one voicing of a chord.
    """

    frets: tuple[int | None, ...] = field(default=(None,) * len(STANDARD_TUNING))

    @property
    def used_strings(self) -> int:
        return sum(1 for fret in self.frets if fret is not None)

"""Session: interprets note2tab arguments left to right against a TabConfig."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from note2tab.chord_voicer import SlidingWindowVoicer
from note2tab.errors import ChordTooLarge, InvalidClef, UsageError
from note2tab.fretboard import map_note
from note2tab.pitch_resolver import parse_key, resolve
from note2tab.tab_models import MAX_NOTES, Clef, KeySignature, Note
from note2tab.tab_renderers import DiagramRenderer, OneLineRenderer, TabRenderer

PROG_NAME = "note2tab"
USAGE = f"Usage: {PROG_NAME} [-l][-k key][-s shift][-c clef] [(][#|b|%]pos ...[)]"

_ONCE_ONLY_FLAGS = ("-s", "-c", "-k")


@dataclass(frozen=True)
class TabConfig:
    """
    Settings that apply to every note read after they were set.

    Attributes:
        clef:    Clef used to number staff positions.
        key:     Active key signature.
        shift:   Transposition in half-steps.
        oneline: Use the one-line renderer instead of fretboard diagrams.
    """

    clef: Clef = Clef.G
    key: KeySignature = field(default_factory=KeySignature)
    shift: int = 0
    oneline: bool = False

    @property
    def renderer(self) -> TabRenderer:
        return OneLineRenderer() if self.oneline else DiagramRenderer()


def parse_clef(value: str) -> Clef:
    """Pick the clef from the first character of *value* (``g`` or ``f``)."""
    for clef in Clef:
        if value[:1] == clef.value:
            return clef
    raise InvalidClef()


def parse_shift(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"'{value}': invalid shift") from None


def split_chord(token: str) -> list[str]:
    """Split ``"(0 2 #4)"`` into its note tokens."""
    return token.removeprefix("(").replace(")", " ").split()


class Session:
    """
    Apply flags and render notes in command-line order.

    Flags only affect the tokens after them, so ``-s 2 0 -l 4`` renders
    note 0 as a diagram and note 4 on one line, both shifted up a tone.
    """

    def __init__(self, config: TabConfig | None = None) -> None:
        self.config = config if config is not None else TabConfig()
        self.notes_rendered = 0
        self._seen_flags: set[str] = set()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _resolve(self, token: str) -> Note:
        return resolve(token, self.config.key, self.config.shift, self.config.clef)

    def _claim_flag(self, flag: str) -> None:
        if flag in self._seen_flags:
            raise UsageError(f"{flag} given more than once")
        self._seen_flags.add(flag)

    def _apply_flag(self, flag: str, value: str) -> None:
        self._claim_flag(flag)
        if flag == "-s":
            self.config = dataclasses.replace(self.config, shift=parse_shift(value))
        elif flag == "-c":
            self.config = dataclasses.replace(self.config, clef=parse_clef(value))
        else:
            self.config = dataclasses.replace(self.config, key=parse_key(value))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_note(self, token: str) -> str:
        """Resolve a single note token and render its tab."""
        note = self._resolve(token)
        self.notes_rendered += 1
        return self.config.renderer.render(map_note(note, self.config.clef))

    def render_chord(self, token: str) -> Iterator[str]:
        """Resolve a parenthesised chord and render each voicing found."""
        notes: list[Note] = []
        for note_token in split_chord(token):
            if len(notes) >= MAX_NOTES:
                raise ChordTooLarge(MAX_NOTES)
            notes.append(self._resolve(note_token))
        self.notes_rendered += len(notes)

        voicer = SlidingWindowVoicer(clef=self.config.clef)
        yield from self.config.renderer.render_voicings(voicer.voice(notes))

    def run(self, args: Sequence[str]) -> Iterator[str]:
        """
        Interpret *args* in order, yielding rendered text as soon as it exists.

        Raises:
            UsageError: On duplicate or incomplete flags, or when no note
                        was rendered at all.
            Note2TabError: On any malformed note, clef or key.
        """
        tokens = iter(args)
        for token in tokens:
            if token == "-l":
                self.config = dataclasses.replace(self.config, oneline=True)
            elif token in _ONCE_ONLY_FLAGS:
                value = next(tokens, None)
                if value is None:
                    raise UsageError(f"{token} requires a value")
                self._apply_flag(token, value)
            elif token.startswith("("):
                yield from self.render_chord(token)
            else:
                yield self.render_note(token)

        if self.notes_rendered == 0:
            raise UsageError("no notes given")

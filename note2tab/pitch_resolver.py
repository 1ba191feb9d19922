"""PitchResolver: turns note tokens into pitch classes and staff positions."""

from __future__ import annotations

import re

from note2tab.errors import (
    InvalidAccidental,
    InvalidKeyToken,
    KeyPositionOutOfRange,
    TooManyAccidentals,
)
from note2tab.tab_models import (
    CHROMATIC_SCALE,
    MAX_ACCIDENTALS,
    Clef,
    KeyAccidental,
    KeySignature,
    Note,
    is_natural,
)

_ACCIDENTAL_MARKERS: dict[str, int] = {"#": 1, "b": -1}
_FORCE_NATURAL = "%"

_NOTE_TOKEN = re.compile(r"(?P<marker>[#b%]?)(?P<pos>[-+]?\d+)")
_KEY_POSITION = re.compile(r"[-+]?\d+")


def step_up(name: int, pos: int) -> tuple[int, int]:
    """Move one half-step up; the position follows only onto a natural."""
    name = (name + 1) % 12
    if is_natural(name):
        pos += 1
    return name, pos


def flatten(name: int, pos: int) -> tuple[int, int]:
    """Lower by one half-step; a flat always moves the position down."""
    return (name - 1) % 12, pos - 1


def transpose(name: int, pos: int, shift: int) -> tuple[int, int]:
    """
    Move *shift* half-steps (negative = down) from (name, pos).

    The position follows the direction of the shift whenever a step lands
    on a natural.
    """
    direction = 1 if shift > 0 else -1
    for _ in range(abs(shift)):
        name = (name + direction) % 12
        if is_natural(name):
            pos += direction
    return name, pos


def parse_token(token: str) -> tuple[int, bool, int]:
    """
    Split a note token into (accidental, forced_natural, position).

    Raises:
        InvalidAccidental: If the token is not ``[#|b|%]<integer>``.
    """
    match = _NOTE_TOKEN.fullmatch(token)
    if match is None:
        raise InvalidAccidental(token)
    marker = match.group("marker")
    return _ACCIDENTAL_MARKERS.get(marker, 0), marker == _FORCE_NATURAL, int(match.group("pos"))


def resolve(
    token: str,
    key: KeySignature | None = None,
    shift: int = 0,
    clef: Clef = Clef.G,
) -> Note:
    """
    Resolve a note token to its pitch class and staff position.

    The diatonic letter at ``pos mod 7`` in the clef's scale gives the
    starting pitch class. Unless the token is forced natural, the first
    matching key-signature entry adds its sign to the token's own
    accidental. Each flat lowers the position by one; each sharp, and each
    half-step of *shift*, moves it only when landing on a natural.

    Args:
        token: Note token such as ``"3"``, ``"#-2"``, ``"b5"`` or ``"%4"``.
        key:   Active key signature (``None`` for no accidentals).
        shift: Transposition in half-steps, positive = up.
        clef:  Clef whose diatonic scale numbers the positions.

    Returns:
        The resolved Note.
    """
    acc, forced_natural, pos = parse_token(token)

    letter = clef.scale[pos % 7]
    name = CHROMATIC_SCALE.index(letter)

    if not forced_natural and key is not None:
        acc += key.accidental_for(pos)

    new_pos = pos
    for _ in range(-acc):
        name, new_pos = flatten(name, new_pos)
    for _ in range(acc):
        name, new_pos = step_up(name, new_pos)
    name, new_pos = transpose(name, new_pos, shift)
    return Note(pos=new_pos, name=name, acc=acc, forced_natural=forced_natural)


def parse_key(spec: str) -> KeySignature:
    """
    Build a KeySignature from a spec such as ``"#3 #0"`` or ``"b6 b2 b5"``.

    Raises:
        TooManyAccidentals:    More than MAX_ACCIDENTALS entries.
        InvalidKeyToken:       An entry does not start with ``b`` or ``#``.
        KeyPositionOutOfRange: An entry's position is not an integer in 0-11.
    """
    accidentals: list[KeyAccidental] = []
    for token in spec.split():
        if len(accidentals) >= MAX_ACCIDENTALS:
            raise TooManyAccidentals()
        sign = _ACCIDENTAL_MARKERS.get(token[0])
        if sign is None:
            raise InvalidKeyToken(token)
        position = token[1:]
        if not _KEY_POSITION.fullmatch(position) or not 0 <= int(position) <= 11:
            raise KeyPositionOutOfRange(position)
        accidentals.append(KeyAccidental(sign=sign, pos=int(position)))
    return KeySignature(tuple(accidentals))

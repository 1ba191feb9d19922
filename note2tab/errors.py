"""Exceptions raised while interpreting note2tab input."""


class Note2TabError(ValueError):
    """Base class for every input error reported by the CLI."""


class UsageError(Note2TabError):
    """Missing, duplicated or malformed command-line arguments."""


class InvalidAccidental(Note2TabError):
    """A note token does not start with an accidental marker or a number."""

    def __init__(self, token: str) -> None:
        first = token[:1] or " "
        super().__init__(f"'{first}': Invalid accidental")


class InvalidClef(Note2TabError):
    def __init__(self) -> None:
        super().__init__("Invalid clef")


class InvalidKeyToken(Note2TabError):
    """A key-signature entry does not start with ``b`` or ``#``."""

    def __init__(self, token: str) -> None:
        first = token[:1] or " "
        super().__init__(f"'{first}': invalid accidental")


class KeyPositionOutOfRange(Note2TabError):
    def __init__(self, position: str) -> None:
        super().__init__(f"{position or repr(position)} out of range")


class TooManyAccidentals(Note2TabError):
    def __init__(self) -> None:
        super().__init__("Too many accidentals")


class ChordTooLarge(Note2TabError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"A chord must not exceed {limit} notes")

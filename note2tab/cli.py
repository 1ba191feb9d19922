"""note2tab CLI entry point."""

import sys

import click

from note2tab import __version__
from note2tab.errors import Note2TabError, UsageError
from note2tab.session import PROG_NAME, USAGE, Session


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def main(tokens: tuple[str, ...]) -> None:
    """
    Convert staff positions into guitar tablature.

    Arguments are read left to right; a flag affects only what follows it.

    \b
      -l           one line per tab instead of a fretboard diagram
      -s SHIFT     transpose by SHIFT half-steps (once)
      -c g|f       treble (default) or bass clef (once)
      -k KEY       key signature, e.g. "#3 #0" or "b6 b2" (once)
      [#|b|%]POS   a note: staff position 0 is the D below the treble staff
      "(POS ...)"  a chord, voiced across the strings

    \b
    Examples:
      note2tab 0 2 4
      note2tab -k "#3" -l 3 "(0 2 4)"
      note2tab -c f "(9 11 13)"
    """
    session = Session()
    try:
        for chunk in session.run(tokens):
            click.echo(chunk, nl=False)
    except UsageError:
        click.echo(USAGE, err=True)
        sys.exit(1)
    except Note2TabError as exc:
        click.echo(f"{PROG_NAME}: {exc}", err=True)
        sys.exit(1)

"""note2tab: convert staff note positions into guitar tablature."""

__version__ = "0.1.0"

"""Allow ``python -m note2tab``."""

from note2tab.cli import main

if __name__ == "__main__":
    main()

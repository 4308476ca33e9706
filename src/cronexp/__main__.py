"""Allow running the command-line interface with ``python -m cronexp``."""

from cronexp.cli import main

if __name__ == "__main__":
    main()

"""Main entry point for ``python -m berth``."""

from berth.cli.main import main


if __name__ == "__main__":
    main()

"""Entrypoint to run periodic note commands against a local vault."""
import sys

from periodic_notes.cli import main as cli_main


def main() -> None:
    sys.exit(cli_main())


if __name__ == "__main__":
    main()

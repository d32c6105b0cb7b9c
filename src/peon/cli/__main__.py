"""Allow ``python -m peon.cli``."""

from peon.cli import cli

if __name__ == "__main__":
    cli()

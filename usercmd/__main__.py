"""Entry point for `python -m usercmd`."""

from .cli import cli


if __name__ == "__main__":
    cli()

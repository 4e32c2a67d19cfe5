"""CLI entrypoint."""

from .commands.analyze import analyze

cli = analyze


if __name__ == "__main__":
    cli()

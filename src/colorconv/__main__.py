"""Main entry point for colorconv."""

from colorconv.cli import cli

if __name__ == "__main__":
    cli()

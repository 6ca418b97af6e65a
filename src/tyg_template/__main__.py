"""Entry point for ``python -m tyg_template``; same as the console script."""

from tyg_template.cli.app import cli

if __name__ == "__main__":
    cli()

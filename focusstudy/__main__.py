"""CLI entry point for focusstudy package.

Allows running via: python -m focusstudy
"""

from __future__ import annotations

from focusstudy.cli.main import cli

if __name__ == "__main__":
    cli()

"""
Semver Core - Main entry point

Allows `python -m semvercore`, delegating to cli.py.
"""

from .cli import cli

if __name__ == "__main__":
    cli()

"""Command modules for the Autoanki field CLI."""

from autoanki.cli.commands import field

__all__ = ["field"]

"""Command-line interface."""

from termgrid.cli.app import create_app
from termgrid.cli.main import main

__all__ = ["create_app", "main"]

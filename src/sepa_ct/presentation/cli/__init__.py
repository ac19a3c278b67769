"""Command-line interface."""

from sepa_ct.presentation.cli.app import app, cli

__all__ = ["app", "cli"]

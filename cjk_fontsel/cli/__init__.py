"""Command-line interface for cjk-fontsel."""

from cjk_fontsel.cli.main import cli

__all__ = ["cli"]

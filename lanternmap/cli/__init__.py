"""CLI commands for the Lantern map editor."""

from lanternmap.cli.commands import editor_mode

__all__ = ['editor_mode']

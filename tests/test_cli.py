"""Tests for the command-line launcher."""
import argparse

import pytest

import lanternmap.cli.main as cli_main
from lanternmap.cli.commands import apply_overrides
from lanternmap.constants import DEFAULT_SHEET_NAME
from lanternmap.utils.settings import Settings


def make_args(**kwargs):
    """Build launcher arguments with nothing overridden."""
    values = {'sheet': None, 'assets_dir': None, 'tile_size': None, 'settings': None}
    values.update(kwargs)
    return argparse.Namespace(**values)


def test_no_overrides_keeps_settings():
    """Test settings are untouched without flags."""
    settings = apply_overrides(Settings(None), make_args())
    assert settings.get('sheet.name') == DEFAULT_SHEET_NAME
    assert settings.get_tile_size() == (32, 32)


def test_overrides_sheet_and_tile_size(tmp_path):
    """Test flags replace the configured sheet and tile size."""
    args = make_args(sheet='dungeon', assets_dir=str(tmp_path), tile_size=[16, 24])
    settings = apply_overrides(Settings(None), args)
    assert settings.get('sheet.name') == 'dungeon'
    assert settings.get('sheet.assets_dir') == str(tmp_path)
    assert settings.get_tile_size() == (16, 24)


def test_entry_point_parses_flags(monkeypatch):
    """Test the installed entry point hands parsed flags to the editor."""
    launched = []
    monkeypatch.setattr(cli_main, 'check_dependencies', lambda: True)
    monkeypatch.setattr(cli_main, 'editor_mode', launched.append)
    monkeypatch.setattr('sys.argv', ['lantern-map-editor', '--sheet', 'dungeon',
                                     '--tile-size', '16', '24'])
    cli_main.main()

    assert len(launched) == 1
    assert launched[0].sheet == 'dungeon'
    assert launched[0].tile_size == [16, 24]


def test_entry_point_rejects_bad_tile_size(monkeypatch):
    """Test non-positive tile sizes stop the launcher."""
    monkeypatch.setattr(cli_main, 'editor_mode', lambda args: None)
    monkeypatch.setattr('sys.argv', ['lantern-map-editor', '--tile-size', '0', '32'])
    with pytest.raises(SystemExit):
        cli_main.main()

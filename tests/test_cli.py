"""Tests for the command-line utilities."""

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner
from yaml import safe_load

from stepkit.__main__ import cli

if TYPE_CHECKING:
    from pathlib import Path


def test_print_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: 'Path') -> None:
    """Settings resolved from the environment are printed as YAML."""
    monkeypatch.setenv('STEPKIT_TIMEOUT', '2.5')
    monkeypatch.setenv('STEPKIT_FIXTURES_PATH', str(tmp_path))

    result = CliRunner().invoke(cli, ['settings'])

    assert result.exit_code == 0
    assert safe_load(result.output) == {
        'timeout': 2.5,
        'poll_interval': 0.01,
        'fixtures_path': str(tmp_path),
    }


def test_list_fixtures(fixtures_root: 'Path') -> None:
    """Fixture paths are listed relative to the root."""
    (fixtures_root / 'XML').mkdir()
    (fixtures_root / 'XML' / 'tab_data.xml').write_text('<tabs/>')

    result = CliRunner().invoke(cli, ['fixtures', '--root', str(fixtures_root)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ['JSON/humans.json', 'XML/tab_data.xml']


def test_list_fixtures_without_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing fixture root is a usage error."""
    monkeypatch.delenv('STEPKIT_FIXTURES_PATH', raising=False)

    result = CliRunner().invoke(cli, ['fixtures'])

    assert result.exit_code == 2
    assert 'No fixture root' in result.output

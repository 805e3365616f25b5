"""Pytest plugin exposing step settings and a step runner.

The plugin registers command-line options overriding the step settings
and provides fixtures:
- `step_settings`: settings resolved from the environment and options;
- `step_runner`: a sequential runner failing the test on the first
  step that does not succeed.
"""

from typing import TYPE_CHECKING

import pytest

from stepkit.settings import StepSettings

from .runner import StepRunner

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.config.argparsing import Parser

__all__ = (
    'StepRunner',
    'pytest_addoption',
    'resolve_settings',
    'step_runner',
    'step_settings',
)


def pytest_addoption(parser: 'Parser') -> None:
    """Register pytest command-line options for stepkit.

    Args:
        parser: Pytest argument parser.
    """
    group = parser.getgroup('stepkit')
    group.addoption(
        '--step-timeout',
        action='store',
        dest='step_timeout',
        type=float,
        default=None,
        help=(
            'Number of seconds a step may wait for its completion. '
            'Overrides the STEPKIT_TIMEOUT environment variable.'
        ),
    )
    group.addoption(
        '--step-fixtures',
        action='store',
        dest='step_fixtures',
        default=None,
        help=(
            'Root directory of response fixtures. '
            'Overrides the STEPKIT_FIXTURES_PATH environment variable.'
        ),
    )


def resolve_settings(config: 'Config') -> StepSettings:
    """Resolve step settings from the environment and pytest options.

    Args:
        config: Pytest configuration object.

    Returns:
        Settings with command-line overrides applied.
    """
    overrides = {}

    if (timeout := config.getoption('step_timeout', default=None)) is not None:
        overrides['timeout'] = timeout

    if (fixtures := config.getoption('step_fixtures', default=None)) is not None:
        overrides['fixtures_path'] = fixtures

    return StepSettings(**overrides)


@pytest.fixture
def step_settings(pytestconfig: 'Config') -> StepSettings:
    """Provide step settings for the current session."""
    return resolve_settings(pytestconfig)


@pytest.fixture
def step_runner() -> StepRunner:
    """Provide a sequential step runner."""
    return StepRunner()

"""Command-line utilities for stepkit settings and fixtures."""

from pathlib import Path

from click import Path as PathParam
from click import UsageError, echo, group, option
from yaml import dump

from stepkit.fixtures import FixtureResolver
from stepkit.settings import StepSettings

FixturesDirectory = PathParam(
    exists=True,
    file_okay=False,
    readable=True,
    path_type=Path,
)


@group(help='Command-line utilities for stepkit.')
def cli() -> None:
    """Root CLI group for stepkit tools."""
    return None


@cli.command(
    name='settings',
    help='Print step settings resolved from the environment as YAML.',
)
def print_settings() -> None:
    """Resolve and print the settings."""
    settings = StepSettings()
    echo(dump(settings.model_dump(mode='json'), sort_keys=False), nl=False)


@cli.command(
    name='fixtures',
    help='List the response fixtures available to cached response steps.',
)
@option(
    '-r', '--root',
    type=FixturesDirectory,
    default=None,
    help='Fixture root directory. Defaults to STEPKIT_FIXTURES_PATH.',
)
def list_fixtures(root: Path | None) -> None:
    """List fixture paths relative to the fixture root.

    Args:
        root: Fixture root directory.
    """
    root = root or StepSettings().fixtures_path
    if root is None:
        raise UsageError('No fixture root: pass --root or set STEPKIT_FIXTURES_PATH')

    for path in FixtureResolver(root).available():
        echo(path)


if __name__ == '__main__':
    cli()

"""Runtime settings for step construction and execution.

Settings are resolved from `STEPKIT_*` environment variables and may be
overridden explicitly, for example by pytest command-line options.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from stepkit.models import SettingsModel

DEFAULT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.01


class StepSettings(SettingsModel):
    """Defaults applied by `StepFactory` to every produced step."""

    model_config = SettingsConfigDict(
        env_prefix='STEPKIT_',
        frozen=True,
        extra='ignore',
    )

    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        title='Step timeout',
        description=(
            'Number of seconds a step may wait for its asynchronous '
            'completion or success condition before it is reported '
            'as timed out.'
        ),
    )

    poll_interval: float = Field(
        default=DEFAULT_POLL_INTERVAL,
        gt=0,
        title='Polling interval',
        description='Number of seconds between two completion checks.',
    )

    fixtures_path: Path | None = Field(
        default=None,
        title='Fixtures directory',
        description=(
            'Root directory of response fixtures. '
            'Relative fixture paths are resolved against it.'
        ),
    )

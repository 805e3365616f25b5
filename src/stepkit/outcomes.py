"""Terminal outcomes of step execution.

An outcome is a tagged value produced once per step run. Runners read
the `status` to decide whether to advance and report the `reason`
together with the step description when they stop.
"""

from typing import Literal, Self

from pydantic import Field, model_validator

from stepkit.models import SchemaModel

#: Terminal states of a step.
type Status = Literal['succeeded', 'failed', 'timedOut']


class StepOutcome(SchemaModel):
    """Terminal result of a single step execution.

    Outcomes are immutable: once a step reports an outcome it never
    reverts to another one.
    """

    status: Status = Field(
        title='Outcome status',
        description='Terminal state reached by the step.',
    )

    reason: str | None = Field(
        default=None,
        title='Failure reason',
        description=(
            'Human-readable reason of a failure or timeout. '
            'Always present for failed steps.'
        ),
    )

    @model_validator(mode='after')
    def check_failure_reason(self) -> Self:
        """Check that failed outcomes carry a reason.

        Returns:
            Self.

        Raises:
            ValueError: If a failed outcome has no reason.
        """
        if self.status != 'failed' or self.reason:
            return self

        raise ValueError('failed outcome requires a reason')

    @classmethod
    def success(cls) -> Self:
        """Build a `succeeded` outcome."""
        return cls(status='succeeded')

    @classmethod
    def failure(cls, reason: str) -> Self:
        """Build a `failed` outcome with the given reason."""
        return cls(status='failed', reason=reason)

    @classmethod
    def timeout(cls, reason: str | None = None) -> Self:
        """Build a `timedOut` outcome."""
        return cls(status='timedOut', reason=reason)

    @property
    def ok(self) -> bool:
        """Whether the step succeeded."""
        return self.status == 'succeeded'

    def __str__(self) -> str:
        """String represenatation."""
        if self.reason:
            return f'{self.status}: {self.reason}'

        return self.status

"""Deferred-execution contract shared by all steps.

A step is an immutable value holding a description and a deferred
action. Building a step never performs its side effect: the action runs
only when a runner calls `Step.run`, exactly once, and the step then
reports a terminal `StepOutcome`.

Every failure is contained inside the step. Exceptions raised by the
action become `failed` outcomes and a missed deadline becomes a
`timedOut` outcome, so runners treat all step categories uniformly.
"""

from collections.abc import Callable, Iterable
from time import monotonic, sleep
from typing import Any
from warnings import warn

from pydantic import Field, PrivateAttr

from stepkit.completion import Completion
from stepkit.errors import StepError, StepTimeout, StepWarning
from stepkit.models import SchemaModel
from stepkit.outcomes import StepOutcome
from stepkit.settings import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT

#: The action performs the step side effect. It either finishes
#: synchronously and returns `None`, or returns a `Completion`
#: reported later by an asynchronous callback.
type StepAction = Callable[[], Completion | None]

#: Success predicate polled after the action until it holds.
type StepCondition = Callable[[], bool]

#: Event-loop hook invoked while a step is waiting.
type StepPump = Callable[[], None]


class Step(SchemaModel):
    """Immutable, named, one-shot unit of deferred work.

    Steps are produced by `StepFactory` methods and consumed by a
    sequential runner, which relies only on `describe` and `run`.
    """

    description: str = Field(
        title='Step description',
        description=(
            'Human-readable label of the step.\n'
            'Used verbatim in failure reports.'
        ),
    )

    action: StepAction = Field(
        title='Step action',
        description=(
            'Callable performing the step side effect.\n'
            'Invoked at most once, when the step is run.'
        ),
    )

    condition: StepCondition | None = Field(
        default=None,
        title='Success condition',
        description=(
            'Optional predicate polled after the action.\n'
            'The step succeeds once it returns a true value.'
        ),
    )

    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        title='Step timeout',
        description='Seconds allowed to reach a terminal outcome.',
    )

    poll_interval: float = Field(
        default=DEFAULT_POLL_INTERVAL,
        gt=0,
        title='Polling interval',
        description='Seconds between two completion checks.',
    )

    pump: StepPump | None = Field(
        default=None,
        title='Event-loop hook',
        description='Optional callable invoked on every completion check.',
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        title='Step details',
        description=(
            'Inputs the step was built from.\n'
            'Used only for diagnostics in failure reports.'
        ),
    )

    _outcome: StepOutcome | None = PrivateAttr(default=None)

    def describe(self) -> str:
        """Return the step description."""
        return self.description

    @property
    def outcome(self) -> StepOutcome | None:
        """Terminal outcome of the step, or `None` if it has not run."""
        return self._outcome

    def run(self) -> StepOutcome:
        """Execute the step.

        The action is performed on the first call only. Running a step
        twice is a runner error: the repeated call emits a `StepWarning`
        and returns the stored outcome without repeating the action.

        Returns:
            The terminal outcome of the step.
        """
        if self._outcome is not None:
            warn(
                f'Step {self.description!r} has already been run',
                category=StepWarning,
                stacklevel=2,
            )
            return self._outcome

        self._outcome = self._execute()

        return self._outcome

    def _execute(self) -> StepOutcome:
        """Perform the action and translate any failure into an outcome."""
        deadline = monotonic() + self.timeout

        try:
            pending = self.action()
            if pending is not None:
                self._wait_for(pending, deadline)
            if self.condition is not None:
                self._wait_until(self.condition, deadline)

        except StepTimeout as error:
            return StepOutcome.timeout(error.message)

        except StepError as error:
            return StepOutcome.failure(error.message)

        except Exception as error:  # noqa: BLE001
            return StepOutcome.failure(f'{error!r}')

        return StepOutcome.success()

    def _wait_for(self, completion: Completion, deadline: float) -> None:
        """Block until the completion is reported.

        Raises:
            StepTimeout: If the deadline elapses first.
            Exception: The rejection error of the completion.
        """
        reported = completion.wait(
            max(deadline - monotonic(), 0),
            poll_interval=self.poll_interval,
            pump=self.pump,
        )
        if not reported:
            raise StepTimeout(f'No completion within {self.timeout:g}s')

        if completion.error is not None:
            raise completion.error

    def _wait_until(self, condition: StepCondition, deadline: float) -> None:
        """Poll the success condition until it holds.

        Raises:
            StepTimeout: If the deadline elapses first.
        """
        while not condition():
            remaining = deadline - monotonic()
            if remaining <= 0:
                raise StepTimeout(f'Condition not met within {self.timeout:g}s')
            if self.pump is not None:
                self.pump()
            sleep(min(self.poll_interval, remaining))

    @staticmethod
    def sequence(*items: 'Step | Iterable[Step]') -> tuple['Step', ...]:
        """Flatten steps and step collections into one ordered sequence.

        Args:
            items: Steps or iterables of steps, in execution order.

        Returns:
            A tuple of steps preserving the given order.
        """
        steps: list[Step] = []
        for item in items:
            if isinstance(item, Step):
                steps.append(item)
            else:
                steps.extend(item)

        return tuple(steps)

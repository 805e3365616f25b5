"""Sequential step runner.

The runner executes steps strictly one at a time, in order, and stops
at the first step that does not succeed. Failures are raised as
`AssertionError` so pytest reports them as test failures, with the step
description, the reason and the step inputs.
"""

from typing import TYPE_CHECKING

from stepkit.errors import StepError
from stepkit.step import Step

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stepkit.outcomes import StepOutcome


class StepRunner:
    """Runner executing sequences of steps."""

    __test__ = False

    def run(self, *steps: 'Step | Iterable[Step]') -> list['StepOutcome']:
        """Run steps in order.

        Args:
            steps: Steps or collections of steps, in execution order.

        Returns:
            The outcomes of all steps, all successful.

        Raises:
            AssertionError: If a step fails or times out.
        """
        outcomes = []

        for step_num, step in enumerate(Step.sequence(*steps)):
            outcome = step.run()
            outcomes.append(outcome)

            if not outcome.ok:
                raise self.fail(step, outcome, step_num=step_num)

        return outcomes

    __call__ = run

    @staticmethod
    def fail(step: Step, outcome: 'StepOutcome', *,
             step_num: int | None = None) -> AssertionError:
        """Create an AssertionError describing a step outcome.

        Args:
            step: The step that did not succeed.
            outcome: Its terminal outcome.
            step_num: Position of the step in the sequence.

        Returns:
            AssertionError with a formatted message.
        """
        message = 'Step timed out' if outcome.status == 'timedOut' else 'Step failed'
        if outcome.reason:
            message += f': {outcome.reason}'

        error = StepError.from_step(step, message, step_num=step_num)

        return AssertionError(f'{error}')

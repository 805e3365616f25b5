"""Tests for the deferred-execution step contract."""

from threading import Timer
from typing import TYPE_CHECKING

import pytest

from stepkit.completion import Completion
from stepkit.errors import StepWarning, UnresolvedReference
from stepkit.outcomes import StepOutcome
from stepkit.step import Step

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


def test_construction_is_pure(mocker: 'MockerFixture') -> None:
    """Building a step does not invoke its action."""
    action = mocker.Mock(return_value=None)

    step = Step(description='Do something', action=action)

    action.assert_not_called()
    assert step.outcome is None
    assert step.describe() == 'Do something'


def test_synchronous_success(mocker: 'MockerFixture') -> None:
    """A synchronous action without errors succeeds."""
    action = mocker.Mock(return_value=None)
    step = Step(description='Do something', action=action)

    outcome = step.run()

    action.assert_called_once_with()
    assert outcome == StepOutcome.success()
    assert outcome.ok
    assert step.outcome is outcome


def test_exception_becomes_failure() -> None:
    """Exceptions never cross the step boundary."""
    def action() -> None:
        raise KeyError('missing')

    outcome = Step(description='Broken', action=action).run()

    assert outcome.status == 'failed'
    assert outcome.reason == "KeyError('missing')"


def test_step_error_reason_is_message() -> None:
    """Library errors are reported by their plain message."""
    def action() -> None:
        raise UnresolvedReference('No factory named Ghost')

    outcome = Step(description='Broken', action=action).run()

    assert outcome == StepOutcome.failure('No factory named Ghost')


def test_rerun_returns_stored_outcome(mocker: 'MockerFixture') -> None:
    """Running a step twice warns and does not repeat the action."""
    action = mocker.Mock(return_value=None)
    step = Step(description='Once', action=action)

    first = step.run()
    with pytest.warns(StepWarning, match=r"^Step 'Once' has already been run$"):
        second = step.run()

    assert second is first
    action.assert_called_once_with()


def test_pending_completion_times_out() -> None:
    """An action that never completes reports `timedOut`, not `failed`."""
    step = Step(
        description='Wait forever',
        action=Completion,
        timeout=0.05,
        poll_interval=0.005,
    )

    outcome = step.run()

    assert outcome.status == 'timedOut'
    assert outcome.reason == 'No completion within 0.05s'


def test_completion_resolved_from_another_thread() -> None:
    """A completion reported by a background callback completes the step."""
    def action() -> Completion:
        completion = Completion()
        Timer(0.02, completion.resolve).start()
        return completion

    outcome = Step(description='Async', action=action, timeout=2).run()

    assert outcome.ok


def test_rejected_completion_fails() -> None:
    """A rejected completion turns into a failure with its reason."""
    def action() -> Completion:
        completion = Completion()
        completion.reject('transition interrupted')
        completion.resolve()
        return completion

    outcome = Step(description='Async', action=action).run()

    assert outcome == StepOutcome.failure("RuntimeError('transition interrupted')")


def test_completion_reports_once() -> None:
    """The first terminal report wins and marks the completion done."""
    completion = Completion()
    assert not completion.done

    completion.resolve()
    completion.reject('too late')

    assert completion.done
    assert completion.error is None
    assert completion.wait(0)


def test_pump_drives_completion() -> None:
    """The event-loop hook runs while the step waits."""
    completion = Completion()
    ticks = []

    def pump() -> None:
        ticks.append(True)
        if len(ticks) == 3:
            completion.resolve()

    step = Step(
        description='Pumped',
        action=lambda: completion,
        pump=pump,
        timeout=2,
        poll_interval=0.001,
    )

    assert step.run().ok
    assert len(ticks) == 3


@pytest.mark.parametrize('states, status', (
    pytest.param([False, False, True], 'succeeded', id='eventually true'),
    pytest.param([False] * 1000, 'timedOut', id='never true'),
))
def test_condition_polling(states: list[bool], status: str) -> None:
    """A success condition is polled until it holds or time runs out."""
    values = iter(states)

    step = Step(
        description='Conditional',
        action=lambda: None,
        condition=lambda: next(values, False),
        timeout=0.05,
        poll_interval=0.001,
    )

    assert step.run().status == status


def test_sequence_flattens_in_order() -> None:
    """Steps and collections of steps flatten preserving order."""
    first, second, third, fourth = (
        Step(description=f'{num}', action=lambda: None)
        for num in range(4)
    )

    assert Step.sequence(first, [second, third], (fourth,)) == (first, second, third, fourth)


def test_step_is_immutable() -> None:
    """Step fields can not be reassigned after construction."""
    step = Step(description='Frozen', action=lambda: None)

    with pytest.raises(ValueError, match=r'frozen'):
        step.description = 'Thawed'  # type: ignore[misc]

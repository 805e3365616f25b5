"""Shared step construction helpers for factory mixins."""

from enum import Enum
from typing import TYPE_CHECKING, Any

from stepkit.errors import CapabilityError
from stepkit.step import Step

if TYPE_CHECKING:
    from stepkit.settings import StepSettings
    from stepkit.step import StepAction, StepCondition, StepPump


def label(value: Any) -> str:  # noqa: ANN401
    """Render a factory input for descriptions without validating it.

    Classes are rendered by their qualified name and enum members by
    their member name; anything else falls back to `str`.
    """
    if isinstance(value, type):
        return value.__qualname__

    if isinstance(value, Enum):
        return value.name or f'{value!s}'

    return f'{value!s}'


class BaseStepsMixin:
    """Mixin defining how factory methods assemble steps.

    Implementers provide the settings and the optional event-loop hook
    applied to every produced step.
    """

    settings: 'StepSettings'
    pump: 'StepPump | None'

    def make_step(self, description: str, action: 'StepAction', *,
                  condition: 'StepCondition | None' = None,
                  **details: Any) -> Step:  # noqa: ANN401
        """Assemble a step from an action.

        Args:
            description: Human-readable step label.
            action: Deferred action of the step.
            condition: Optional success condition.
            **details: Factory inputs kept for diagnostics.

        Returns:
            A step that has not been run.
        """
        return Step(
            description=description,
            action=action,
            condition=condition,
            timeout=self.settings.timeout,
            poll_interval=self.settings.poll_interval,
            pump=self.pump,
            details=details,
        )

    @staticmethod
    def require[T](collaborator: T | None, name: str) -> T:
        """Return a collaborator or fail fast when it is missing.

        Raises:
            CapabilityError: If the collaborator is not configured.
        """
        if collaborator is None:
            raise CapabilityError(f'Factory has no {name} configured')

        return collaborator

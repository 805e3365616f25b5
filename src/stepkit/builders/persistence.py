"""Steps mutating the shared persistence context.

These factory methods are available only when the factory was given a
persistence context; calling them otherwise fails at construction.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from stepkit.errors import PersistenceFailure, StepError

from .base import BaseStepsMixin

if TYPE_CHECKING:
    from collections.abc import Callable

    from stepkit.collaborators import PersistenceContext
    from stepkit.step import Step


@dataclass
class SaveRequest:
    """Save options a perform-and-save block may change.

    A fresh request is created for every run and read once, after the
    block returns.
    """

    persistent: bool = False


def _save(context: 'PersistenceContext', *, persistent: bool) -> None:
    """Save the context, reporting any failure as `PersistenceFailure`."""
    try:
        context.save(persistent=persistent)

    except StepError:
        raise

    except Exception as base:
        raise PersistenceFailure(f'Failed to save context: {base!r}') from base


class PersistenceStepsMixin(BaseStepsMixin):
    """Factory methods for the persistence context."""

    context: 'PersistenceContext | None'

    @property
    def has_persistence(self) -> bool:
        """Whether persistence steps can be built."""
        return self.context is not None

    def insert_object(self, entity_name: str, persisted: bool = False,
                      configure: 'Callable[[Any], None] | None' = None) -> 'Step':
        """Build a step inserting a record and saving the context.

        Args:
            entity_name: Entity of the new record.
            persisted: Whether the save cascades to the backing store.
            configure: Optional callback receiving the new record.
        """
        context = self.require(self.context, 'persistence context')

        def action() -> None:
            record = context.insert(entity_name)
            if configure is not None:
                configure(record)
            _save(context, persistent=persisted)

        return self.make_step(
            f'Insert {entity_name!r} object into the persistence context',
            action,
            entity=entity_name,
            persisted=persisted,
        )

    def delete_all_objects(self, entity_name: str | None = None) -> 'Step':
        """Build a step deleting all records of an entity and saving.

        Args:
            entity_name: Entity to clear, or `None` to clear every entity.
        """
        context = self.require(self.context, 'persistence context')

        def action() -> None:
            context.delete_all(entity_name)
            _save(context, persistent=True)

        subject = 'all objects' if entity_name is None else f'all {entity_name!r} objects'

        return self.make_step(
            f'Delete {subject} from the persistence context',
            action,
            entity=entity_name,
        )

    def perform_and_save(self, block: 'Callable[[Any, SaveRequest], None] | None' = None) -> 'Step':
        """Build a step running a block against the context, then saving.

        The block receives the context and a `SaveRequest`; setting
        `request.persistent` makes the save cascade to the backing store.

        Args:
            block: Optional callback; without it the step only saves.
        """
        context = self.require(self.context, 'persistence context')

        def action() -> None:
            request = SaveRequest()
            if block is not None:
                block(context, request)
            _save(context, persistent=request.persistent)

        return self.make_step(
            'Perform block and save the persistence context',
            action,
            block=block is not None,
        )

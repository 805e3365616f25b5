"""In-memory persistence context.

The context stages records of registered entities. Saving commits the
staged changes either in memory only, or durably to a backing store
that survives a context reset.
"""

from collections import defaultdict
from copy import copy
from typing import Any

from stepkit.errors import UnresolvedReference


class ManagedObject:
    """A record of a registered entity.

    Attributes of the entity are plain instance attributes initialized
    from the entity defaults.
    """

    def __init__(self, entity_name: str, defaults: dict[str, Any]) -> None:
        """Initialize a record with the entity defaults."""
        self.entity_name = entity_name
        for key, value in defaults.items():
            setattr(self, key, copy(value))

    def __repr__(self) -> str:
        return f'<ManagedObject {self.entity_name} at {id(self):#x}>'


class ManagedObjectContext:
    """Main-thread context staging records of registered entities."""

    def __init__(self) -> None:
        """Initialize an empty context with no entities."""
        self._entities: dict[str, dict[str, Any]] = {}
        self._objects: list[ManagedObject] = []
        self._committed: list[ManagedObject] = []
        self._persistent: dict[str, list[ManagedObject]] = defaultdict(list)

    @property
    def entity_names(self) -> tuple[str, ...]:
        """Registered entity names, in registration order."""
        return tuple(self._entities)

    @property
    def has_changes(self) -> bool:
        """Whether the context holds unsaved changes."""
        return self._objects != self._committed

    def register_entity(self, name: str, **defaults: Any) -> None:  # noqa: ANN401
        """Register an entity and the default values of its attributes."""
        self._entities[name] = defaults

    def insert(self, entity_name: str) -> ManagedObject:
        """Insert a new record of an entity.

        Raises:
            UnresolvedReference: If the entity is not registered.
        """
        defaults = self._entity(entity_name)
        record = ManagedObject(entity_name, defaults)
        self._objects.append(record)

        return record

    def delete(self, record: ManagedObject) -> None:
        """Delete a single record; unknown records are ignored."""
        if record in self._objects:
            self._objects.remove(record)

    def delete_all(self, entity_name: str | None = None) -> int:
        """Delete every record of an entity, or of all entities.

        Returns:
            Number of deleted records.

        Raises:
            UnresolvedReference: If the entity is not registered.
        """
        if entity_name is not None:
            self._entity(entity_name)

        kept = [
            record
            for record in self._objects
            if entity_name is not None and record.entity_name != entity_name
        ]
        deleted = len(self._objects) - len(kept)
        self._objects = kept

        return deleted

    def objects(self, entity_name: str | None = None) -> list[ManagedObject]:
        """Records currently in the context."""
        return [
            record
            for record in self._objects
            if entity_name is None or record.entity_name == entity_name
        ]

    def count(self, entity_name: str | None = None) -> int:
        """Number of records currently in the context."""
        return len(self.objects(entity_name))

    def persisted(self, entity_name: str) -> list[ManagedObject]:
        """Records saved to the backing store for an entity."""
        return list(self._persistent.get(entity_name, ()))

    def save(self, *, persistent: bool = False) -> None:
        """Commit staged changes.

        Args:
            persistent: Whether the save cascades to the backing store.
        """
        self._committed = list(self._objects)

        if persistent:
            self._persistent.clear()
            for record in self._committed:
                self._persistent[record.entity_name].append(record)

    def reset(self) -> None:
        """Discard the context contents and reload the backing store."""
        self._objects = [
            record
            for records in self._persistent.values()
            for record in records
        ]
        self._committed = list(self._objects)

    def _entity(self, entity_name: str) -> dict[str, Any]:
        if entity_name not in self._entities:
            raise UnresolvedReference(f'No entity named {entity_name!r}')

        return self._entities[entity_name]

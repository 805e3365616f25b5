"""Steps creating domain objects from named factories."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stepkit.factories import apply_properties

from .base import BaseStepsMixin

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from stepkit.collaborators import ObjectFactory
    from stepkit.step import Step


class ObjectStepsMixin(BaseStepsMixin):
    """Factory methods building objects from a factory registry."""

    factories: 'ObjectFactory | None'

    def create_object(self, name: str,
                      properties: 'Mapping[str, Any] | None' = None,
                      configure: 'Callable[[Any], None] | None' = None) -> 'Step':
        """Build a step creating an object from a named factory.

        The step builds the object, assigns the property values onto it
        and yields it to `configure`, in that order.

        Args:
            name: Name of the registered factory.
            properties: Values assigned onto existing properties.
            configure: Optional callback receiving the new object.
        """
        factories = self.require(self.factories, 'object factory registry')
        values = dict(properties) if isinstance(properties, Mapping) else properties

        def action() -> None:
            instance = factories.build(name)
            apply_properties(instance, dict(values or {}))
            if configure is not None:
                configure(instance)

        return self.make_step(
            f'Create object from factory {name!r}',
            action,
            factory=name,
            properties=values,
        )

    def create_objects(self, names: 'Iterable[str]') -> list['Step']:
        """Build one object creation step per factory name.

        Args:
            names: Factory names, in execution order.

        Returns:
            Steps in the same order as the names.
        """
        return [self.create_object(name) for name in names]

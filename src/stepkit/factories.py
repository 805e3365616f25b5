"""Named object factories.

Tests register a builder per name once and then create fresh domain
objects by name, optionally overriding properties of the result.
"""

from typing import TYPE_CHECKING, Any

from stepkit.errors import PropertyMismatch, UnresolvedReference

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

type Builder = Callable[[], Any]


class FactoryRegistry:
    """Registry of named object builders."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._builders: dict[str, Builder] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    @property
    def names(self) -> tuple[str, ...]:
        """Registered factory names, in registration order."""
        return tuple(self._builders)

    def define(self, name: str, builder: Builder) -> None:
        """Register or replace the builder for a name."""
        self._builders[name] = builder

    def factory(self, name: str) -> 'Callable[[Builder], Builder]':
        """Decorator registering a builder under a name."""
        def register(builder: Builder) -> Builder:
            self.define(name, builder)
            return builder

        return register

    def build(self, name: str) -> Any:  # noqa: ANN401
        """Create a new object from the named factory.

        Raises:
            UnresolvedReference: If no factory is registered for the name.
        """
        if name not in self._builders:
            raise UnresolvedReference(f'No factory named {name!r}')

        return self._builders[name]()

    def build_with(self, name: str,
                   properties: 'Mapping[str, Any] | None' = None) -> Any:  # noqa: ANN401
        """Create an object and assign property values onto it.

        Raises:
            UnresolvedReference: If no factory is registered for the name.
            PropertyMismatch: If a key is not a property of the object.
        """
        instance = self.build(name)
        apply_properties(instance, properties or {})

        return instance

    def clear(self) -> None:
        """Remove all registered builders."""
        self._builders.clear()


def apply_properties(instance: object, properties: 'Mapping[str, Any]') -> None:
    """Assign values onto existing properties of an object.

    Args:
        instance: Target object.
        properties: Mapping of property names to values.

    Raises:
        PropertyMismatch: If a key is not an existing property.
    """
    for key, value in properties.items():
        if not hasattr(instance, key):
            raise PropertyMismatch(
                f'{type(instance).__name__} has no property {key!r}',
            )
        setattr(instance, key, value)

"""Route registrations of the object-mapping client.

A route maps a name, an object class, or a relationship of an object
class, to a URL path pattern for a given request method. Routes are
immutable values; stubbing a path pattern replaces the registration
with a copy that differs only in its path pattern.
"""

from typing import Literal, Self

from pydantic import Field

from stepkit.models import SchemaModel

from .methods import RequestMethod

type RouteKind = Literal['named', 'class', 'relationship']


class Route(SchemaModel):
    """A single route registration."""

    name: str | None = Field(
        default=None,
        title='Route name',
        description='Name of a named route, or relationship name.',
    )

    object_class: type | None = Field(
        default=None,
        title='Object class',
        description='Class owning a class or relationship route.',
    )

    method: RequestMethod = Field(
        default=RequestMethod.GET,
        title='Request method',
        description='Method bitmask the route applies to.',
    )

    path_pattern: str = Field(
        title='Path pattern',
        description='URL path pattern, for example `/users/:userID`.',
    )

    escapes_path: bool = Field(
        default=False,
        title='Escape path',
        description='Whether interpolated values are percent-escaped.',
    )

    @classmethod
    def named(cls, name: str, path_pattern: str,
              method: RequestMethod = RequestMethod.GET) -> Self:
        """Build a named route."""
        return cls(name=name, path_pattern=path_pattern, method=method)

    @classmethod
    def for_class(cls, object_class: type, path_pattern: str,
                  method: RequestMethod = RequestMethod.GET) -> Self:
        """Build a class route."""
        return cls(object_class=object_class, path_pattern=path_pattern, method=method)

    @classmethod
    def for_relationship(cls, relationship: str, object_class: type,
                         path_pattern: str,
                         method: RequestMethod = RequestMethod.GET) -> Self:
        """Build a relationship route."""
        return cls(
            name=relationship,
            object_class=object_class,
            path_pattern=path_pattern,
            method=method,
        )

    @property
    def kind(self) -> RouteKind:
        """Kind of the registration."""
        if self.object_class is None:
            return 'named'
        if self.name is None:
            return 'class'
        return 'relationship'


class RouteSet:
    """Ordered collection of route registrations.

    Lookups are exact: a class route registered for `GET | POST` is not
    returned for a `GET` lookup.
    """

    def __init__(self, routes: list[Route] | None = None) -> None:
        """Initialize the route set.

        Args:
            routes: Optional initial registrations.
        """
        self._routes: list[Route] = []
        for route in routes or ():
            self.add_route(route)

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def add_route(self, route: Route) -> None:
        """Register a route.

        Raises:
            ValueError: If an equivalent route is already registered.
        """
        method = None if route.kind == 'named' else route.method
        if self._find(route.kind, route.name, route.object_class, method):
            raise ValueError(f'Route {route!r} is already registered')

        self._routes.append(route)

    def route_for_name(self, name: str) -> Route | None:
        """Find a named route."""
        return self._find('named', name, None, None)

    def route_for_class(self, object_class: type,
                        method: RequestMethod) -> Route | None:
        """Find a class route for the exact method."""
        return self._find('class', None, object_class, method)

    def route_for_relationship(self, relationship: str, object_class: type,
                               method: RequestMethod) -> Route | None:
        """Find a relationship route for the exact method."""
        return self._find('relationship', relationship, object_class, method)

    def replace_path_pattern(self, route: Route, path_pattern: str) -> Route:
        """Replace the path pattern of a registered route.

        Args:
            route: A registered route.
            path_pattern: The new path pattern.

        Returns:
            The updated registration.

        Raises:
            KeyError: If the route is not registered.
        """
        try:
            index = self._routes.index(route)

        except ValueError as base:
            raise KeyError(route) from base

        updated = route.model_copy(update={'path_pattern': path_pattern})
        self._routes[index] = updated

        return updated

    def _find(self, kind: RouteKind, name: str | None,
              object_class: type | None,
              method: RequestMethod | None) -> Route | None:
        for route in self._routes:
            if route.kind != kind or route.name != name:
                continue
            if route.object_class is not object_class:
                continue
            if method is not None and route.method != method:
                continue
            return route

        return None

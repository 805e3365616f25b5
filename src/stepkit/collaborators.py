"""Interfaces of the collaborators consumed by step factories.

Steps never depend on concrete framework classes. Any object matching
these protocols can be handed to `StepFactory`; the in-memory classes of
`stepkit.mapping`, `stepkit.fixtures`, `stepkit.factories` and
`stepkit.persistence` are reference implementations.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stepkit.completion import Completion
    from stepkit.mapping import ReachabilityStatus, RequestMethod, Route


@runtime_checkable
class OperationQueue(Protocol):
    """Suspendable request dispatch queue."""

    suspended: bool


@runtime_checkable
class HTTPClient(Protocol):
    """HTTP client exposing a cached reachability status."""

    reachability_status: 'ReachabilityStatus'

    def post_reachability_change(self) -> None:
        """Notify observers about the current reachability status."""
        ...  # pragma: no cover


@runtime_checkable
class RouteSet(Protocol):
    """Route table with lookups and path pattern replacement."""

    def route_for_name(self, name: str) -> 'Route | None':
        ...  # pragma: no cover

    def route_for_class(self, object_class: type,
                        method: 'RequestMethod') -> 'Route | None':
        ...  # pragma: no cover

    def route_for_relationship(self, relationship: str, object_class: type,
                               method: 'RequestMethod') -> 'Route | None':
        ...  # pragma: no cover

    def replace_path_pattern(self, route: 'Route', path_pattern: str) -> 'Route':
        ...  # pragma: no cover


@runtime_checkable
class ResponseCache(Protocol):
    """Response cache keyed by absolute URL and a single method."""

    def store(self, url: str, method: 'RequestMethod', body: bytes) -> Any:  # noqa: ANN401
        ...  # pragma: no cover


@runtime_checkable
class ObjectManager(Protocol):
    """Shared client aggregating the network collaborators."""

    base_url: str
    http_client: HTTPClient
    operation_queue: OperationQueue
    route_set: RouteSet
    response_cache: ResponseCache


@runtime_checkable
class FixtureSource(Protocol):
    """Resolver of fixture contents by relative path."""

    def read_bytes(self, path: str) -> bytes:
        ...  # pragma: no cover


@runtime_checkable
class ObjectFactory(Protocol):
    """Registry of named object builders."""

    def build(self, name: str) -> Any:  # noqa: ANN401
        ...  # pragma: no cover


@runtime_checkable
class PersistenceContext(Protocol):
    """Main-thread persistence context."""

    def insert(self, entity_name: str) -> Any:  # noqa: ANN401
        ...  # pragma: no cover

    def delete_all(self, entity_name: str | None = None) -> int:
        ...  # pragma: no cover

    def save(self, *, persistent: bool = False) -> None:
        ...  # pragma: no cover


@runtime_checkable
class NavigationContainerFactory(Protocol):
    """Constructor of a navigation container around a root screen."""

    def __call__(self, navigation_bar_class: type | None,
                 toolbar_class: type | None,
                 root: Any) -> Any:  # noqa: ANN401
        ...  # pragma: no cover


@runtime_checkable
class Presenter(Protocol):
    """Presenter of navigation containers in the main window.

    Returning a `Completion` makes the presentation step wait for the
    end of the transition.
    """

    def present(self, container: Any) -> 'Completion | None':  # noqa: ANN401
        ...  # pragma: no cover

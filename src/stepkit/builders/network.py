"""Steps stubbing shared network state of the object manager."""

from typing import TYPE_CHECKING

from stepkit.errors import UnresolvedReference
from stepkit.mapping import ReachabilityStatus

from .base import BaseStepsMixin, label

if TYPE_CHECKING:
    from stepkit.collaborators import ObjectManager, RouteSet
    from stepkit.mapping import RequestMethod, Route
    from stepkit.step import Step


def _stub_path_pattern(route_set: 'RouteSet', route: 'Route | None',
                       path_pattern: str, reference: str) -> None:
    """Replace the path pattern of a looked-up route.

    Raises:
        UnresolvedReference: If the lookup found no route.
    """
    if route is None:
        raise UnresolvedReference(f'No route registered for {reference}')

    route_set.replace_path_pattern(route, path_pattern)


class NetworkStepsMixin(BaseStepsMixin):
    """Factory methods for operation queue, reachability and routes."""

    manager: 'ObjectManager | None'

    def suspend_operation_queue(self, suspended: bool = True) -> 'Step':
        """Build a step setting the `suspended` flag of the operation queue.

        Args:
            suspended: Whether the queue should hold operations.
        """
        manager = self.require(self.manager, 'object manager')

        def action() -> None:
            manager.operation_queue.suspended = suspended

        return self.make_step(
            f'Set operation queue suspended to {suspended}',
            action,
            suspended=suspended,
        )

    def stub_reachability_status(self, status: 'ReachabilityStatus') -> 'Step':
        """Build a step stubbing the reachability status of the HTTP client.

        The cached status is written first and a single change
        notification is posted afterwards, so observers reacting to the
        transition read the stubbed value.

        Args:
            status: Reachability status to report.
        """
        manager = self.require(self.manager, 'object manager')

        def action() -> None:
            client = manager.http_client
            client.reachability_status = ReachabilityStatus(status)
            client.post_reachability_change()

        return self.make_step(
            f'Stub network reachability status to {label(status)}',
            action,
            status=label(status),
        )

    def stub_route_named(self, name: str, path_pattern: str) -> 'Step':
        """Build a step stubbing the path pattern of a named route."""
        manager = self.require(self.manager, 'object manager')

        def action() -> None:
            route_set = manager.route_set
            _stub_path_pattern(
                route_set,
                route_set.route_for_name(name),
                path_pattern,
                f'name {name!r}',
            )

        return self.make_step(
            f'Stub route named {name!r} to path pattern {path_pattern!r}',
            action,
            route=name,
            pathPattern=path_pattern,
        )

    def stub_route_for_class(self, object_class: type, method: 'RequestMethod',
                             path_pattern: str) -> 'Step':
        """Build a step stubbing the path pattern of a class route.

        Args:
            object_class: Class owning the route.
            method: Exact method bitmask of the route.
            path_pattern: New path pattern.
        """
        manager = self.require(self.manager, 'object manager')

        def action() -> None:
            route_set = manager.route_set
            _stub_path_pattern(
                route_set,
                route_set.route_for_class(object_class, method),
                path_pattern,
                f'{label(object_class)} {method!s}',
            )

        return self.make_step(
            f'Stub {method!s} route of {label(object_class)} '
            f'to path pattern {path_pattern!r}',
            action,
            objectClass=object_class,
            method=f'{method!s}',
            pathPattern=path_pattern,
        )

    def stub_route_for_relationship(self, relationship: str, object_class: type,
                                    method: 'RequestMethod',
                                    path_pattern: str) -> 'Step':
        """Build a step stubbing the path pattern of a relationship route.

        Args:
            relationship: Name of the relationship.
            object_class: Class owning the relationship.
            method: Exact method bitmask of the route.
            path_pattern: New path pattern.
        """
        manager = self.require(self.manager, 'object manager')

        def action() -> None:
            route_set = manager.route_set
            _stub_path_pattern(
                route_set,
                route_set.route_for_relationship(relationship, object_class, method),
                path_pattern,
                f'relationship {relationship!r} of {label(object_class)} {method!s}',
            )

        return self.make_step(
            f'Stub {method!s} route of relationship {relationship!r} of '
            f'{label(object_class)} to path pattern {path_pattern!r}',
            action,
            relationship=relationship,
            objectClass=object_class,
            method=f'{method!s}',
            pathPattern=path_pattern,
        )

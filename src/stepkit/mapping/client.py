"""Shared client state of the object-mapping framework.

This module provides in-memory counterparts of the process-wide objects
that steps stub during acceptance tests: the operation queue that
dispatches requests, and the HTTP client with its cached network
reachability status.
"""

from collections import deque
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

#: Name of the notification posted on reachability transitions.
REACHABILITY_DID_CHANGE = 'stepkit.reachability.didChange'

type ReachabilityObserver = Callable[[str, 'ReachabilityStatus'], None]


class ReachabilityStatus(IntEnum):
    """Network availability as last observed by the HTTP client."""

    UNKNOWN = -1
    NOT_REACHABLE = 0
    REACHABLE_VIA_WWAN = 1
    REACHABLE_VIA_WIFI = 2

    @property
    def reachable(self) -> bool:
        """Whether the network is considered available."""
        return self > ReachabilityStatus.NOT_REACHABLE


class OperationQueue:
    """Dispatch queue for request operations.

    Operations run immediately unless the queue is suspended; while
    suspended, they are kept in submission order and run when the
    queue is resumed.
    """

    def __init__(self) -> None:
        """Initialize a running, empty queue."""
        self._suspended = False
        self._pending: deque[Callable[[], object]] = deque()

    @property
    def suspended(self) -> bool:
        """Whether the queue holds operations instead of running them."""
        return self._suspended

    @suspended.setter
    def suspended(self, value: bool) -> None:
        self._suspended = bool(value)
        while not self._suspended and self._pending:
            self._pending.popleft()()

    @property
    def operation_count(self) -> int:
        """Number of operations waiting for the queue to resume."""
        return len(self._pending)

    def add_operation(self, operation: 'Callable[[], object]') -> None:
        """Submit an operation."""
        if self._suspended:
            self._pending.append(operation)
        else:
            operation()


class HTTPClient:
    """HTTP client holding the cached network reachability status.

    Observers are notified synchronously, in subscription order, each
    time a reachability change is posted.
    """

    def __init__(self, base_url: str,
                 reachability_status: ReachabilityStatus = ReachabilityStatus.UNKNOWN) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL relative paths are resolved against.
            reachability_status: Initial reachability status.
        """
        self.base_url = base_url
        self.reachability_status = reachability_status
        self._observers: list[ReachabilityObserver] = []

    def add_reachability_observer(self, observer: ReachabilityObserver) -> ReachabilityObserver:
        """Subscribe to reachability change notifications.

        Returns:
            The observer, so the method can be used as a decorator.
        """
        self._observers.append(observer)

        return observer

    def remove_reachability_observer(self, observer: ReachabilityObserver) -> None:
        """Unsubscribe an observer; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def post_reachability_change(self) -> None:
        """Notify observers about the current reachability status."""
        status = self.reachability_status
        for observer in tuple(self._observers):
            observer(REACHABILITY_DID_CHANGE, status)

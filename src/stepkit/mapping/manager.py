"""Object manager aggregating the shared client collaborators."""

from .cache import ResponseCache, absolute_url
from .client import HTTPClient, OperationQueue
from .routing import RouteSet


class ObjectManager:
    """Shared object manager.

    Holds the base URL, the HTTP client, the operation queue, the route
    set and the response cache used by the application under test.
    """

    def __init__(self, base_url: str, *,
                 http_client: HTTPClient | None = None,
                 operation_queue: OperationQueue | None = None,
                 route_set: RouteSet | None = None,
                 response_cache: ResponseCache | None = None) -> None:
        """Initialize the manager, creating missing collaborators."""
        self.base_url = base_url
        self.http_client = http_client or HTTPClient(base_url)
        self.operation_queue = operation_queue or OperationQueue()
        self.route_set = route_set or RouteSet()
        self.response_cache = response_cache or ResponseCache()

    def url_for_path(self, path: str) -> str:
        """Resolve a path relative to the manager base URL."""
        return absolute_url(self.base_url, path)

"""Response cache keyed by absolute URL and request method.

Requests issued by the system under test consult the cache before
reaching the network, which lets tests serve canned responses.
"""

from urllib.parse import urljoin

from pydantic import Field

from stepkit.models import SchemaModel

from .methods import RequestMethod


def absolute_url(base_url: str, path: str) -> str:
    """Resolve a path relative to a base URL.

    Resolution follows RFC 3986: a path starting with `/` replaces the
    base path, any other path is appended to the last base segment.
    """
    return urljoin(base_url, path)


class CachedResponse(SchemaModel):
    """A stored response."""

    url: str = Field(title='Absolute URL')
    method: RequestMethod = Field(title='Request method')
    status_code: int = Field(default=200, title='Status code')
    headers: dict[str, str] = Field(default_factory=dict, title='Response headers')
    body: bytes = Field(default=b'', title='Response body')


class ResponseCache:
    """In-memory response cache."""

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._responses: dict[tuple[str, RequestMethod], CachedResponse] = {}

    def __len__(self) -> int:
        return len(self._responses)

    def store(self, url: str, method: RequestMethod, body: bytes, *,
              status_code: int = 200,
              headers: dict[str, str] | None = None) -> CachedResponse:
        """Store a response for exactly one request method.

        Args:
            url: Absolute URL of the request.
            method: A single request method.
            body: Response body.
            status_code: Response status code.
            headers: Optional response headers.

        Returns:
            The stored response.

        Raises:
            ValueError: If `method` combines several methods.
        """
        if not method.is_single:
            raise ValueError(f'Can not cache a response for {method}')

        response = CachedResponse(
            url=url,
            method=method,
            status_code=status_code,
            headers=headers or {},
            body=body,
        )
        self._responses[url, method] = response

        return response

    def cached_response(self, url: str, method: RequestMethod) -> CachedResponse | None:
        """Return the response stored for a request, if any."""
        return self._responses.get((url, method))

    def remove_all(self) -> None:
        """Drop every stored response."""
        self._responses.clear()

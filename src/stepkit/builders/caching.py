"""Steps populating the response cache of the object manager."""

from typing import TYPE_CHECKING

from stepkit.errors import AmbiguousMethod
from stepkit.mapping import RequestMethod, absolute_url

from .base import BaseStepsMixin

if TYPE_CHECKING:
    from stepkit.collaborators import FixtureSource, ObjectManager
    from stepkit.step import Step


def _cache_response(manager: 'ObjectManager', path: str,
                    method: RequestMethod | str, body: bytes) -> None:
    """Store a response for the URL of a path relative to the base URL.

    Raises:
        AmbiguousMethod: If `method` does not denote a single method.
    """
    if isinstance(method, str):
        method = RequestMethod.from_string(method)

    if not method.is_single:
        raise AmbiguousMethod(f'Cached responses need a single method, got {method!s}')

    manager.response_cache.store(absolute_url(manager.base_url, path), method, body)


class CachingStepsMixin(BaseStepsMixin):
    """Factory methods caching canned responses."""

    manager: 'ObjectManager | None'
    fixtures: 'FixtureSource | None'

    def cache_response(self, path: str, method: RequestMethod | str,
                       body: bytes) -> 'Step':
        """Build a step caching a literal response body.

        Args:
            path: Path relative to the base URL of the object manager.
            method: A single request method, for example `GET`.
            body: Response body to serve.
        """
        manager = self.require(self.manager, 'object manager')

        def action() -> None:
            _cache_response(manager, path, method, body)

        return self.make_step(
            f'Cache response for {method!s} {path}',
            action,
            path=path,
            method=f'{method!s}',
            size=len(body) if isinstance(body, bytes) else None,
        )

    def cache_response_from_fixture(self, path: str, method: RequestMethod | str,
                                    fixture_path: str) -> 'Step':
        """Build a step caching a response body read from a fixture.

        Args:
            path: Path relative to the base URL of the object manager.
            method: A single request method, for example `GET`.
            fixture_path: Fixture path relative to the fixture root.
        """
        manager = self.require(self.manager, 'object manager')
        fixtures = self.require(self.fixtures, 'fixture resolver')

        def action() -> None:
            _cache_response(manager, path, method, fixtures.read_bytes(fixture_path))

        return self.make_step(
            f'Cache response for {method!s} {path} from fixture {fixture_path!r}',
            action,
            path=path,
            method=f'{method!s}',
            fixture=fixture_path,
        )

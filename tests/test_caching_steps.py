"""Tests for response caching steps."""

from typing import TYPE_CHECKING

import pytest

from stepkit.errors import CapabilityError
from stepkit.factory import StepFactory
from stepkit.mapping import ObjectManager, RequestMethod, absolute_url
from stepkit.settings import StepSettings

from .conftest import BASE_URL

if TYPE_CHECKING:
    from pathlib import Path


def test_cache_literal_body(factory: StepFactory, manager: ObjectManager) -> None:
    """The body is served for the resolved URL and exact method."""
    step = factory.cache_response('/things/1', RequestMethod.GET, b'{"id": 1}')
    assert len(manager.response_cache) == 0

    assert step.run().ok

    response = manager.response_cache.cached_response(
        'http://api.example.com/things/1',
        RequestMethod.GET,
    )
    assert response is not None
    assert response.body == b'{"id": 1}'
    assert response.status_code == 200

    assert manager.response_cache.cached_response(
        'http://api.example.com/things/1',
        RequestMethod.POST,
    ) is None


def test_cache_method_by_name(factory: StepFactory, manager: ObjectManager) -> None:
    """Request methods may be given by name."""
    assert factory.cache_response('things', 'put', b'ok').run().ok

    response = manager.response_cache.cached_response(
        f'{BASE_URL}things',
        RequestMethod.PUT,
    )
    assert response is not None
    assert response.body == b'ok'


@pytest.mark.parametrize('method', (
    pytest.param(RequestMethod.ANY, id='any'),
    pytest.param(RequestMethod.GET | RequestMethod.HEAD, id='combined'),
))
def test_cache_ambiguous_method(factory: StepFactory, manager: ObjectManager,
                                method: RequestMethod) -> None:
    """Only one exact method can key a cached response."""
    outcome = factory.cache_response('/things/1', method, b'').run()

    assert outcome.status == 'failed'
    assert outcome.reason.startswith('Cached responses need a single method')
    assert len(manager.response_cache) == 0


def test_cache_fixture_body(factory: StepFactory, manager: ObjectManager) -> None:
    """Fixture contents are read when the step runs."""
    step = factory.cache_response_from_fixture('humans', RequestMethod.GET, 'JSON/humans.json')

    assert step.run().ok

    response = manager.response_cache.cached_response(f'{BASE_URL}humans', RequestMethod.GET)
    assert response is not None
    assert response.body == b'{"humans": []}'


@pytest.mark.parametrize('fixture_path', (
    pytest.param('JSON/missing.json', id='missing'),
    pytest.param('JSON', id='directory'),
    pytest.param('../outside.json', id='outside'),
))
def test_cache_unavailable_fixture(factory: StepFactory, manager: ObjectManager,
                                   fixtures_root: 'Path', fixture_path: str) -> None:
    """Unresolvable fixtures fail the step."""
    (fixtures_root.parent / 'outside.json').write_bytes(b'{}')

    outcome = factory.cache_response_from_fixture('humans', RequestMethod.GET, fixture_path).run()

    assert outcome.status == 'failed'
    assert f'Fixture {fixture_path!r}' in outcome.reason
    assert len(manager.response_cache) == 0


def test_fixture_step_requires_resolver(manager: ObjectManager) -> None:
    """Fixture caching steps need a fixture resolver."""
    factory = StepFactory(manager, settings=StepSettings(fixtures_path=None))

    with pytest.raises(CapabilityError, match=r'fixture resolver'):
        factory.cache_response_from_fixture('humans', RequestMethod.GET, 'JSON/humans.json')


@pytest.mark.parametrize('base, path, expected', (
    pytest.param('http://host/api/', 'things/1', 'http://host/api/things/1', id='relative'),
    pytest.param('http://host/api/', '/things/1', 'http://host/things/1', id='absolute path'),
    pytest.param('http://host/api', 'things', 'http://host/things', id='no trailing slash'),
))
def test_absolute_url(base: str, path: str, expected: str) -> None:
    """Paths resolve against the base URL following RFC 3986."""
    assert absolute_url(base, path) == expected


def test_cache_cleared_between_scenarios(factory: StepFactory, manager: ObjectManager) -> None:
    """Clearing the cache drops responses stored by earlier steps."""
    assert factory.cache_response('humans', RequestMethod.GET, b'[]').run().ok

    url = manager.url_for_path('humans')
    assert url == f'{BASE_URL}humans'
    assert manager.response_cache.cached_response(url, RequestMethod.GET) is not None

    manager.response_cache.remove_all()

    assert len(manager.response_cache) == 0
    assert manager.response_cache.cached_response(url, RequestMethod.GET) is None

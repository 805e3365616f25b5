"""Tests for conformance of the reference collaborators."""

import pytest

from stepkit import collaborators
from stepkit.factories import FactoryRegistry
from stepkit.fixtures import FixtureResolver
from stepkit.mapping import HTTPClient, ObjectManager, OperationQueue, ResponseCache, RouteSet
from stepkit.persistence import ManagedObjectContext

from .conftest import BASE_URL


@pytest.mark.parametrize('instance, protocol', (
    pytest.param(OperationQueue(), collaborators.OperationQueue, id='queue'),
    pytest.param(HTTPClient(BASE_URL), collaborators.HTTPClient, id='client'),
    pytest.param(RouteSet(), collaborators.RouteSet, id='routes'),
    pytest.param(ResponseCache(), collaborators.ResponseCache, id='cache'),
    pytest.param(ObjectManager(BASE_URL), collaborators.ObjectManager, id='manager'),
    pytest.param(FixtureResolver('.'), collaborators.FixtureSource, id='fixtures'),
    pytest.param(FactoryRegistry(), collaborators.ObjectFactory, id='factories'),
    pytest.param(ManagedObjectContext(), collaborators.PersistenceContext, id='context'),
))
def test_reference_collaborators(instance: object, protocol: type) -> None:
    """In-memory collaborators satisfy the consumed interfaces."""
    assert isinstance(instance, protocol)


def test_foreign_object_is_rejected() -> None:
    """Objects missing members do not satisfy an interface."""
    assert not isinstance(object(), collaborators.ObjectManager)

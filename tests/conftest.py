"""Tests configurations and fixtures."""

from typing import TYPE_CHECKING

import pytest

from stepkit.factories import FactoryRegistry
from stepkit.factory import StepFactory
from stepkit.mapping import ObjectManager
from stepkit.persistence import ManagedObjectContext
from stepkit.presentation import reset_defaults
from stepkit.settings import StepSettings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

BASE_URL = 'http://api.example.com/v1/'


class Person:
    """Domain object built by test factories."""

    def __init__(self) -> None:
        self.name = 'John'
        self.email: str | None = None


class Address:
    """Domain object owning relationship routes."""

    def __init__(self) -> None:
        self.street = ''


@pytest.fixture(autouse=True)
def presentation_defaults() -> 'Iterator[None]':
    """Isolate the process-wide presentation defaults between tests."""
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def settings() -> StepSettings:
    """Provide settings with short waits suitable for tests."""
    return StepSettings(timeout=0.2, poll_interval=0.005)


@pytest.fixture
def manager() -> ObjectManager:
    """Provide an object manager with an empty route set and cache."""
    return ObjectManager(BASE_URL)


@pytest.fixture
def registry() -> FactoryRegistry:
    """Provide a factory registry defining `Person` and `Address`."""
    factories = FactoryRegistry()
    factories.define('Person', Person)
    factories.define('Address', Address)

    return factories


@pytest.fixture
def context() -> ManagedObjectContext:
    """Provide a persistence context with `Human` and `Cat` entities."""
    managed = ManagedObjectContext()
    managed.register_entity('Human', name=None, age=0)
    managed.register_entity('Cat', name=None)

    return managed


@pytest.fixture
def fixtures_root(tmp_path: 'Path') -> 'Path':
    """Provide a fixture directory with a JSON response fixture."""
    root = tmp_path / 'fixtures'
    (root / 'JSON').mkdir(parents=True)
    (root / 'JSON' / 'humans.json').write_bytes(b'{"humans": []}')

    return root


@pytest.fixture
def factory(manager: ObjectManager, registry: FactoryRegistry,
            context: ManagedObjectContext, settings: StepSettings,
            fixtures_root: 'Path') -> StepFactory:
    """Provide a factory bound to all in-memory collaborators."""
    return StepFactory(
        manager,
        factories=registry,
        context=context,
        settings=settings.model_copy(update={'fixtures_path': fixtures_root}),
    )

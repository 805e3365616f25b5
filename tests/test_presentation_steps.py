"""Tests for screen presentation steps and defaults."""

from typing import TYPE_CHECKING, Any

import pytest

from stepkit.completion import Completion
from stepkit.errors import CapabilityError
from stepkit.factory import StepFactory
from stepkit.presentation import (
    get_default_navigation_bar_class,
    get_default_toolbar_class,
    set_default_navigation_bar_class,
    set_default_toolbar_class,
)
from stepkit.settings import StepSettings

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class Screen:
    """Screen under test."""

    def __init__(self) -> None:
        self.title = ''


class NavigationBar:
    """Custom navigation bar."""


class Toolbar:
    """Custom toolbar."""


class BrandedBar:
    """Navigation bar configured as the default."""


class Container:
    """Navigation container."""

    def __init__(self, navigation_bar_class: type | None,
                 toolbar_class: type | None, root: Any) -> None:  # noqa: ANN401
        self.navigation_bar_class = navigation_bar_class
        self.toolbar_class = toolbar_class
        self.root = root


def test_defaults_start_unset() -> None:
    """Both defaults are `None` until configured."""
    assert get_default_navigation_bar_class() is None
    assert get_default_toolbar_class() is None


def test_present_screen(mocker: 'MockerFixture', settings: StepSettings) -> None:
    """The screen is configured before its container is presented."""
    events = []
    presenter = mocker.Mock()
    presenter.present.side_effect = lambda container: events.append(('present', container.root.title))

    def configure(screen: Screen) -> None:
        events.append(('configure', screen.title))
        screen.title = 'Inbox'

    factory = StepFactory(presenter=presenter, container_factory=Container, settings=settings)
    step = factory.present_screen(Screen, NavigationBar, Toolbar, configure)
    presenter.present.assert_not_called()

    assert step.run().ok

    assert events == [('configure', ''), ('present', 'Inbox')]
    (container,), _ = presenter.present.call_args
    assert container.navigation_bar_class is NavigationBar
    assert container.toolbar_class is Toolbar


def test_present_screen_with_defaults(mocker: 'MockerFixture', settings: StepSettings) -> None:
    """Defaults are read when the step runs."""
    presenter = mocker.Mock()
    presenter.present.return_value = None

    factory = StepFactory(presenter=presenter, container_factory=Container, settings=settings)
    step = factory.present_screen(Screen)

    set_default_navigation_bar_class(BrandedBar)
    set_default_toolbar_class(Toolbar)

    assert step.run().ok

    (container,), _ = presenter.present.call_args
    assert container.navigation_bar_class is BrandedBar
    assert container.toolbar_class is Toolbar


def test_present_screen_waits_for_transition(mocker: 'MockerFixture',
                                             settings: StepSettings) -> None:
    """A transition that never ends times the step out."""
    presenter = mocker.Mock()
    presenter.present.return_value = Completion()

    factory = StepFactory(presenter=presenter, container_factory=Container, settings=settings)

    assert factory.present_screen(Screen).run().status == 'timedOut'


def test_presentation_requires_presenter() -> None:
    """Presentation steps need a presenter."""
    with pytest.raises(CapabilityError, match=r'presenter'):
        StepFactory(container_factory=Container).present_screen(Screen)

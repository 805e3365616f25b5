"""Steps presenting screens inside a navigation container."""

from typing import TYPE_CHECKING, Any

from stepkit.presentation import get_default_navigation_bar_class, get_default_toolbar_class

from .base import BaseStepsMixin, label

if TYPE_CHECKING:
    from collections.abc import Callable

    from stepkit.collaborators import NavigationContainerFactory, Presenter
    from stepkit.completion import Completion
    from stepkit.step import Step


class PresentationStepsMixin(BaseStepsMixin):
    """Factory methods for screen presentation."""

    presenter: 'Presenter | None'
    container_factory: 'NavigationContainerFactory | None'

    def present_screen(self, screen_class: type,
                       navigation_bar_class: type | None = None,
                       toolbar_class: type | None = None,
                       configure: 'Callable[[Any], None] | None' = None) -> 'Step':
        """Build a step presenting a new screen.

        The screen is instantiated, wrapped in a navigation container,
        yielded to `configure` and then presented. Omitted bar classes
        fall back to the process-wide defaults at run time.

        Args:
            screen_class: Screen class to instantiate.
            navigation_bar_class: Navigation bar class of the container.
            toolbar_class: Toolbar class of the container.
            configure: Optional callback receiving the new screen.
        """
        presenter = self.require(self.presenter, 'presenter')
        make_container = self.require(self.container_factory, 'navigation container factory')

        def action() -> 'Completion | None':
            screen = screen_class()
            container = make_container(
                navigation_bar_class or get_default_navigation_bar_class(),
                toolbar_class or get_default_toolbar_class(),
                screen,
            )
            if configure is not None:
                configure(screen)
            return presenter.present(container)

        return self.make_step(
            f'Present {label(screen_class)} in a navigation container',
            action,
            screenClass=screen_class,
            navigationBarClass=navigation_bar_class,
            toolbarClass=toolbar_class,
        )

"""Step factory combining every step category.

`StepFactory` is the public entry point of the package. It receives the
application collaborators once and exposes one pure constructor per
kind of step. No factory method performs I/O or touches a collaborator:
the work happens when a runner executes the returned steps.

Categories whose collaborator is missing are unavailable. Calling one
of their methods raises `CapabilityError` immediately, so a
misconfigured suite fails while building its scenario rather than in
the middle of it.
"""

from typing import TYPE_CHECKING

from stepkit.builders import (
    CachingStepsMixin,
    NetworkStepsMixin,
    ObjectStepsMixin,
    PersistenceStepsMixin,
    PresentationStepsMixin,
)
from stepkit.fixtures import FixtureResolver
from stepkit.settings import StepSettings

if TYPE_CHECKING:
    from stepkit.collaborators import (
        FixtureSource,
        NavigationContainerFactory,
        ObjectFactory,
        ObjectManager,
        PersistenceContext,
        Presenter,
    )
    from stepkit.step import StepPump


class StepFactory(NetworkStepsMixin, CachingStepsMixin, ObjectStepsMixin,
                  PersistenceStepsMixin, PresentationStepsMixin):
    """Factory of steps bound to application collaborators."""

    def __init__(self, manager: 'ObjectManager | None' = None, *,  # noqa: PLR0913
                 fixtures: 'FixtureSource | None' = None,
                 factories: 'ObjectFactory | None' = None,
                 context: 'PersistenceContext | None' = None,
                 presenter: 'Presenter | None' = None,
                 container_factory: 'NavigationContainerFactory | None' = None,
                 settings: StepSettings | None = None,
                 pump: 'StepPump | None' = None) -> None:
        """Initialize the factory.

        Args:
            manager: Shared object manager for network, route and
                response cache steps.
            fixtures: Fixture source. Defaults to a `FixtureResolver`
                over `settings.fixtures_path` when that is configured.
            factories: Registry of named object factories.
            context: Persistence context; enables persistence steps.
            presenter: Presenter of navigation containers.
            container_factory: Constructor of navigation containers.
            settings: Step defaults. Resolved from the environment
                when omitted.
            pump: Optional event-loop hook called while steps wait.
        """
        self.settings = settings or StepSettings()

        if fixtures is None and self.settings.fixtures_path is not None:
            fixtures = FixtureResolver(self.settings.fixtures_path)

        self.manager = manager
        self.fixtures = fixtures
        self.factories = factories
        self.context = context
        self.presenter = presenter
        self.container_factory = container_factory
        self.pump = pump

"""Factory mixins grouped by step category.

Each mixin contributes the factory methods of one category. They are
combined by `stepkit.factory.StepFactory`.
"""

from .base import BaseStepsMixin
from .caching import CachingStepsMixin
from .network import NetworkStepsMixin
from .objects import ObjectStepsMixin
from .persistence import PersistenceStepsMixin, SaveRequest
from .presentation import PresentationStepsMixin

__all__ = (
    'BaseStepsMixin',
    'CachingStepsMixin',
    'NetworkStepsMixin',
    'ObjectStepsMixin',
    'PersistenceStepsMixin',
    'PresentationStepsMixin',
    'SaveRequest',
)

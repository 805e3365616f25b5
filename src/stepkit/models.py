"""Base Pydantic models for step elements.

This module defines the foundational model classes used by steps,
outcomes and routes. It enforces immutability and strict schema
validation so that constructed steps are deterministic and explicit.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all step elements.

    Design principles enforced by this model:
        - Immutability: elements cannot be modified after creation.
          A step built by a factory is a value; only its execution
          produces side effects.
        - Strict schema validation: unknown or extra fields are rejected
          to avoid silent errors caused by typos.

    Arbitrary types are allowed because steps carry callables and
    references to application collaborators.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for runtime settings.

    Design principles enforced by this model:
        - Immutability: resolved settings cannot be modified after creation.
        - Tolerant schema handling: unknown or extra fields are ignored,
          so unrelated environment variables never break resolution.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )

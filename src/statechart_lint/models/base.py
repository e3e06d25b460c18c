"""Base Pydantic schema for the project.

Provides a common base class for all Pydantic models in statechart-lint
with shared configuration and validation behavior.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """Base model for all Pydantic schemas.

    Provides common configuration for all models in the project:
    - from_attributes: Allow construction from arbitrary objects
    - frozen: Models are immutable once built
    """

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
    )

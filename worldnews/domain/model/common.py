"""Shared base for worldnews domain models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic base for users, posts, sessions and theme settings.

    Changes go through ``model_copy(update=...)`` so a stored model is never
    mutated in place.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # value objects such as Contact and Handle
    )

"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; state changes return updated copies.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,  # Form input arrives with stray whitespace
    )

"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for structured value objects.

    Embedded records (bank accounts, social links, tagged content) have no
    identity of their own and are compared by value. Surrounding whitespace
    from form input is stripped on construction.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    ``model_dump()`` returns the primitive itself, so wrapped values such as
    slugs serialize as plain strings.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)

"""Entity base class."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """A domain object with identity.

    Two entities are equal when their `id` fields are equal, regardless of the
    other attributes. Subclasses must declare an `id` field.
    """

    model_config = ConfigDict(frozen=True)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return NotImplemented
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self.id)  # type: ignore[attr-defined]

"""
Person Model
============

Named-field record holding a display name and an age.

Both fields are required and must be supplied by name, either directly
(``Person(name="Sophie", age=26)``) or by mass assignment from a mapping
expanded at the call site (``Person(**attributes)``).
"""
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from greeter.domain.exceptions import MissingRequiredFieldError


class Person(BaseModel):
    """
    Person domain model.

    Immutable once constructed; unknown fields are rejected so a mistyped
    key in a mass-assigned mapping fails instead of being dropped. Values
    are validated strictly and stored exactly as supplied.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    name: str = Field(..., description="Display name")
    age: int = Field(..., ge=0, description="Age in years")

    @classmethod
    def create(cls, **attributes: Any) -> "Person":
        """
        Build a person, reporting absent fields as a domain error.

        Raises:
            MissingRequiredFieldError: If ``name`` or ``age`` was not supplied
            ValidationError: For any other invalid value (wrong type, negative age)
        """
        try:
            return cls(**attributes)
        except ValidationError as e:
            missing = [
                str(error["loc"][0])
                for error in e.errors()
                if error["type"] == "missing"
            ]
            if missing:
                raise MissingRequiredFieldError(missing) from e
            raise

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, Any]) -> "Person":
        """Mass-assign a person from a pre-built mapping of field name to value."""
        return cls.create(**attributes)

    def to_attributes(self) -> dict:
        """Return the fields as a mapping suitable for ``Person(**...)``."""
        return self.model_dump()

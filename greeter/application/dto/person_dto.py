"""
Person DTO
==========

Pydantic models for person API requests and responses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonCreateRequest(BaseModel):
    """
    DTO for creating a person.

    Both fields are optional here; the Person model decides which are
    required once the supplied fields are mass-assigned.
    """
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Sophie",
                "age": 26,
            }
        },
    )

    name: Optional[str] = Field(None, description="Display name")
    age: Optional[int] = Field(None, ge=0, description="Age in years")

    def supplied_attributes(self) -> dict:
        """Fields the client actually sent, with null values dropped."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class PersonResponse(BaseModel):
    """DTO for person data."""
    name: str
    age: int

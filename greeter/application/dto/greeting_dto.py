"""
Greeting DTO
============

Pydantic models for greeting API requests and responses.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from greeter.domain.constants.greeting_fields import DEFAULT_CURRENT_AGE, DEFAULT_NAME


class BirthdayGreetingRequest(BaseModel):
    """DTO for requesting a birthday greeting. Both fields are optional."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "current_age": 31,
                "name": "Carmelo Anthony",
            }
        }
    )

    name: str = Field(DEFAULT_NAME, description="Who to greet")
    current_age: int = Field(DEFAULT_CURRENT_AGE, description="Age before the birthday")


class BirthdayGreetingResponse(BaseModel):
    """DTO for a birthday greeting."""
    name: str
    new_age: int
    lines: List[str]

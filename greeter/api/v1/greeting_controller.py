"""
Greeting Controller
===================

FastAPI controller for birthday greeting endpoints.
"""
from fastapi import APIRouter, Depends, status

from greeter.application.dto.greeting_dto import (
    BirthdayGreetingRequest,
    BirthdayGreetingResponse,
)
from greeter.api.v1.dependencies import get_greeting_service
from greeter.application.services.greeting_service import GreetingService

router = APIRouter(tags=["greetings"])


@router.post(
    "/birthday",
    response_model=BirthdayGreetingResponse,
    status_code=status.HTTP_200_OK,
    summary="Build a birthday greeting",
    description="""
    Build a birthday greeting from named fields.

    Both fields are optional; omitted fields use the defaults
    ("Beyonce", 31). Field order in the body does not matter.
    """
)
async def birthday_greeting(
    request: BirthdayGreetingRequest,
    service: GreetingService = Depends(get_greeting_service),
) -> BirthdayGreetingResponse:
    """Build a birthday greeting."""
    greeting = service.birthday_greeting(
        name=request.name,
        current_age=request.current_age,
    )

    return BirthdayGreetingResponse(
        name=greeting.name,
        new_age=greeting.new_age,
        lines=greeting.lines(),
    )

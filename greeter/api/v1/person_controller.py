"""
Person Controller
=================

FastAPI controller for person endpoints.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from greeter.application.dto.person_dto import PersonCreateRequest, PersonResponse
from greeter.api.v1.dependencies import get_person_service
from greeter.application.services.person_service import PersonService
from greeter.domain.exceptions import MissingRequiredFieldError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["people"])


@router.post(
    "/create",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a person",
    description="""
    Create a person by mass assignment.

    The fields supplied in the request body are expanded into named
    arguments for the Person model. Both name and age are required;
    a missing one is rejected with 400.
    """
)
async def create_person(
    request: PersonCreateRequest,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a person from the request body."""
    try:
        person = service.register_person_from_attributes(request.supplied_attributes())
    except MissingRequiredFieldError as e:
        logger.warning(f"Rejected person without {', '.join(e.fields)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return PersonResponse(**person.to_attributes())

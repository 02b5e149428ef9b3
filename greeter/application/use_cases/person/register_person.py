"""
Register Person Use Case
========================

Use case for constructing a person from named fields.
"""
import logging
from typing import Any

from greeter.domain.models.person import Person

logger = logging.getLogger(__name__)


class RegisterPersonUseCase:
    """Use case for registering a person."""

    def execute(self, **attributes: Any) -> Person:
        """
        Construct a person from named fields.

        Accepts the fields as keyword arguments; a pre-built mapping must be
        expanded by the caller (``execute(**attributes)``).

        Returns:
            Person entity

        Raises:
            MissingRequiredFieldError: If ``name`` or ``age`` is absent
        """
        person = Person.create(**attributes)
        logger.info(f"Registered person {person.name!r} aged {person.age}")
        return person

"""
Person Service
==============

Application service for person-related operations.
"""
from typing import Any, Mapping

from greeter.application.use_cases.person.register_person import RegisterPersonUseCase
from greeter.domain.models.person import Person


class PersonService:
    """
    Application service for person operations.

    Supports both call forms for construction: named fields passed directly,
    and mass assignment from a mapping.
    """

    def __init__(self) -> None:
        self._register_use_case = RegisterPersonUseCase()

    def register_person(self, **attributes: Any) -> Person:
        """
        Register a person from named fields.

        Raises:
            MissingRequiredFieldError: If ``name`` or ``age`` is absent
        """
        return self._register_use_case.execute(**attributes)

    def register_person_from_attributes(self, attributes: Mapping[str, Any]) -> Person:
        """Register a person by mass assignment from ``attributes``."""
        return self._register_use_case.execute(**attributes)

from typing import TYPE_CHECKING
from ...application.services.person_service import PersonService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PersonProvider:
    """Person service provider - registers person-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register PersonService as singleton."""
        container.register_singleton(PersonService, PersonService())

from typing import TYPE_CHECKING
from ...application.services.greeting_service import GreetingService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class GreetingProvider:
    """Greeting service provider - registers greeting-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register GreetingService as singleton."""
        container.register_singleton(GreetingService, GreetingService())

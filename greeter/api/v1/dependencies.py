"""
Dependency Container
====================

FastAPI dependency functions.
Provides singleton instances of services from the DI container.
"""
from greeter.application.services.greeting_service import GreetingService
from greeter.application.services.person_service import PersonService
from greeter.di.container import get_container


def get_greeting_service() -> GreetingService:
    """
    Get greeting service instance (singleton).

    Returns:
        GreetingService instance
    """
    container = get_container()
    return container.get(GreetingService)


def get_person_service() -> PersonService:
    """
    Get person service instance (singleton).

    Returns:
        PersonService instance
    """
    container = get_container()
    return container.get(PersonService)

# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import GreetingProvider, PersonProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers.

    The greeting and person services have no dependencies of their own,
    so registration order does not matter here.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """Setup dependency registrations by composing all providers."""
        GreetingProvider.register(self)
        PersonProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next get_container() rebuilds it."""
    global _container
    _container = None

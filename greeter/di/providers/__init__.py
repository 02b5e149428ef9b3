"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .greeting_provider import GreetingProvider
from .person_provider import PersonProvider

__all__ = [
    "GreetingProvider",
    "PersonProvider",
]

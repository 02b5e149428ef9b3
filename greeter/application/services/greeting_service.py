"""
Greeting Service
================

Application service for birthday greetings.
"""
from greeter.application.use_cases.greeting.happy_birthday import HappyBirthdayUseCase
from greeter.domain.constants.greeting_fields import DEFAULT_CURRENT_AGE, DEFAULT_NAME
from greeter.domain.models.birthday_greeting import BirthdayGreeting


class GreetingService:
    """Application service for greeting operations."""

    def __init__(self) -> None:
        self._happy_birthday_use_case = HappyBirthdayUseCase()

    def birthday_greeting(
        self,
        *,
        name: str = DEFAULT_NAME,
        current_age: int = DEFAULT_CURRENT_AGE,
    ) -> BirthdayGreeting:
        """Build a birthday greeting; omitted arguments use their defaults."""
        return self._happy_birthday_use_case.execute(name=name, current_age=current_age)

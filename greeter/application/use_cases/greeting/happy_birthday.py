"""
Happy Birthday Use Case
=======================

Use case for building a birthday greeting from keyword arguments.
"""
import logging

from greeter.domain.constants.greeting_fields import DEFAULT_CURRENT_AGE, DEFAULT_NAME
from greeter.domain.models.birthday_greeting import BirthdayGreeting

logger = logging.getLogger(__name__)


class HappyBirthdayUseCase:
    """Use case for building a birthday greeting."""

    def execute(
        self,
        *,
        name: str = DEFAULT_NAME,
        current_age: int = DEFAULT_CURRENT_AGE,
    ) -> BirthdayGreeting:
        """
        Build the greeting for ``name`` turning ``current_age + 1``.

        Absent arguments fall back to their defaults.

        Args:
            name: Who to greet
            current_age: Age before the birthday

        Returns:
            BirthdayGreeting
        """
        greeting = BirthdayGreeting.for_birthday(name=name, current_age=current_age)
        logger.debug(f"Built birthday greeting for {greeting.name} (now {greeting.new_age})")
        return greeting

"""
Birthday console helpers
------------------------

Role:
- Print a birthday greeting, taking the name and current age as keyword arguments.

Functions:
- happy_birthday(*, name, current_age): both arguments optional, defaulting to
  "Beyonce" and 31.
- happy_birthday_strict(*, name, current_age): same output, both arguments required.

Arguments are keyword-only, so callers may pass them in any order:

    happy_birthday(current_age=31, name="Carmelo Anthony")
    # Happy Birthday, Carmelo Anthony
    # You are now 32 years old
"""
import sys
from typing import Optional, TextIO

from greeter.domain.constants.greeting_fields import DEFAULT_CURRENT_AGE, DEFAULT_NAME
from greeter.domain.models.birthday_greeting import BirthdayGreeting


def _emit(greeting: BirthdayGreeting, out: Optional[TextIO]) -> BirthdayGreeting:
    stream = out if out is not None else sys.stdout
    for line in greeting.lines():
        print(line, file=stream)
    return greeting


def happy_birthday(
    *,
    name: str = DEFAULT_NAME,
    current_age: int = DEFAULT_CURRENT_AGE,
    out: Optional[TextIO] = None,
) -> BirthdayGreeting:
    """
    Print a birthday greeting and the incremented age.

    Args:
        name: Who to greet
        current_age: Age before the birthday
        out: Stream to write to (defaults to stdout)

    Returns:
        The greeting that was printed
    """
    return _emit(BirthdayGreeting.for_birthday(name=name, current_age=current_age), out)


def happy_birthday_strict(
    *,
    name: str,
    current_age: int,
    out: Optional[TextIO] = None,
) -> BirthdayGreeting:
    """Like happy_birthday(), but both name and current_age must be given."""
    return _emit(BirthdayGreeting.for_birthday(name=name, current_age=current_age), out)

"""
Birthday Greeting Model
=======================

The two lines produced for someone's birthday.
"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class BirthdayGreeting:
    """A greeting addressed to ``name`` announcing their new age."""
    name: str
    new_age: int

    @classmethod
    def for_birthday(cls, *, name: str, current_age: int) -> "BirthdayGreeting":
        """Build the greeting for someone turning one year older than ``current_age``."""
        return cls(name=name, new_age=current_age + 1)

    @property
    def greeting_line(self) -> str:
        return f"Happy Birthday, {self.name}"

    @property
    def age_line(self) -> str:
        return f"You are now {self.new_age} years old"

    def lines(self) -> List[str]:
        return [self.greeting_line, self.age_line]

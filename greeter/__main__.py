"""
Console walkthrough
-------------------

Runs the keyword-argument and mass-assignment examples:

    python -m greeter
"""
from greeter.domain.constants.person_fields import PersonFields
from greeter.domain.models.person import Person
from greeter.utils.birthday import happy_birthday


def main() -> None:
    # Keyword arguments can be given in any order
    happy_birthday(current_age=31, name="Carmelo Anthony")

    # Omitted keyword arguments fall back to their defaults
    happy_birthday()

    # Mass assignment: the mapping is expanded into named arguments
    person_attributes = {PersonFields.NAME: "Sophie", PersonFields.AGE: 26}
    sophie = Person(**person_attributes)
    print(repr(sophie))


if __name__ == "__main__":
    main()

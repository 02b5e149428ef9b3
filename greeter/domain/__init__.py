"""
Domain Layer
============

Core models and errors.
This layer has no dependencies on the API or wiring layers.

Contains:
- Models: Person (named-field record) and BirthdayGreeting
- Constants: field names and greeting defaults
- Exceptions: MissingRequiredFieldError
"""

"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain models.

Contains:
- Use Cases: Business operations (build a birthday greeting, register a person)
- Services: Application services that expose the use cases
- DTOs: Pydantic request/response models for the API
"""

"""
API v1 Package
===============

Version 1 API controllers.
"""
from .greeting_controller import router as greeting_router
from .person_controller import router as person_router

__all__ = ["greeting_router", "person_router"]

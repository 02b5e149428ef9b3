"""
Unit tests for use cases, services and the DI container.
"""
import logging

import pytest

from greeter.application.services.greeting_service import GreetingService
from greeter.application.services.person_service import PersonService
from greeter.application.use_cases.greeting.happy_birthday import HappyBirthdayUseCase
from greeter.application.use_cases.person.register_person import RegisterPersonUseCase
from greeter.di.base_container import BaseContainer
from greeter.di.container import get_container
from greeter.domain.exceptions import MissingRequiredFieldError
from greeter.domain.models.birthday_greeting import BirthdayGreeting
from greeter.domain.models.person import Person


def test_happy_birthday_use_case_defaults():
    greeting = HappyBirthdayUseCase().execute()
    assert greeting == BirthdayGreeting(name="Beyonce", new_age=32)


def test_greeting_service_order_independent():
    service = GreetingService()
    assert service.birthday_greeting(name="Carmelo Anthony", current_age=31) == \
        service.birthday_greeting(current_age=31, name="Carmelo Anthony")


def test_register_person_use_case_logs(caplog):
    with caplog.at_level(logging.INFO, logger="greeter.application.use_cases.person.register_person"):
        person = RegisterPersonUseCase().execute(name="Sophie", age=26)
    assert person == Person(name="Sophie", age=26)
    assert "Sophie" in caplog.text


def test_person_service_both_call_forms_agree():
    service = PersonService()
    attributes = {"name": "Sophie", "age": 26}
    assert service.register_person(**attributes) == service.register_person(name="Sophie", age=26)
    assert service.register_person_from_attributes(attributes) == Person(name="Sophie", age=26)


def test_person_service_missing_field():
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        PersonService().register_person_from_attributes({"age": 26})
    assert exc_info.value.fields == ("name",)


def test_container_returns_singletons():
    container = get_container()
    assert container.get(GreetingService) is container.get(GreetingService)
    assert isinstance(container.get(PersonService), PersonService)
    assert get_container() is container


def test_base_container_factory_and_missing_registration():
    container = BaseContainer()
    container.register_factory("greeting", lambda: BirthdayGreeting(name="Ada", new_age=37))
    assert container.has("greeting")
    assert container.get("greeting") == BirthdayGreeting(name="Ada", new_age=37)
    with pytest.raises(ValueError):
        container.get(PersonService)

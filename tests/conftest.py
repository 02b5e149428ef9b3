import pytest

from greeter.core.config import reset_settings
from greeter.di.container import reset_container


@pytest.fixture(autouse=True)
def fresh_singletons():
    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()

# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

ServiceType = TypeVar('ServiceType')


class BaseContainer:
    """Base dependency injection container holding singletons and factories"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Union[Type, str], Callable[[], Any]] = {}

    def register_singleton(self, interface: Union[Type[ServiceType], str], instance: ServiceType) -> None:
        """Register a singleton instance under a type or string key"""
        self.instances[interface] = instance

    def register_factory(self, interface: Union[Type[ServiceType], str], factory: Callable[[], ServiceType]) -> None:
        """Register a factory called on every lookup"""
        self.factories[interface] = factory

    def has(self, interface: Union[Type, str]) -> bool:
        return interface in self.instances or interface in self.factories

    def get(self, interface: Union[Type[ServiceType], str]) -> ServiceType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            return self.factories[interface]()

        raise ValueError(f"No registration found for {interface}")

"""User extension DI module - provides the loader and its collaborators."""
import logging
from typing import Optional

from injector import Module, provider, singleton

from user_extension.config.application_config import ExtensionEnvironmentConfig
from user_extension.container.container_builder_interface import ContainerBuilderInterface
from user_extension.container.parameter_container import ParameterContainer
from user_extension.core.extension_environment import ExtensionEnvironment
from user_extension.errors import ModelDiscoveryError
from user_extension.loader.user_extension_loader import UserExtensionLoader
from user_extension.mapping.in_memory_mapping_collector import InMemoryMappingCollector
from user_extension.mapping.mapping_collector_interface import MappingCollectorInterface
from user_extension.registry.model_class_registry import create_default_model_class_registry
from user_extension.registry.model_class_registry_interface import ModelClassRegistryInterface

logger = logging.getLogger(__name__)


class UserExtensionModule(Module):
    """DI module for loading the user management extension into a host container."""

    def __init__(self, environment_config: Optional[ExtensionEnvironmentConfig] = None) -> None:
        self._environment_config = environment_config or ExtensionEnvironmentConfig()

    def configure(self, binder) -> None:  # type: ignore[no-untyped-def,override]
        """Configure interface bindings."""
        binder.bind(MappingCollectorInterface, to=InMemoryMappingCollector, scope=singleton)  # type: ignore[type-abstract]
        binder.bind(UserExtensionLoader, scope=singleton)
        logger.info("UserExtensionModule configured")

    @provider
    @singleton
    def provide_model_class_registry(self) -> ModelClassRegistryInterface:
        """
        Provide the model registry with bundled and application model classes.

        Raises:
            ModelDiscoveryError: If a configured discovery package cannot be imported
        """
        registry = create_default_model_class_registry()
        for package_name in self._environment_config.discovery_packages:
            try:
                registry.discover_classes(package_name, strict=True)
            except ImportError as e:
                raise ModelDiscoveryError(f'Cannot discover model classes in package "{package_name}": {e}') from e
        return registry

    @provider
    @singleton
    def provide_extension_environment(self, model_registry: ModelClassRegistryInterface) -> ExtensionEnvironment:
        return ExtensionEnvironment.create(
            registered_extensions=self._environment_config.registered_extensions,
            authenticator_manager_available=self._environment_config.authenticator_manager_available,
            model_registry=model_registry,
        )

    @provider
    @singleton
    def provide_container_builder(self) -> ContainerBuilderInterface:
        """Provide an in-memory container that knows the registered extensions."""
        return ParameterContainer(self._environment_config.registered_extensions)

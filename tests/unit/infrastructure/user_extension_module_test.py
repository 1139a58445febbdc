"""Unit tests for UserExtensionModule wiring."""
import pytest
from injector import Injector

from user_extension.config.application_config import ExtensionEnvironmentConfig
from user_extension.container.container_builder_interface import ContainerBuilderInterface
from user_extension.core.extension_environment import ExtensionEnvironment
from user_extension.errors import ModelDiscoveryError
from user_extension.infrastructure.di.user_extension_module import UserExtensionModule
from user_extension.loader.user_extension_loader import UserExtensionLoader
from user_extension.mapping.mapping_collector_interface import MappingCollectorInterface
from user_extension.registry.model_class_registry_interface import ModelClassRegistryInterface


class TestUserExtensionModule:
    """Test cases for the injector module."""

    def test_loader_is_resolvable_with_shared_collaborators(self) -> None:
        # Given
        injector = Injector([UserExtensionModule()])

        # When
        loader = injector.get(UserExtensionLoader)

        # Then
        assert loader is injector.get(UserExtensionLoader)
        assert loader.environment is injector.get(ExtensionEnvironment)
        assert loader.mapping_collector is injector.get(MappingCollectorInterface)  # type: ignore[type-abstract]
        assert loader.environment.model_registry is injector.get(ModelClassRegistryInterface)  # type: ignore[type-abstract]

    def test_environment_follows_environment_config(self) -> None:
        # Given
        environment_config = ExtensionEnvironmentConfig(
            registered_extensions=["admin", "twig"],
            authenticator_manager_available=False,
        )
        injector = Injector([UserExtensionModule(environment_config)])

        # When
        environment = injector.get(ExtensionEnvironment)
        container = injector.get(ContainerBuilderInterface)  # type: ignore[type-abstract]

        # Then
        assert environment.has_admin_extension
        assert not environment.has_mapping_extension
        assert environment.authenticator_manager_available is False
        assert container.has_extension("twig")
        assert not container.has_extension("doctrine")

    def test_extra_discovery_packages_are_discovered(self) -> None:
        # Given
        environment_config = ExtensionEnvironmentConfig(discovery_packages=["user_extension.model.entity"])
        injector = Injector([UserExtensionModule(environment_config)])

        # When
        registry = injector.get(ModelClassRegistryInterface)  # type: ignore[type-abstract]

        # Then
        assert registry.has_class("user_extension.model.entity.base_user.BaseEntityUser")
        assert registry.has_class("user_extension.model.document.base_user.BaseDocumentUser")

    def test_misspelled_discovery_package_halts_resolution(self) -> None:
        # Given
        environment_config = ExtensionEnvironmentConfig(discovery_packages=["user_extension.model.entitiez"])
        injector = Injector([UserExtensionModule(environment_config)])

        # When / Then
        with pytest.raises(ModelDiscoveryError, match="user_extension.model.entitiez"):
            injector.get(ModelClassRegistryInterface)  # type: ignore[type-abstract]

    def test_discovery_package_must_be_a_package(self) -> None:
        # Given
        environment_config = ExtensionEnvironmentConfig(discovery_packages=["user_extension.errors"])
        injector = Injector([UserExtensionModule(environment_config)])

        # When / Then
        with pytest.raises(ModelDiscoveryError, match="not a package"):
            injector.get(ModelClassRegistryInterface)  # type: ignore[type-abstract]

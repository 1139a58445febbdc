"""Unit tests for UserExtensionLoader."""
import logging
from typing import Any, Callable, Dict
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from user_extension.container.parameter_container import ParameterContainer
from user_extension.core.extension_environment import ExtensionEnvironment
from user_extension.enum.wiring_directive_enum import WiringDirectiveEnum as W
from user_extension.errors import (
    ConfigConflictError,
    InvalidManagerTypeError,
    InvalidModelBindingError,
    UnregisteredDependencyError,
)
from user_extension.loader.user_extension_loader import FORM_THEME, UserExtensionLoader
from user_extension.mapping.in_memory_mapping_collector import InMemoryMappingCollector
from user_extension.mapping.mapping_collector_interface import MappingCollectorInterface
from user_extension.registry.model_class_registry import ModelClassRegistry

EnvironmentFactory = Callable[..., ExtensionEnvironment]

DOCUMENT_USER = "user_extension.model.document.base_user.BaseDocumentUser"
DOCUMENT_GROUP = "user_extension.model.document.base_group.BaseDocumentGroup"


class TestUserExtensionLoaderPrepend:
    """Test cases for prepend."""

    def test_form_theme_is_prepended_to_templating_extension(self, environment_factory: EnvironmentFactory) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(), InMemoryMappingCollector())
        container = ParameterContainer(["twig"])

        # When
        loader.prepend(container)

        # Then
        assert container.get_extension_config("twig") == [{"form_themes": [FORM_THEME]}]

    def test_nothing_is_prepended_without_templating_extension(self, environment_factory: EnvironmentFactory) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(), InMemoryMappingCollector())
        container = MagicMock()
        container.has_extension.return_value = False

        # When
        loader.prepend(container)

        # Then
        container.prepend_extension_config.assert_not_called()


class TestUserExtensionLoaderLoad:
    """Test cases for load."""

    @pytest.fixture
    def collector(self) -> InMemoryMappingCollector:
        return InMemoryMappingCollector()

    def test_orm_load_writes_wiring_parameters_alias_and_association(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
    ) -> None:
        # Given
        environment = environment_factory(extensions=("admin", "doctrine"))
        loader = UserExtensionLoader(environment, collector)

        # When
        config = loader.load([minimal_config_fragment, {"impersonating_route": "home"}], container)

        # Then
        assert container.get_loaded_wiring()[:3] == [W.ADMIN, W.ADMIN_ORM, W.ORM]
        assert container.get_parameter("user_management.impersonating") == {"route": "home", "parameters": {}}
        assert container.get_parameter("user_management.resetting.email.from_email") == {
            "noreply@example.com": "Acme Support"
        }
        assert container.get_alias("user_management.mailer") == "user_management.mailer.default"
        assert len(collector.get_associations(config["class"]["user"])) == 1

    def test_mongodb_load_registers_no_association(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        container: ParameterContainer,
    ) -> None:
        # Given
        collector = MagicMock(spec=MappingCollectorInterface)
        loader = UserExtensionLoader(environment_factory(extensions=()), collector)
        fragment = {
            **minimal_config_fragment,
            "manager_type": "mongodb",
            "class": {"user": DOCUMENT_USER, "group": DOCUMENT_GROUP},
        }

        # When
        config = loader.load([fragment], container)

        # Then
        assert config["manager_type"] == "mongodb"
        assert W.MONGODB in container.get_loaded_wiring()
        collector.add_association.assert_not_called()

    def test_orm_with_unregistered_classes_skips_association_silently(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
    ) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(registry=ModelClassRegistry()), collector)

        # When
        loader.load([minimal_config_fragment], container)

        # Then
        assert len(collector) == 0
        assert container.has_parameter("user_management.user.class")

    def test_conflicting_impersonation_is_fatal(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
    ) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(), collector)
        fragment = {**minimal_config_fragment, "impersonating": {"route": "a"}, "impersonating_route": "b"}

        # When / Then
        with pytest.raises(ConfigConflictError):
            loader.load([fragment], container)
        assert container.get_loaded_wiring() == []

    def test_invalid_manager_type_is_fatal(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
    ) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(), collector)

        # When / Then
        with pytest.raises(InvalidManagerTypeError):
            loader.load([{**minimal_config_fragment, "manager_type": "redis"}], container)

    def test_missing_mapping_extension_is_fatal(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(extensions=("admin",)), collector)

        # When
        with caplog.at_level(logging.ERROR, logger="user_extension.loader.user_extension_loader"):
            with pytest.raises(UnregisteredDependencyError):
                loader.load([minimal_config_fragment], container)

        # Then
        assert "configuration is invalid" in caplog.text
        assert not container.has_parameter("user_management.user.class")

    def test_wrong_family_model_is_fatal(
        self,
        minimal_config_fragment: Dict[str, Any],
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
    ) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(), collector)
        fragment = {**minimal_config_fragment, "class": {"user": DOCUMENT_USER}}

        # When / Then
        with pytest.raises(InvalidModelBindingError):
            loader.load([fragment], container)
        assert len(collector) == 0

    def test_schema_violation_propagates(
        self,
        environment_factory: EnvironmentFactory,
        collector: InMemoryMappingCollector,
        container: ParameterContainer,
    ) -> None:
        # Given
        loader = UserExtensionLoader(environment_factory(), collector)

        # When / Then
        with pytest.raises(ValidationError):
            loader.load([{"manager_type": "orm"}], container)

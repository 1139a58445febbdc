"""
Shared test fixtures for the user management extension tests.

Provides configuration mappings, model registries and environment
factories following the Given/When/Then structure of the test suites.
"""
import logging
from typing import Any, Callable, Dict, Generator, Iterable, Optional

import pytest

from user_extension.config.user_extension_config import UserExtensionConfig
from user_extension.container.parameter_container import ParameterContainer
from user_extension.core.extension_environment import ExtensionEnvironment
from user_extension.core.impersonation_normalizer import normalize_impersonation
from user_extension.registry.model_class_registry import (
    ModelClassRegistry,
    create_default_model_class_registry,
)


@pytest.fixture
def minimal_config_fragment() -> Dict[str, Any]:
    """Smallest configuration fragment the schema accepts."""
    return {
        "resetting": {
            "email": {
                "address": "noreply@example.com",
                "sender_name": "Acme Support",
            }
        }
    }


@pytest.fixture
def raw_config(minimal_config_fragment: Dict[str, Any]) -> Dict[str, Any]:
    """Schema-defaulted configuration mapping, before normalization."""
    return UserExtensionConfig.model_validate(minimal_config_fragment).to_mapping()


@pytest.fixture
def finalized_config(raw_config: Dict[str, Any]) -> Dict[str, Any]:
    return normalize_impersonation(raw_config)


@pytest.fixture
def model_registry() -> ModelClassRegistry:
    """Registry holding the four bundled base models."""
    return create_default_model_class_registry()


@pytest.fixture
def environment_factory(
    model_registry: ModelClassRegistry,
) -> Callable[..., ExtensionEnvironment]:
    """Build environments; by default only the mapping extension is registered."""

    def _create(
        extensions: Iterable[str] = ("doctrine",),
        authenticator_manager_available: bool = True,
        registry: Optional[ModelClassRegistry] = None,
    ) -> ExtensionEnvironment:
        return ExtensionEnvironment.create(
            registered_extensions=extensions,
            authenticator_manager_available=authenticator_manager_available,
            model_registry=registry if registry is not None else model_registry,
        )

    return _create


@pytest.fixture
def container() -> ParameterContainer:
    return ParameterContainer(["twig", "doctrine"])


@pytest.fixture
def isolated_logging() -> Generator[None, None, None]:
    """Remove root handlers installed by configure_logging during the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers and not type(handler).__module__.startswith("_pytest"):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)

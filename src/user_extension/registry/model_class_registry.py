import logging
from typing import Any, Type

from user_extension.base.discoverable_registry import DiscoverableRegistry
from user_extension.decorator.model_family_decorator import get_model_family_from_class
from user_extension.registry.model_class_registry_interface import ModelClassRegistryInterface

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PACKAGES = (
    "user_extension.model.entity",
    "user_extension.model.document",
)


def qualified_class_name(class_type: type) -> str:
    return f"{class_type.__module__}.{class_type.__qualname__}"


class ModelClassRegistry(DiscoverableRegistry[str, Any], ModelClassRegistryInterface):
    """
    Registry of user and group model classes keyed by fully-qualified name.

    Discovery picks up every class tagged with ``@model_family``, including
    application subclasses of the bundled base models.
    """

    def register(self, class_type: Type) -> str:
        key = qualified_class_name(class_type)
        self.register_class(key, class_type)
        return key

    def _validate_class(self, class_type: Type) -> None:
        if not isinstance(class_type, type):
            raise TypeError(f"Only classes can be registered as models, got {class_type!r}")

    def _should_discover_class(self, class_obj: Any) -> bool:
        return get_model_family_from_class(class_obj) is not None

    def _extract_key_from_class(self, class_obj: Any) -> str:
        return qualified_class_name(class_obj)


def create_default_model_class_registry() -> ModelClassRegistry:
    """Registry pre-populated with the bundled relational and document base models."""
    registry = ModelClassRegistry()
    for package_name in DEFAULT_MODEL_PACKAGES:
        registry.discover_classes(package_name, strict=True)
    logger.info(f"ModelClassRegistry: {len(registry)} model classes")
    return registry

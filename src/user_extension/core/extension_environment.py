from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from user_extension.registry.model_class_registry import create_default_model_class_registry
from user_extension.registry.model_class_registry_interface import ModelClassRegistryInterface

ADMIN_EXTENSION = "admin"
MAPPING_EXTENSION = "doctrine"
TEMPLATING_EXTENSION = "twig"


@dataclass(frozen=True)
class ExtensionEnvironment:
    """
    Capabilities of the host application, captured once at startup.

    Attributes:
        registered_extensions: Names of the companion extensions the host registered
        authenticator_manager_available: Whether the security layer runs on an authenticator manager
        model_registry: Model classes resolvable by name
    """

    registered_extensions: FrozenSet[str] = frozenset()
    authenticator_manager_available: bool = False
    model_registry: ModelClassRegistryInterface = field(default_factory=create_default_model_class_registry)

    @classmethod
    def create(
        cls,
        registered_extensions: Iterable[str] = (),
        authenticator_manager_available: bool = False,
        model_registry: Optional[ModelClassRegistryInterface] = None,
    ) -> "ExtensionEnvironment":
        if model_registry is None:
            model_registry = create_default_model_class_registry()
        return cls(
            registered_extensions=frozenset(registered_extensions),
            authenticator_manager_available=authenticator_manager_available,
            model_registry=model_registry,
        )

    def has_extension(self, name: str) -> bool:
        return name in self.registered_extensions

    @property
    def has_admin_extension(self) -> bool:
        return self.has_extension(ADMIN_EXTENSION)

    @property
    def has_mapping_extension(self) -> bool:
        return self.has_extension(MAPPING_EXTENSION)

    def is_class_loadable(self, class_name: str) -> bool:
        return self.model_registry.has_class(class_name)

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type


class ModelClassRegistryInterface(ABC):
    """
    Lookup of model classes by fully-qualified name.

    Replaces dynamic symbol resolution: a class "exists" for the extension
    loader exactly when it has been registered here.
    """

    @abstractmethod
    def get_class(self, key: str) -> Optional[Type]:
        pass

    @abstractmethod
    def has_class(self, key: str) -> bool:
        pass

    @abstractmethod
    def register_class(self, key: str, class_type: Type) -> None:
        pass

    @abstractmethod
    def register(self, class_type: Type) -> str:
        """Register a class under its fully-qualified name and return that name."""
        pass

    @abstractmethod
    def discover_classes(self, package_name: str, strict: bool = False) -> Dict[str, Type]:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass

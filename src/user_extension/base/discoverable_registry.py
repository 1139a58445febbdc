import importlib
import inspect
import logging
import pkgutil
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")  # registry key, e.g. a fully-qualified class name
T = TypeVar("T")  # registered class type


class DiscoverableRegistry(Generic[K, T], ABC):
    """
    Abstract base class for registries that map keys to classes.

    Provides lookup, registration and package auto-discovery. Subclasses
    decide which classes qualify, how keys are derived and how classes are
    validated.
    """

    def __init__(self) -> None:
        self._class_map: Dict[K, Type[T]] = {}

    def get_class(self, key: K) -> Optional[Type[T]]:
        """
        Get the class registered for a key.

        Args:
            key: The key to look up

        Returns:
            The class if registered, None otherwise
        """
        return self._class_map.get(key)

    def has_class(self, key: K) -> bool:
        return key in self._class_map

    def register_class(self, key: K, class_type: Type[T]) -> None:
        """
        Register a class for a key.

        Args:
            key: The key to register
            class_type: The class to register

        Raises:
            TypeError: If class validation fails
        """
        self._validate_class(class_type)

        existing = self._class_map.get(key)
        if existing is not None and existing is not class_type:
            self._handle_duplicate_registration(key, class_type)

        self._class_map[key] = class_type
        logger.debug(f"Registered class '{key}': {class_type}")

    def discover_classes(self, package_name: str, strict: bool = False) -> Dict[K, Type[T]]:
        """
        Discover and register qualifying classes from the modules of a package.

        Subpackages are not descended into.

        Args:
            package_name: Dotted name of the package to scan
            strict: Raise instead of logging when the package or one of its modules cannot be imported

        Returns:
            The full key to class mapping after discovery

        Raises:
            ImportError: In strict mode, if the package or a module fails to import
        """
        if not package_name or not package_name.strip():
            raise ValueError("Package name for class discovery must be a non-empty string.")

        logger.info(f"Starting class discovery from package: {package_name}")
        discovered_count = 0
        processed_modules = 0

        try:
            package = importlib.import_module(package_name)
        except ImportError as e:
            logger.error(f"Could not import package {package_name}: {e}")
            if strict:
                raise
            return self._class_map

        if not hasattr(package, "__path__"):
            message = f"{package_name} is a module, not a package"
            if strict:
                raise ImportError(message, name=package_name)
            logger.error(message)
            return self._class_map

        for _, module_name, is_pkg in pkgutil.iter_modules(package.__path__):
            if is_pkg:
                continue

            full_module_name = f"{package_name}.{module_name}"
            processed_modules += 1

            try:
                module = importlib.import_module(full_module_name)
            except ImportError as e:
                logger.warning(f"Failed to import module {full_module_name}: {e}")
                if strict:
                    raise
                continue

            for name, obj in inspect.getmembers(module, inspect.isclass):
                # Only classes defined in this module; imported ones are found in their own module.
                if obj.__module__ != full_module_name:
                    continue
                if self._should_discover_class(obj):
                    key = self._extract_key_from_class(obj)
                    logger.debug(f"Discovered class '{key}' ({name}) in module {full_module_name}")
                    self.register_class(key, obj)
                    discovered_count += 1

        logger.info(
            f"Class discovery complete. Found {discovered_count} classes across {processed_modules} modules"
        )
        return self._class_map

    def reset(self) -> None:
        """Clear all registered classes."""
        logger.debug(f"Resetting {self.__class__.__name__}")
        self._class_map.clear()

    def __len__(self) -> int:
        return len(self._class_map)

    @abstractmethod
    def _validate_class(self, class_type: Type[T]) -> None:
        """
        Validate that a class meets the requirements of this registry.

        Raises:
            TypeError: If the class doesn't meet requirements
        """
        pass

    @abstractmethod
    def _should_discover_class(self, class_obj: Any) -> bool:
        pass

    @abstractmethod
    def _extract_key_from_class(self, class_obj: Any) -> K:
        pass

    def _handle_duplicate_registration(self, key: K, new_class_type: Type[T]) -> None:
        """Log a warning when a key is rebound to a different class."""
        logger.warning(
            f"Overriding existing class for key '{key}': "
            f"{self._class_map[key].__name__} -> {new_class_type.__name__}"
        )

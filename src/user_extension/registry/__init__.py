from .model_class_registry import ModelClassRegistry, create_default_model_class_registry
from .model_class_registry_interface import ModelClassRegistryInterface

__all__ = [
    "ModelClassRegistry",
    "ModelClassRegistryInterface",
    "create_default_model_class_registry",
]

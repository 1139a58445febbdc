from .model_family_decorator import get_model_families_from_class, get_model_family_from_class, model_family

__all__ = ["model_family", "get_model_family_from_class", "get_model_families_from_class"]

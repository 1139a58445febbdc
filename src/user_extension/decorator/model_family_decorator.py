from typing import List, Optional, Tuple, Type, TypeVar

from user_extension.enum.model_role_enum import ModelRoleEnum
from user_extension.enum.storage_family_enum import StorageFamilyEnum

T = TypeVar("T")

ModelFamilyTag = Tuple[StorageFamilyEnum, ModelRoleEnum]


def model_family(storage_family: StorageFamilyEnum, role: ModelRoleEnum):
    """
    Tag a model base class with the storage family and role it belongs to.

    The tag is a plain class attribute, so every subclass inherits it. This
    is what lets the binding validator reject e.g. a document user class
    configured under the relational manager without importing the class
    hierarchy of the other family.
    """
    if storage_family is None:
        raise TypeError("storage_family cannot be None")

    if not isinstance(storage_family, StorageFamilyEnum):
        raise TypeError(f"storage_family must be a StorageFamilyEnum, got {type(storage_family)}")

    if not isinstance(role, ModelRoleEnum):
        raise TypeError(f"role must be a ModelRoleEnum, got {type(role)}")

    def decorator(cls: Type[T]) -> Type[T]:
        cls._model_family = (storage_family, role)
        return cls

    return decorator


def get_model_family_from_class(cls: type) -> Optional[ModelFamilyTag]:
    """
    Return the ``(storage_family, role)`` tag of a class.

    Untagged classes return None; they belong to no known family and can
    therefore never violate a family binding.
    """
    return getattr(cls, "_model_family", None)


def get_model_families_from_class(cls: type) -> List[ModelFamilyTag]:
    """
    Return every tag declared along the MRO of a class, nearest first.

    A class deriving from both family bases, or re-tagged below a base of
    another family, carries several tags; ``get_model_family_from_class``
    only sees the first one.
    """
    families: List[ModelFamilyTag] = []
    for klass in cls.__mro__:
        tag = vars(klass).get("_model_family")
        if tag is not None and tag not in families:
            families.append(tag)
    return families

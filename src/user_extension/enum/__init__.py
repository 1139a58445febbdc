from .manager_type_enum import ManagerTypeEnum
from .model_role_enum import ModelRoleEnum
from .storage_family_enum import StorageFamilyEnum
from .wiring_directive_enum import WiringDirectiveEnum

__all__ = [
    "ManagerTypeEnum",
    "ModelRoleEnum",
    "StorageFamilyEnum",
    "WiringDirectiveEnum",
]

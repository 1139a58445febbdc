from dataclasses import dataclass
from typing import Optional

from user_extension.decorator.model_family_decorator import model_family
from user_extension.enum.model_role_enum import ModelRoleEnum
from user_extension.enum.storage_family_enum import StorageFamilyEnum
from user_extension.model.base_group import BaseGroup


@model_family(StorageFamilyEnum.DOCUMENT, ModelRoleEnum.GROUP)
@dataclass
class BaseDocumentGroup(BaseGroup):
    id: Optional[str] = None

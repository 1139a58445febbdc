from dataclasses import dataclass
from typing import Optional

from user_extension.decorator.model_family_decorator import model_family
from user_extension.enum.model_role_enum import ModelRoleEnum
from user_extension.enum.storage_family_enum import StorageFamilyEnum
from user_extension.model.base_user import BaseUser


@model_family(StorageFamilyEnum.DOCUMENT, ModelRoleEnum.USER)
@dataclass
class BaseDocumentUser(BaseUser):
    """User persisted as a document."""

    # Document stores use string object ids.
    id: Optional[str] = None

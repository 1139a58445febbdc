from .base_group import BaseEntityGroup
from .base_user import BaseEntityUser

__all__ = ["BaseEntityUser", "BaseEntityGroup"]

from .base_group import BaseGroup
from .base_user import BaseUser

__all__ = ["BaseUser", "BaseGroup"]

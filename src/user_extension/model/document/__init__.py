from .base_group import BaseDocumentGroup
from .base_user import BaseDocumentUser

__all__ = ["BaseDocumentUser", "BaseDocumentGroup"]

from enum import Enum

from user_extension.enum.storage_family_enum import StorageFamilyEnum


class ManagerTypeEnum(Enum):
    """
    Enum for the persistence manager backing users and groups.
    """

    # Relational storage through the ORM mapping extension.
    ORM = "orm"

    # Document storage.
    MONGODB = "mongodb"

    @property
    def storage_family(self) -> StorageFamilyEnum:
        """Storage family this manager type persists into."""
        if self is ManagerTypeEnum.ORM:
            return StorageFamilyEnum.RELATIONAL
        return StorageFamilyEnum.DOCUMENT

    @property
    def foreign_storage_family(self) -> StorageFamilyEnum:
        """The family whose model classes must not be used with this manager type."""
        if self is ManagerTypeEnum.ORM:
            return StorageFamilyEnum.DOCUMENT
        return StorageFamilyEnum.RELATIONAL

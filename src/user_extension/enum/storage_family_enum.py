from enum import Enum


class StorageFamilyEnum(Enum):
    """
    Enum for the storage family a model class is mapped into.
    """

    RELATIONAL = "relational"
    DOCUMENT = "document"

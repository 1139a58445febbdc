from abc import ABC, abstractmethod
from typing import List

from user_extension.mapping.association_directive import ManyToManyAssociation


class MappingCollectorInterface(ABC):
    """Sink for association directives consumed by the ORM mapper."""

    @abstractmethod
    def add_association(self, association: ManyToManyAssociation) -> None:
        pass

    @abstractmethod
    def get_associations(self, source_class: str) -> List[ManyToManyAssociation]:
        pass

import logging
from collections import defaultdict
from typing import DefaultDict, List

from user_extension.mapping.association_directive import ManyToManyAssociation
from user_extension.mapping.mapping_collector_interface import MappingCollectorInterface

logger = logging.getLogger(__name__)


class InMemoryMappingCollector(MappingCollectorInterface):
    """Collects associations per source class in registration order."""

    def __init__(self) -> None:
        self._associations: DefaultDict[str, List[ManyToManyAssociation]] = defaultdict(list)

    def add_association(self, association: ManyToManyAssociation) -> None:
        self._associations[association.source_class].append(association)
        logger.debug(
            f"Collected {association.mapping_type} association "
            f"{association.source_class}.{association.field_name} -> {association.target_class}"
        )

    def get_associations(self, source_class: str) -> List[ManyToManyAssociation]:
        return list(self._associations.get(source_class, []))

    def __len__(self) -> int:
        return sum(len(items) for items in self._associations.values())

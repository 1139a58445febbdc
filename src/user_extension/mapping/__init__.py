from .association_directive import JoinColumn, ManyToManyAssociation
from .in_memory_mapping_collector import InMemoryMappingCollector
from .mapping_collector_interface import MappingCollectorInterface

__all__ = [
    "InMemoryMappingCollector",
    "JoinColumn",
    "ManyToManyAssociation",
    "MappingCollectorInterface",
]

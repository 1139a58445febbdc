from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class JoinColumn:
    """Foreign key column of a join table."""

    name: str
    referenced_column_name: str = "id"
    on_delete: str = "CASCADE"

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "referencedColumnName": self.referenced_column_name,
            "onDelete": self.on_delete,
        }


@dataclass(frozen=True)
class ManyToManyAssociation:
    """
    Description of a many-to-many association for the external ORM mapper.

    Only describes the mapping; registering it with the ORM is the mapper's job.
    """

    source_class: str
    field_name: str
    target_class: str
    join_table: str
    join_columns: List[JoinColumn] = field(default_factory=list)
    inverse_join_columns: List[JoinColumn] = field(default_factory=list)

    @property
    def mapping_type(self) -> str:
        return "many_to_many"

    def to_dict(self) -> Dict[str, Any]:
        """Options in the shape ORM mapping collectors expect."""
        return {
            "fieldName": self.field_name,
            "targetEntity": self.target_class,
            "joinTable": {
                "name": self.join_table,
                "joinColumns": [c.to_dict() for c in self.join_columns],
                "inverseJoinColumns": [c.to_dict() for c in self.inverse_join_columns],
            },
        }

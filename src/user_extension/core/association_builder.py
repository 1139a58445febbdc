import logging
from typing import Any, Mapping, Optional

from user_extension.core.extension_environment import ExtensionEnvironment
from user_extension.mapping.association_directive import JoinColumn, ManyToManyAssociation

logger = logging.getLogger(__name__)

GROUPS_FIELD = "groups"


def register_model_association(
    config: Mapping[str, Any], environment: ExtensionEnvironment
) -> Optional[ManyToManyAssociation]:
    """
    Describe the user <-> group many-to-many association.

    Returns None without raising when any configured model class cannot be
    resolved by name; the application is then expected to map the
    association itself.
    """
    for role, class_name in config["class"].items():
        if not environment.is_class_loadable(class_name):
            logger.debug(
                f"Model class '{class_name}' for role '{role}' is not loadable; "
                f"skipping user/group association mapping"
            )
            return None

    return ManyToManyAssociation(
        source_class=config["class"]["user"],
        field_name=GROUPS_FIELD,
        target_class=config["class"]["group"],
        join_table=config["table"]["user_group"],
        join_columns=[JoinColumn(name="user_id", referenced_column_name="id", on_delete="CASCADE")],
        inverse_join_columns=[JoinColumn(name="group_id", referenced_column_name="id", on_delete="CASCADE")],
    )

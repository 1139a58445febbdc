import logging
from typing import Any, Mapping

from user_extension.decorator.model_family_decorator import ModelFamilyTag, get_model_families_from_class
from user_extension.enum.manager_type_enum import ManagerTypeEnum
from user_extension.enum.model_role_enum import ModelRoleEnum
from user_extension.errors import InvalidManagerTypeError, InvalidModelBindingError
from user_extension.registry.model_class_registry_interface import ModelClassRegistryInterface

logger = logging.getLogger(__name__)

SUPPORTED_MANAGER_TYPES = tuple(m.value for m in ManagerTypeEnum)


def validate_manager_type(config: Mapping[str, Any]) -> None:
    """
    Raises:
        InvalidManagerTypeError: Unless manager_type is exactly "orm" or "mongodb"
    """
    manager_type = config.get("manager_type")
    if not isinstance(manager_type, str) or manager_type not in SUPPORTED_MANAGER_TYPES:
        raise InvalidManagerTypeError(f'Invalid manager type "{manager_type}".')


def validate_model_class_bindings(config: Mapping[str, Any], registry: ModelClassRegistryInterface) -> None:
    """
    Reject user/group classes belonging to the other manager family.

    Under ``orm`` the configured classes must not be (subclasses of) the
    document base models, under ``mongodb`` not the relational ones. The
    check is per role, so a document *group* class configured as the user
    class is not caught here.

    Raises:
        InvalidManagerTypeError: If the manager type is not supported
        InvalidModelBindingError: If a class belongs to the prohibited family
    """
    validate_manager_type(config)
    manager_type = ManagerTypeEnum(config["manager_type"])
    foreign_family = manager_type.foreign_storage_family

    for role in ModelRoleEnum:
        _prohibit_model_family(
            config["class"][role.value],
            (foreign_family, role),
            manager_type,
            registry,
        )


def _prohibit_model_family(
    model_class_name: str,
    prohibited: ModelFamilyTag,
    manager_type: ManagerTypeEnum,
    registry: ModelClassRegistryInterface,
) -> None:
    model_class = registry.get_class(model_class_name)
    if model_class is None:
        # Unknown classes have no family and cannot conflict.
        logger.debug(f"Model class '{model_class_name}' is not registered; skipping family check")
        return

    if prohibited in get_model_families_from_class(model_class):
        raise InvalidModelBindingError(
            f'Model class "{model_class_name}" does not correspond to manager type "{manager_type.value}".'
        )

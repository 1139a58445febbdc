"""Declarative selection of the wiring bundles to load.

Rules are evaluated top to bottom and their directives concatenated. The
order is significant: later bundles override services of earlier ones in
the host container.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Sequence, Tuple

from user_extension.core.extension_environment import MAPPING_EXTENSION, ExtensionEnvironment
from user_extension.core.model_binding_validator import validate_manager_type
from user_extension.enum.manager_type_enum import ManagerTypeEnum
from user_extension.enum.wiring_directive_enum import WiringDirectiveEnum
from user_extension.errors import UnregisteredDependencyError

logger = logging.getLogger(__name__)

Predicate = Callable[[ExtensionEnvironment, Mapping[str, Any]], bool]
DirectiveFactory = Callable[[Mapping[str, Any]], List[WiringDirectiveEnum]]

GENERAL_DIRECTIVES = (
    WiringDirectiveEnum.TWIG,
    WiringDirectiveEnum.ACTIONS,
    WiringDirectiveEnum.LISTENER,
    WiringDirectiveEnum.MAILER,
    WiringDirectiveEnum.FORM,
    WiringDirectiveEnum.SECURITY,
    WiringDirectiveEnum.UTIL,
    WiringDirectiveEnum.VALIDATOR,
)


@dataclass(frozen=True)
class WiringRule:
    name: str
    applies: Predicate
    directives: DirectiveFactory


def _always(environment: ExtensionEnvironment, config: Mapping[str, Any]) -> bool:
    return True


WIRING_RULES: Tuple[WiringRule, ...] = (
    WiringRule(
        "admin",
        lambda env, config: env.has_admin_extension,
        lambda config: [
            WiringDirectiveEnum.ADMIN,
            WiringDirectiveEnum.admin_for_manager_type(config["manager_type"]),
        ],
    ),
    WiringRule(
        "manager_type",
        _always,
        lambda config: [WiringDirectiveEnum.for_manager_type(config["manager_type"])],
    ),
    WiringRule("general", _always, lambda config: list(GENERAL_DIRECTIVES)),
    WiringRule(
        "listener_modern",
        lambda env, config: env.authenticator_manager_available,
        lambda config: [WiringDirectiveEnum.LISTENER_MODERN],
    ),
    WiringRule(
        "listener_legacy",
        lambda env, config: not env.authenticator_manager_available,
        lambda config: [WiringDirectiveEnum.LISTENER_LEGACY],
    ),
    WiringRule(
        "security_acl",
        lambda env, config: bool(config["security_acl"]),
        lambda config: [WiringDirectiveEnum.SECURITY_ACL],
    ),
)


def select_wiring_directives(
    environment: ExtensionEnvironment,
    config: Mapping[str, Any],
    rules: Sequence[WiringRule] = WIRING_RULES,
) -> List[WiringDirectiveEnum]:
    """
    Return the ordered wiring bundles for this environment and config.

    Raises:
        InvalidManagerTypeError: If the manager type is not supported
        UnregisteredDependencyError: If ``orm`` is selected without the mapping extension
    """
    validate_manager_type(config)

    if config["manager_type"] == ManagerTypeEnum.ORM.value and not environment.has_mapping_extension:
        raise UnregisteredDependencyError(
            f"You must register the '{MAPPING_EXTENSION}' extension to use the user management "
            f"extension with the orm manager type."
        )

    directives: List[WiringDirectiveEnum] = []
    for rule in rules:
        if rule.applies(environment, config):
            selected = rule.directives(config)
            logger.debug(f"Wiring rule '{rule.name}' selected {[d.value for d in selected]}")
            directives.extend(selected)

    return directives

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

PARAMETER_PREFIX = "user_management"
MAILER_ALIAS = f"{PARAMETER_PREFIX}.mailer"


@dataclass
class ParameterSet:
    """Flat container parameters plus service aliases."""

    parameters: Dict[str, Any] = field(default_factory=dict)
    aliases: Dict[str, str] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.parameters[key]

    def __contains__(self, key: object) -> bool:
        return key in self.parameters


def _param(name: str) -> str:
    return f"{PARAMETER_PREFIX}.{name}"


def derive_parameters(config: Mapping[str, Any]) -> ParameterSet:
    """
    Project a finalized config onto flat container parameters.

    Expects the impersonation settings to be normalized already. A missing
    key raises KeyError: the schema guarantees every key read here.
    """
    classes = config["class"]
    admin_user = config["admin"]["user"]
    admin_group = config["admin"]["group"]
    resetting = config["resetting"]
    email = resetting["email"]

    parameters = {
        _param("user.class"): classes["user"],
        _param("group.class"): classes["group"],
        _param("admin.user.class"): admin_user["class"],
        _param("admin.group.class"): admin_group["class"],
        _param("admin.user.translation_domain"): admin_user["translation"],
        _param("admin.group.translation_domain"): admin_group["translation"],
        _param("admin.user.controller"): admin_user["controller"],
        _param("admin.group.controller"): admin_group["controller"],
        _param("resetting.retry_ttl"): resetting["retry_ttl"],
        _param("resetting.token_ttl"): resetting["token_ttl"],
        _param("resetting.email.from_email"): {email["address"]: email["sender_name"]},
        _param("resetting.email.template"): email["template"],
        _param("default_avatar"): config["profile"]["default_avatar"],
        _param("impersonating"): config["impersonating"],
    }

    return ParameterSet(parameters=parameters, aliases={MAILER_ALIAS: config["mailer"]})

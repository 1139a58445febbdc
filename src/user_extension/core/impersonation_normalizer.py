import copy
from typing import Any, Dict, Mapping

from user_extension.errors import ConfigConflictError


def normalize_impersonation(config: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Resolve the two ways of configuring impersonation into one value.

    ``impersonating_route`` is shorthand for ``impersonating: {route: ...}``.
    The result's ``impersonating`` is either ``{"route": str, "parameters": dict}``
    or False when no route is configured. Keys holding None count as absent.
    The input mapping is not modified.

    Raises:
        ConfigConflictError: If both keys are set
    """
    result = copy.deepcopy(dict(config))
    impersonating = result.get("impersonating")
    impersonating_route = result.get("impersonating_route")

    if impersonating is not None and impersonating_route is not None:
        raise ConfigConflictError(
            "you can't have `impersonating` and `impersonating_route` keys defined at the same time"
        )

    if impersonating_route is not None:
        impersonating = {"route": impersonating_route, "parameters": {}}

    impersonating = dict(impersonating or {})
    if impersonating.get("parameters") is None:
        impersonating["parameters"] = {}

    if impersonating.get("route") is None:
        result["impersonating"] = False
    else:
        result["impersonating"] = impersonating

    return result

import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from user_extension.container.container_builder_interface import ContainerBuilderInterface
from user_extension.enum.wiring_directive_enum import WiringDirectiveEnum

logger = logging.getLogger(__name__)


class ParameterContainer(ContainerBuilderInterface):
    """
    In-memory container builder.

    Records everything the extension writes, in order, so it can be handed
    to the real framework container or inspected directly.
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None) -> None:
        self._extension_configs: Dict[str, List[Dict[str, Any]]] = {
            name: [] for name in (extensions or [])
        }
        self._parameters: Dict[str, Any] = {}
        self._aliases: Dict[str, str] = {}
        self._wiring: List[WiringDirectiveEnum] = []

    def has_extension(self, name: str) -> bool:
        return name in self._extension_configs

    def prepend_extension_config(self, name: str, config: Mapping[str, Any]) -> None:
        if not self.has_extension(name):
            raise KeyError(f"Extension '{name}' is not registered")
        self._extension_configs[name].insert(0, copy.deepcopy(dict(config)))

    def get_extension_config(self, name: str) -> List[Dict[str, Any]]:
        return list(self._extension_configs.get(name, []))

    def set_parameter(self, name: str, value: Any) -> None:
        self._parameters[name] = value

    def get_parameter(self, name: str) -> Any:
        try:
            return self._parameters[name]
        except KeyError:
            raise KeyError(f"You have requested a non-existent parameter \"{name}\"") from None

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    @property
    def parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def set_alias(self, alias: str, service_id: str) -> None:
        self._aliases[alias] = service_id

    def get_alias(self, alias: str) -> str:
        return self._aliases[alias]

    def load_wiring(self, directive: WiringDirectiveEnum) -> None:
        logger.debug(f"Loading wiring bundle '{directive.value}'")
        self._wiring.append(directive)

    def get_loaded_wiring(self) -> List[WiringDirectiveEnum]:
        return list(self._wiring)

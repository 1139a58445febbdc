from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping

from user_extension.enum.wiring_directive_enum import WiringDirectiveEnum


class ContainerBuilderInterface(ABC):
    """
    The part of the host framework's container the extension writes to.

    Implementations adapt a real DI container; the extension only ever sets
    parameters and aliases, requests wiring bundles and prepends config to
    other extensions.
    """

    @abstractmethod
    def has_extension(self, name: str) -> bool:
        pass

    @abstractmethod
    def prepend_extension_config(self, name: str, config: Mapping[str, Any]) -> None:
        pass

    @abstractmethod
    def get_extension_config(self, name: str) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def set_parameter(self, name: str, value: Any) -> None:
        pass

    @abstractmethod
    def get_parameter(self, name: str) -> Any:
        pass

    @abstractmethod
    def has_parameter(self, name: str) -> bool:
        pass

    @abstractmethod
    def set_alias(self, alias: str, service_id: str) -> None:
        pass

    @abstractmethod
    def get_alias(self, alias: str) -> str:
        pass

    @abstractmethod
    def load_wiring(self, directive: WiringDirectiveEnum) -> None:
        pass

    @abstractmethod
    def get_loaded_wiring(self) -> List[WiringDirectiveEnum]:
        pass

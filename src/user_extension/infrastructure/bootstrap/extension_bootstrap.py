"""
Bootstrap of the user management extension inside a host application.

Sequence: load configuration, configure logging, build the injector,
prepend config to companion extensions, load the extension.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from injector import Injector

from user_extension.config.application_config import ApplicationConfig
from user_extension.config.service_config_loader import ServiceConfigLoader
from user_extension.container.container_builder_interface import ContainerBuilderInterface
from user_extension.infrastructure.di.user_extension_module import UserExtensionModule
from user_extension.loader.user_extension_loader import UserExtensionLoader
from user_extension.logging.bootstrap_logging import bootstrap_logger_scope
from user_extension.logging.logging_setup import configure_logging
from user_extension.mapping.association_directive import ManyToManyAssociation
from user_extension.mapping.mapping_collector_interface import MappingCollectorInterface

logger = logging.getLogger(__name__)


@dataclass
class BootstrapResult:
    config: Dict[str, Any]
    container: ContainerBuilderInterface
    associations: List[ManyToManyAssociation]


class ExtensionBootstrap:
    """Runs the extension loading sequence once for a host application."""

    def __init__(self, service_name: str = "user-management") -> None:
        self.service_name = service_name
        self.injector: Optional[Injector] = None

    def start(self, app_config: Optional[ApplicationConfig] = None) -> BootstrapResult:
        """
        Load the extension.

        Args:
            app_config: Application config; read from CONFIG_DIR/STAGE when omitted

        Returns:
            The finalized configuration and everything written to the container
        """
        with bootstrap_logger_scope(self.service_name) as bootstrap_logger:
            if app_config is None:
                bootstrap_logger.info("Loading configuration...")
                app_config = ServiceConfigLoader.load_config(ApplicationConfig, self.service_name)

            configure_logging(self.service_name, app_config.logging)

        self.injector = Injector([UserExtensionModule(app_config.environment)])
        container = self.injector.get(ContainerBuilderInterface)  # type: ignore[type-abstract]
        extension_loader = self.injector.get(UserExtensionLoader)

        extension_loader.prepend(container)
        config = extension_loader.load([app_config.user_management.to_mapping()], container)

        collector = self.injector.get(MappingCollectorInterface)  # type: ignore[type-abstract]
        associations = collector.get_associations(config["class"]["user"])

        logger.info(
            f"{app_config.app_name} bootstrapped user management "
            f"(stage={app_config.stage}, associations={len(associations)})"
        )
        return BootstrapResult(config=config, container=container, associations=associations)

"""Entry point the host framework calls to load the user management extension."""
import logging
from typing import Any, Dict, Iterable, Mapping

from injector import inject

from user_extension.config.service_config_loader import ServiceConfigLoader
from user_extension.config.user_extension_config import UserExtensionConfig
from user_extension.container.container_builder_interface import ContainerBuilderInterface
from user_extension.core.association_builder import register_model_association
from user_extension.core.extension_environment import TEMPLATING_EXTENSION, ExtensionEnvironment
from user_extension.core.impersonation_normalizer import normalize_impersonation
from user_extension.core.model_binding_validator import validate_model_class_bindings
from user_extension.core.parameter_deriver import derive_parameters
from user_extension.core.wiring_selector import select_wiring_directives
from user_extension.enum.manager_type_enum import ManagerTypeEnum
from user_extension.errors import UserExtensionConfigError
from user_extension.mapping.mapping_collector_interface import MappingCollectorInterface

logger = logging.getLogger(__name__)

FORM_THEME = "@UserManagement/Form/form_admin_fields.html.twig"


class UserExtensionLoader:
    """
    Translates user extension configuration into container state.

    ``prepend`` runs before any extension is loaded and contributes config
    to other extensions; ``load`` processes this extension's own config.
    Any error is fatal and propagates to the caller unchanged.
    """

    @inject
    def __init__(
        self,
        environment: ExtensionEnvironment,
        mapping_collector: MappingCollectorInterface,
    ) -> None:
        self.environment = environment
        self.mapping_collector = mapping_collector

    def prepend(self, container: ContainerBuilderInterface) -> None:
        """Register the admin form theme with the templating extension, if present."""
        if container.has_extension(TEMPLATING_EXTENSION):
            container.prepend_extension_config(TEMPLATING_EXTENSION, {"form_themes": [FORM_THEME]})
            logger.debug(f"Prepended form theme {FORM_THEME} to '{TEMPLATING_EXTENSION}'")

    def process_configuration(self, configs: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
        """Merge and schema-validate config fragments, then normalize impersonation."""
        schema = ServiceConfigLoader.load_fragments(UserExtensionConfig, configs)
        return normalize_impersonation(schema.to_mapping())

    def load(self, configs: Iterable[Mapping[str, Any]], container: ContainerBuilderInterface) -> Dict[str, Any]:
        """
        Load the extension into the container.

        Args:
            configs: Configuration fragments, later ones overriding earlier ones
            container: Container receiving wiring bundles, parameters and aliases

        Returns:
            The finalized configuration

        Raises:
            UserExtensionConfigError: On any semantic configuration error
            pydantic.ValidationError: If the configuration does not match the schema
        """
        try:
            config = self.process_configuration(configs)
            logger.info(f"Loading user management extension (manager_type={config['manager_type']})")

            directives = select_wiring_directives(self.environment, config)
            for directive in directives:
                container.load_wiring(directive)

            validate_model_class_bindings(config, self.environment.model_registry)

            if config["manager_type"] == ManagerTypeEnum.ORM.value:
                self._register_mapping(config)
        except UserExtensionConfigError as e:
            logger.error(f"User management extension configuration is invalid: {e}")
            raise

        parameter_set = derive_parameters(config)
        for name, value in parameter_set.parameters.items():
            container.set_parameter(name, value)
        for alias, service_id in parameter_set.aliases.items():
            container.set_alias(alias, service_id)

        logger.info(
            f"User management extension loaded: {len(directives)} wiring bundles, "
            f"{len(parameter_set.parameters)} parameters"
        )
        return config

    def _register_mapping(self, config: Mapping[str, Any]) -> None:
        association = register_model_association(config, self.environment)
        if association is None:
            logger.info("Model classes not registered; user/group association left to the application")
            return
        self.mapping_collector.add_association(association)

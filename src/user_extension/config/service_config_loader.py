"""Configuration loader for application.yaml with stage overrides."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel

from user_extension.logging.bootstrap_logging import get_bootstrap_logger

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class ServiceConfigLoader:
    """
    Loads ``application.yaml`` + ``application-{STAGE}.yaml`` from ``CONFIG_DIR``.

    The stage file is deep-merged over the base file before validation, so a
    stage override only needs to carry the keys it changes.
    """

    @staticmethod
    def load_config(config_class: Type[T], service_name: Optional[str] = None) -> T:
        """
        Load and validate configuration for the current stage.

        Args:
            config_class: The configuration class to instantiate
            service_name: Name used for the bootstrap logger

        Returns:
            Instance of the specified configuration class

        Raises:
            ValueError: If CONFIG_DIR is not set
            FileNotFoundError: If the directory or application.yaml is missing
        """
        svc_name = service_name or config_class.__name__.lower()
        bootstrap_logger = get_bootstrap_logger(svc_name)

        config_dir = os.environ.get("CONFIG_DIR")
        if not config_dir:
            bootstrap_logger.error("CONFIG_DIR environment variable not set; cannot load configuration")
            raise ValueError(
                "CONFIG_DIR environment variable must be set. "
                "Example: CONFIG_DIR=/path/to/config or CONFIG_DIR=./config"
            )

        if not Path(config_dir).exists():
            bootstrap_logger.error("Configuration directory not found: %s", config_dir)
            raise FileNotFoundError(f"Configuration directory not found: {config_dir}")

        stage = os.environ.get("STAGE", "local")
        bootstrap_logger.info("Loading config (service=%s, stage=%s, dir=%s)", svc_name, stage, config_dir)

        base_file = ServiceConfigLoader._find_config_file(config_dir, "application")
        if not base_file:
            bootstrap_logger.error("Base configuration file application.yaml not found in %s", config_dir)
            raise FileNotFoundError(f"Base configuration file not found: application.yaml in {config_dir}")

        fragments = [ServiceConfigLoader.read_yaml(base_file)]

        stage_file = ServiceConfigLoader._find_config_file(config_dir, f"application-{stage}")
        if stage_file:
            bootstrap_logger.info("Applying stage override: %s", stage_file)
            fragments.append(ServiceConfigLoader.read_yaml(stage_file))
        elif stage != "local":
            bootstrap_logger.warning(
                "Stage override file application-%s.yaml not found (continuing with base)", stage
            )

        return config_class.model_validate(ServiceConfigLoader.merge_fragments(fragments))

    @staticmethod
    def load_fragments(config_class: Type[T], fragments: Iterable[Mapping[str, Any]]) -> T:
        """Merge configuration fragments in order and validate the result."""
        return config_class.model_validate(ServiceConfigLoader.merge_fragments(fragments))

    @staticmethod
    def merge_fragments(fragments: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
        """Deep-merge fragments; later fragments win on conflicting leaves."""
        merged: Dict[str, Any] = {}
        for fragment in fragments:
            if fragment:
                ServiceConfigLoader._deep_update(merged, fragment)
        return merged

    @staticmethod
    def read_yaml(path: str) -> Dict[str, Any]:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        logger.debug(f"Read configuration file: {path}")
        return data or {}

    @staticmethod
    def _deep_update(base_dict: Dict[str, Any], update_dict: Mapping[str, Any]) -> None:
        """Deep update base_dict with update_dict, modifying base_dict in place."""
        for key, value in update_dict.items():
            if isinstance(value, Mapping) and isinstance(base_dict.get(key), dict):
                ServiceConfigLoader._deep_update(base_dict[key], value)
            elif isinstance(value, Mapping):
                base_dict[key] = {}
                ServiceConfigLoader._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    @staticmethod
    def _find_config_file(config_dir: str, filename: str) -> Optional[str]:
        """Find a YAML config file, accepting both .yaml and .yml."""
        for extension in ("yaml", "yml"):
            file_path = os.path.join(config_dir, f"{filename}.{extension}")
            if Path(file_path).exists():
                return file_path
        return None

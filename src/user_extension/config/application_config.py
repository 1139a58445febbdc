from typing import List

from pydantic import Field

from user_extension.base.base_schema import BaseSchema
from user_extension.config.logging_config import LoggingConfig
from user_extension.config.user_extension_config import UserExtensionConfig


class ExtensionEnvironmentConfig(BaseSchema):
    """Which companion extensions the host application has registered."""

    registered_extensions: List[str] = Field(default_factory=lambda: ["doctrine", "twig"])
    authenticator_manager_available: bool = True
    discovery_packages: List[str] = Field(
        default_factory=list,
        description="Extra packages scanned for @model_family tagged model classes"
    )


class ApplicationConfig(BaseSchema):
    """Top-level application.yaml of a host application using the extension."""

    app_name: str
    version: str = "1.0.0"
    stage: str = "local"  # local | cicd | prod
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    environment: ExtensionEnvironmentConfig = Field(default_factory=ExtensionEnvironmentConfig)
    user_management: UserExtensionConfig

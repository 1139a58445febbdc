from .application_config import ApplicationConfig, ExtensionEnvironmentConfig
from .logging_config import LoggingConfig
from .service_config_loader import ServiceConfigLoader
from .user_extension_config import UserExtensionConfig

__all__ = [
    "ApplicationConfig",
    "ExtensionEnvironmentConfig",
    "LoggingConfig",
    "ServiceConfigLoader",
    "UserExtensionConfig",
]

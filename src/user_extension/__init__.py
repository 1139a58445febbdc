"""User management extension loader.

Turns the extension's configuration into container parameters, wiring
bundle selections and ORM association descriptions for a host framework.
"""

__version__ = "0.1.0"

from .errors import (
    ConfigConflictError,
    InvalidManagerTypeError,
    InvalidModelBindingError,
    ModelDiscoveryError,
    UnregisteredDependencyError,
    UserExtensionConfigError,
)

__all__ = [
    "ConfigConflictError",
    "InvalidManagerTypeError",
    "InvalidModelBindingError",
    "ModelDiscoveryError",
    "UnregisteredDependencyError",
    "UserExtensionConfigError",
]

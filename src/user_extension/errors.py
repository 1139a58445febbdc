"""Exceptions raised while loading the user management extension.

Every error here is fatal at bootstrap: configuration problems must halt
application startup, so none of them is retried or recovered from.
"""


class UserExtensionConfigError(Exception):
    """Base class for all user extension configuration errors."""


class ConfigConflictError(UserExtensionConfigError, RuntimeError):
    """Raised when mutually exclusive configuration keys are set together."""


class InvalidManagerTypeError(UserExtensionConfigError, ValueError):
    """Raised when the manager type is not one of the supported families."""


class InvalidModelBindingError(UserExtensionConfigError, ValueError):
    """Raised when a model class belongs to the wrong storage family."""


class UnregisteredDependencyError(UserExtensionConfigError, RuntimeError):
    """Raised when a required companion extension is not registered."""


class ModelDiscoveryError(UserExtensionConfigError, ImportError):
    """Raised when a configured model package cannot be imported."""

from .extension_bootstrap import BootstrapResult, ExtensionBootstrap

__all__ = ["BootstrapResult", "ExtensionBootstrap"]

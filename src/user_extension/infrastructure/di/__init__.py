from .user_extension_module import UserExtensionModule

__all__ = ["UserExtensionModule"]

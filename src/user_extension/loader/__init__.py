from .user_extension_loader import FORM_THEME, UserExtensionLoader

__all__ = ["FORM_THEME", "UserExtensionLoader"]

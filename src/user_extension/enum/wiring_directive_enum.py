from enum import Enum


class WiringDirectiveEnum(Enum):
    """
    Identifiers of the wiring bundles the container can load.
    """

    ADMIN = "admin"
    ADMIN_ORM = "admin_orm"
    ADMIN_MONGODB = "admin_mongodb"
    ORM = "orm"
    MONGODB = "mongodb"
    TWIG = "twig"
    ACTIONS = "actions"
    LISTENER = "listener"
    MAILER = "mailer"
    FORM = "form"
    SECURITY = "security"
    UTIL = "util"
    VALIDATOR = "validator"

    # Authenticator-manager based security listeners.
    LISTENER_MODERN = "listener_modern"

    # Listeners for firewalls without an authenticator manager.
    LISTENER_LEGACY = "listener_legacy"

    SECURITY_ACL = "security_acl"

    @classmethod
    def for_manager_type(cls, manager_type: str) -> "WiringDirectiveEnum":
        return cls(manager_type)

    @classmethod
    def admin_for_manager_type(cls, manager_type: str) -> "WiringDirectiveEnum":
        return cls(f"admin_{manager_type}")

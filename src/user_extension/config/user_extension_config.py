"""Configuration schema of the user management extension.

Mirrors the configuration tree the extension accepts. Validation here is
structural only (types, defaults, unknown keys); cross-field rules live in
``user_extension.core``.
"""
from typing import Dict, Optional

from pydantic import Field

from user_extension.base.base_schema import BaseSchema


class ModelClassConfig(BaseSchema):
    user: str = "user_extension.model.entity.base_user.BaseEntityUser"
    group: str = "user_extension.model.entity.base_group.BaseEntityGroup"


class UserAdminConfig(BaseSchema):
    # "class" is reserved in Python
    admin_class: str = Field(default="user_extension.admin.UserAdmin", alias="class")
    controller: str = "admin.default_controller"
    translation: str = "UserManagement"


class GroupAdminConfig(BaseSchema):
    admin_class: str = Field(default="user_extension.admin.GroupAdmin", alias="class")
    controller: str = "admin.default_controller"
    translation: str = "UserManagement"


class AdminConfig(BaseSchema):
    user: UserAdminConfig = Field(default_factory=UserAdminConfig)
    group: GroupAdminConfig = Field(default_factory=GroupAdminConfig)


class ResettingEmailConfig(BaseSchema):
    template: str = "@UserManagement/Admin/Security/Resetting/email.html.twig"
    address: str
    sender_name: str


class ResettingConfig(BaseSchema):
    retry_ttl: int = Field(default=7200, ge=0, description="Seconds before a new reset email may be sent")
    token_ttl: int = Field(default=86400, ge=0, description="Seconds a reset token stays valid")
    email: ResettingEmailConfig


class ImpersonatingConfig(BaseSchema):
    route: Optional[str] = None
    parameters: Optional[Dict[str, str]] = None


class TableConfig(BaseSchema):
    user_group: str = "user_management_user_group"


class ProfileConfig(BaseSchema):
    default_avatar: str = "bundles/user_management/default_avatar.png"


class UserExtensionConfig(BaseSchema):
    """Root of the user extension configuration tree."""

    security_acl: bool = False
    table: TableConfig = Field(default_factory=TableConfig)
    impersonating_route: Optional[str] = None
    impersonating: Optional[ImpersonatingConfig] = None
    # Kept as a plain string; the allowed values are checked by validate_manager_type.
    manager_type: str = "orm"
    classes: ModelClassConfig = Field(default_factory=ModelClassConfig, alias="class")
    admin: AdminConfig = Field(default_factory=AdminConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    mailer: str = "user_management.mailer.default"
    resetting: ResettingConfig

    def to_mapping(self) -> dict:
        """Dump to the plain nested mapping consumed by the normalizer (aliased key names such as "class")."""
        return self.model_dump(by_alias=True)

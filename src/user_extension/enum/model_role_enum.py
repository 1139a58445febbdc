from enum import Enum


class ModelRoleEnum(Enum):
    """
    Enum for the role a configured model class plays.

    The value matches the key used under the ``class`` configuration section.
    """

    USER = "user"
    GROUP = "group"

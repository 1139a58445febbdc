from dataclasses import dataclass


@dataclass
class BaseUser:
    """Storage-agnostic user model. Applications extend one of the family bases."""

    username: str
    email: str

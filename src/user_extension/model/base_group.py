from dataclasses import dataclass


@dataclass
class BaseGroup:
    name: str

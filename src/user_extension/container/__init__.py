from .container_builder_interface import ContainerBuilderInterface
from .parameter_container import ParameterContainer

__all__ = ["ContainerBuilderInterface", "ParameterContainer"]

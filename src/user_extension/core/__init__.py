from .association_builder import register_model_association
from .extension_environment import ExtensionEnvironment
from .impersonation_normalizer import normalize_impersonation
from .model_binding_validator import validate_manager_type, validate_model_class_bindings
from .parameter_deriver import ParameterSet, derive_parameters
from .wiring_selector import WIRING_RULES, WiringRule, select_wiring_directives

__all__ = [
    "ExtensionEnvironment",
    "ParameterSet",
    "WIRING_RULES",
    "WiringRule",
    "derive_parameters",
    "normalize_impersonation",
    "register_model_association",
    "select_wiring_directives",
    "validate_manager_type",
    "validate_model_class_bindings",
]

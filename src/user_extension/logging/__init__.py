from .bootstrap_logging import bootstrap_logger_scope, get_bootstrap_logger, retire_bootstrap_logger
from .logging_setup import configure_logging

__all__ = ["bootstrap_logger_scope", "configure_logging", "get_bootstrap_logger", "retire_bootstrap_logger"]

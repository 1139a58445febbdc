"""Logger for the startup window before ``configure_logging`` runs.

Configuration loading happens before the application's logging settings are
known, so messages from that phase go through a dedicated
``{service}.bootstrap`` logger with its own stderr handler. Once logging is
configured the handler is removed and the logger propagates again, so later
messages on it follow the configured handlers.
"""
import logging
from contextlib import contextmanager
from typing import Dict, Iterator

BOOTSTRAP_FORMAT = "%(asctime)s | startup | %(levelname)-8s | %(name)s | %(message)s"

# service name -> handler installed for it
_installed_handlers: Dict[str, logging.Handler] = {}


def _bootstrap_logger_name(service_name: str) -> str:
    return f"{service_name}.bootstrap"


def get_bootstrap_logger(service_name: str, level: int = logging.INFO) -> logging.Logger:
    """Return the startup logger of a service, installing its handler on first use."""
    startup_logger = logging.getLogger(_bootstrap_logger_name(service_name))
    if service_name not in _installed_handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(BOOTSTRAP_FORMAT))
        startup_logger.addHandler(handler)
        startup_logger.setLevel(level)
        startup_logger.propagate = False
        _installed_handlers[service_name] = handler
    return startup_logger


def retire_bootstrap_logger(service_name: str) -> None:
    """Detach the startup handler; handlers added by anyone else stay. No-op when nothing is installed."""
    handler = _installed_handlers.pop(service_name, None)
    if handler is None:
        return
    startup_logger = logging.getLogger(_bootstrap_logger_name(service_name))
    startup_logger.removeHandler(handler)
    handler.close()
    startup_logger.setLevel(logging.NOTSET)
    startup_logger.propagate = True


@contextmanager
def bootstrap_logger_scope(service_name: str) -> Iterator[logging.Logger]:
    """Yield the startup logger and retire it on exit, also when startup fails."""
    try:
        yield get_bootstrap_logger(service_name)
    finally:
        retire_bootstrap_logger(service_name)


__all__ = ["bootstrap_logger_scope", "get_bootstrap_logger", "retire_bootstrap_logger"]

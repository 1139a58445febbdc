import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

from user_extension.config.logging_config import LoggingConfig


def build_logging_dict(service_name: str, config: LoggingConfig) -> Dict[str, Any]:
    """Translate a LoggingConfig into a ``logging.config.dictConfig`` mapping."""
    level = config.level.upper()
    handlers: Dict[str, Any] = {}

    if config.console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }

    if config.file_path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "default",
            "filename": config.file_path,
            "maxBytes": config.max_bytes,
            "backupCount": config.backup_count,
            "mode": "a",
        }

    loggers: Dict[str, Any] = {
        service_name: {"level": level, "propagate": True},
        "user_extension": {"level": level, "propagate": True},
    }
    for logger_name, logger_level in config.third_party_loggers.items():
        loggers[logger_name] = {"level": logger_level.upper(), "propagate": True}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": config.format}},
        "handlers": handlers,
        "loggers": loggers,
        "root": {"level": "WARNING", "handlers": list(handlers)},
    }


def configure_logging(service_name: str, config: Optional[LoggingConfig] = None) -> None:
    """
    Configure logging for a host application of the extension.

    Args:
        service_name: Logger name of the application, also used in the startup message
        config: Logging settings; defaults apply when omitted
    """
    config = config or LoggingConfig()

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_dict(service_name, config))
    logging.getLogger(service_name).info(
        f"Logging configured for {service_name} (level={config.level.upper()})"
    )

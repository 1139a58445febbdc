from typing import Dict, Optional

from pydantic import Field

from user_extension.base.base_schema import BaseSchema


class LoggingConfig(BaseSchema):
    """Logging settings applied by ``configure_logging``."""

    level: str = Field(
        default="INFO",
        description="Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Log format string"
    )

    console_enabled: bool = Field(default=True, description="Enable console logging")

    file_path: Optional[str] = Field(
        default=None,
        description="Log file path; file logging is disabled when unset"
    )

    max_bytes: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes before rotation"
    )

    backup_count: int = Field(default=5, description="Number of rotated log files to keep")

    third_party_loggers: Dict[str, str] = Field(
        default_factory=dict,
        description="Level overrides per logger name, e.g. {'injector': 'WARNING'}"
    )

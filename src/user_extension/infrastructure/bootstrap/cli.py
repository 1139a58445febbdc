"""Command line entry point: load the extension from CONFIG_DIR and report the result."""
import logging
import sys

from user_extension.errors import UserExtensionConfigError
from user_extension.infrastructure.bootstrap.extension_bootstrap import ExtensionBootstrap

SERVICE_NAME = "user-management"

logger = logging.getLogger(SERVICE_NAME)


def main() -> int:
    """Returns a process exit code."""
    try:
        result = ExtensionBootstrap(SERVICE_NAME).start()
    except (UserExtensionConfigError, FileNotFoundError, ValueError) as e:
        logger.critical(f"Startup aborted: {e}")
        return 1

    for directive in result.container.get_loaded_wiring():
        logger.info(f"wiring: {directive.value}")
    for association in result.associations:
        logger.info(
            f"association: {association.source_class}.{association.field_name} -> {association.target_class}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())

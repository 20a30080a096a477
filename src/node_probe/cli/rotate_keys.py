"""node-rotate-keys: rotate the local node's session keys and print them."""

import logging
import sys

from node_probe.core.config import get_settings
from node_probe.core.exceptions import ProbeError
from node_probe.core.logging import configure_logging
from node_probe.services.keys import KeyRotator

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Rotate keys. Arguments are ignored."""
    configure_logging(get_settings())

    try:
        keys = KeyRotator().rotate()
    except ProbeError as e:
        logger.debug(f"Key rotation failed: {e!r}")
        print(f"Key rotation failed: {e}")
        return 1

    print(keys)
    return 0


if __name__ == "__main__":
    sys.exit(main())

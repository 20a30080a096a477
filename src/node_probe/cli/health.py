"""node-health: liveness/readiness probe for container health checks.

Usage: node-health <help|liveness|readiness>

Exits 0 when the requested probe passes and 1 otherwise. Failures print a
one-line diagnostic to stdout; success prints nothing.
"""

import logging
import sys

from node_probe.core.config import get_settings
from node_probe.core.exceptions import ProbeError
from node_probe.core.logging import configure_logging
from node_probe.services.health import CheckMode, HealthProber

logger = logging.getLogger(__name__)

USAGE = """\
Usage: node-health <command>

Commands:
  help       Show this message
  liveness   Check that the node RPC answers and metrics are served
  readiness  Like liveness, but also require the node to be synced
"""


def main(argv: list[str] | None = None) -> int:
    """Run the health probe.

    Args:
        argv: Command line arguments without the program name

    Returns:
        Process exit code
    """
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print(USAGE, end="")
        return 1

    command = args[0]
    if command == "help":
        print(USAGE, end="")
        return 0

    try:
        mode = CheckMode(command)
    except ValueError:
        print(USAGE, end="")
        return 1

    configure_logging(get_settings())

    try:
        HealthProber().probe(mode)
    except ProbeError as e:
        logger.debug(f"{mode.value} probe failed: {e!r}")
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

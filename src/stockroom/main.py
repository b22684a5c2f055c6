"""Stockroom order console.

Opens an interactive session over the seeded inventory and prints a usage
summary when the operator exits.

Usage:
    stockroom                 # installed console script
    python -m stockroom.main
"""

import sys
from uuid import uuid4

from stockroom.console import get_console
from stockroom.console.session import OrderSession
from stockroom.domain import stockroom
from stockroom.seed import seed_products
from stockroom.utils.logging import add_context, clear_context, configure_logging, get_logger


def main() -> int:
    configure_logging()
    logger = get_logger(__name__)

    stockroom.init()

    add_context(session_id=uuid4().hex[:12])
    try:
        with stockroom.domain_context():
            session = OrderSession(seed_products(), get_console())
            session.run()
    finally:
        logger.info("stockroom_closed")
        clear_context()

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Stockroom bounded context: products, categories and stock movements.

Products are seeded in memory at startup and mutated only through the
inventory service. No persistence is involved.
"""

import structlog
from protean.domain import Domain

stockroom = Domain(name="stockroom")

logger = structlog.get_logger(__name__)

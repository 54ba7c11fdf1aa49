"""Ordering bounded context: order placement and cancellation.

Orders are placed against an externally owned Inventory domain: availability
is verified synchronously, the Order aggregate is committed locally, and the
inventory owner is notified asynchronously (choreography via events).
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)

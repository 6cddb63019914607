"""Fallback from routing (neo4j://) to direct (bolt://) connections.

Routing addresses make the driver fetch a routing table before the
first query. In some network setups that discovery step fails even
though a direct connection to the same host works, so callers retry the
operation exactly once against the direct form of the address.
"""

import logging
import re
from typing import Callable, Optional, TypeVar

from vector_index.config import ConnectionConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The last pattern is the message used by the Python driver
ROUTING_ERROR_PATTERN = re.compile(
    r"Could not perform discovery"
    r"|No routing servers available"
    r"|Unable to retrieve routing information",
    re.IGNORECASE,
)

# Routing scheme -> direct scheme; the security suffix is preserved
DIRECT_SCHEMES = {
    "neo4j+ssc://": "bolt+ssc://",
    "neo4j+s://": "bolt+s://",
    "neo4j://": "bolt://",
}


def is_routing_address(address: str) -> bool:
    return isinstance(address, str) and address.lower().startswith(tuple(DIRECT_SCHEMES))


def is_routing_failure(error: BaseException) -> bool:
    """True if the error message matches a routing discovery failure."""
    return bool(ROUTING_ERROR_PATTERN.search(str(error)))


def should_retry_direct(error: BaseException, address: str) -> bool:
    """Decide whether a failed operation should be retried over bolt."""
    return is_routing_address(address) and is_routing_failure(error)


def to_direct_address(address: str) -> str:
    """Rewrite a routing address to its direct equivalent.

    ``neo4j+s://host`` becomes ``bolt+s://host``; non-routing addresses
    are returned unchanged. Scheme matching is case-insensitive, as in the driver.
    """
    lowered = address.lower()
    for routing, direct in DIRECT_SCHEMES.items():
        if lowered.startswith(routing):
            return direct + address[len(routing):]
    return address


def with_direct_fallback(
    config: ConnectionConfig,
    operation: Callable[[ConnectionConfig], T],
    log: Optional[logging.Logger] = None,
) -> T:
    """Run ``operation(config)``, retrying once over a direct address.

    The retry only happens for routing failures on routing addresses.
    A failure of the retry propagates unchanged.
    """
    log = log or logger
    try:
        return operation(config)
    except Exception as e:
        if not should_retry_direct(e, config.address):
            raise
        fallback = config.with_address(to_direct_address(config.address))
        log.warning(
            "Routing failed for %s (%s); retrying with direct connection %s",
            config.address, e, fallback.address,
        )
        return operation(fallback)

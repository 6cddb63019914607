"""Neo4j driver wrapper used by the catalog."""

import logging
from typing import Any, Dict, List, Optional

from neo4j import GraphDatabase

from vector_index.config import ConnectionConfig
from vector_index.connection import with_direct_fallback
from vector_index.queries import VERIFY_CONNECTIVITY

logger = logging.getLogger(__name__)


class Neo4jGraphClient:
    """Owns one driver for the duration of a logical operation.

    The driver is opened through the routing fallback, so ``config``
    after :meth:`connect` is the configuration that actually worked.
    Every statement runs in its own session, closed on all exit paths.
    Use as a context manager to guarantee the driver is closed.
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.config = config or ConnectionConfig.from_env()
        self.log = log or logger
        self.driver = None

    def __enter__(self) -> "Neo4jGraphClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _open(self, config: ConnectionConfig):
        driver = GraphDatabase.driver(
            config.address, auth=(config.username, config.password)
        )
        try:
            # Routing discovery happens here for neo4j:// addresses
            driver.execute_query(VERIFY_CONNECTIVITY, database_=config.database)
        except Exception:
            driver.close()
            raise
        self.config = config
        return driver

    def connect(self) -> "Neo4jGraphClient":
        if self.driver is None:
            self.driver = with_direct_fallback(self.config, self._open, self.log)
            self.log.info("Connected to Neo4j at %s", self.config.address)
        return self

    def close(self) -> None:
        if self.driver is not None:
            self.driver.close()
            self.driver = None

    def execute_query(
        self,
        cypher: str,
        params: Optional[Dict[str, Any]] = None,
        database: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Execute a Cypher statement and return results as list of dicts."""
        self.connect()
        with self.driver.session(database=database or self.config.database) as session:
            result = session.run(cypher, params or {})
            return [record.data() for record in result]

"""Connection and index defaults loaded from the environment."""

import os
from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_NEO4J_URI = "neo4j://localhost:7687"
DEFAULT_INDEX_NAME = "vector_index"
DEFAULT_NODE_LABEL = "Chunk"
DEFAULT_EMBEDDING_PROPERTY = "embedding"
DEFAULT_SIMILARITY_FUNCTION = "cosine"


@dataclass(frozen=True)
class ConnectionConfig:
    """How to reach the database.

    The scheme of ``address`` decides whether the driver performs
    routing discovery (``neo4j://``) or connects directly (``bolt://``).
    """

    address: str
    username: str
    password: str
    database: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ConnectionConfig":
        return cls(
            address=os.getenv("NEO4J_URI", DEFAULT_NEO4J_URI),
            username=os.getenv("NEO4J_USER", "neo4j"),
            password=os.getenv("NEO4J_PASSWORD", ""),
            database=os.getenv("NEO4J_DATABASE") or None,
        )

    def with_address(self, address: str) -> "ConnectionConfig":
        return replace(self, address=address)

    def __repr__(self) -> str:
        return (
            f"ConnectionConfig(address={self.address!r}, "
            f"username={self.username!r}, database={self.database!r})"
        )


@dataclass(frozen=True)
class IndexSettings:
    """Defaults used when reconciling the application's vector index."""

    index_name: str = DEFAULT_INDEX_NAME
    node_label: str = DEFAULT_NODE_LABEL
    embedding_property: str = DEFAULT_EMBEDDING_PROPERTY
    similarity_function: str = DEFAULT_SIMILARITY_FUNCTION

    @classmethod
    def from_env(cls) -> "IndexSettings":
        return cls(
            index_name=os.getenv("VECTOR_INDEX_NAME", DEFAULT_INDEX_NAME),
            node_label=os.getenv("VECTOR_INDEX_LABEL", DEFAULT_NODE_LABEL),
            embedding_property=os.getenv(
                "VECTOR_INDEX_PROPERTY", DEFAULT_EMBEDDING_PROPERTY
            ),
            similarity_function=os.getenv(
                "VECTOR_SIMILARITY_FUNCTION", DEFAULT_SIMILARITY_FUNCTION
            ),
        )

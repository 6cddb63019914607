"""MCP server exposing vector index management as agent tools."""

import json
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

mcp = FastMCP("vector-index")

# Lazy-initialized singletons
_manager = None
_embedder = None


def _get_manager():
    global _manager
    if _manager is None:
        from vector_index.manager import VectorIndexManager
        _manager = VectorIndexManager()
        logger.info("VectorIndexManager initialized for %s", _manager.config.address)
    return _manager


def _get_embedder():
    global _embedder
    if _embedder is None:
        from vector_index.embeddings import LocalEmbeddingService
        _embedder = LocalEmbeddingService()
    return _embedder


@mcp.tool()
def list_vector_indexes(database: Optional[str] = None) -> str:
    """List all vector indexes with label, property, dimension and state.

    Args:
        database: Optional database name (defaults to NEO4J_DATABASE)
    """
    indexes = _get_manager().list_indexes(database)
    return json.dumps([idx.to_dict() for idx in indexes], indent=2)


@mcp.tool()
def get_vector_index(index_name: str, database: Optional[str] = None) -> str:
    """Get the configuration of one vector index.

    Args:
        index_name: Name of the index
        database: Optional database name
    """
    return json.dumps(_get_manager().get_index_info(index_name, database).to_dict(), indent=2)


@mcp.tool()
def create_vector_index(
    index_name: str,
    node_label: str,
    embedding_property: str,
    dimension: int,
    similarity_function: str = "cosine",
    database: Optional[str] = None,
) -> str:
    """Create a new vector index. Fails if the name is already taken.

    Args:
        index_name: Name for the new index
        node_label: Label of the nodes to index
        embedding_property: Node property holding the embedding
        dimension: Vector dimension (1-2048)
        similarity_function: 'cosine' or 'euclidean'
        database: Optional database name
    """
    result = _get_manager().create_index(
        index_name, node_label, embedding_property, dimension,
        similarity_function, database,
    )
    return json.dumps(result, indent=2)


@mcp.tool()
def delete_vector_index(index_name: str, database: Optional[str] = None) -> str:
    """Delete an existing vector index. Fails if it does not exist.

    Args:
        index_name: Name of the index to delete
        database: Optional database name
    """
    return json.dumps(_get_manager().delete_index(index_name, database), indent=2)


@mcp.tool()
def ensure_vector_index(
    index_name: Optional[str] = None,
    node_label: Optional[str] = None,
    embedding_property: Optional[str] = None,
    similarity_function: Optional[str] = None,
    database: Optional[str] = None,
) -> str:
    """Make sure a vector index matching the local embedding model exists.

    If the named index exists with a different dimension, an index named
    <index_name>_<dimension> is used instead.

    Args:
        index_name: Base index name (defaults to VECTOR_INDEX_NAME)
        node_label: Label of the nodes to index
        embedding_property: Node property holding the embedding
        similarity_function: 'cosine' or 'euclidean' for a newly created index
        database: Optional database name

    Returns:
        JSON with the effective index name to use for vector search
    """
    effective = _get_manager().ensure_index(
        _get_embedder(),
        base_name=index_name,
        label=node_label,
        property_name=embedding_property,
        similarity=similarity_function,
        database=database,
    )
    return json.dumps({"index_name": effective}, indent=2)


if __name__ == "__main__":
    mcp.run()

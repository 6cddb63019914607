#!/usr/bin/env python3
"""Setup script for the application's Neo4j vector index.

Checks the connection (falling back from neo4j:// to bolt:// when routing
discovery fails), reconciles the configured index against the local
embedding model and reports the state of every vector index:
    python scripts/setup_vector_index.py
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

import logging

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def check_neo4j_connection(config):
    """Verify Neo4j is reachable and return the config that worked."""
    logger.info("Checking Neo4j connection to %s...", config.address)
    from vector_index.graph_client import Neo4jGraphClient

    try:
        with Neo4jGraphClient(config) as client:
            effective = client.config
    except Exception as e:
        logger.error("  Failed to connect to Neo4j: %s", e)
        logger.error("  Check NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD in .env")
        sys.exit(1)

    if effective.address != config.address:
        logger.warning(
            "  Routing discovery failed; connected directly via %s", effective.address
        )
        logger.warning("  Consider setting NEO4J_URI=%s", effective.address)
    else:
        logger.info("  Neo4j connection OK")
    return effective


def reconcile_index(manager, embedder):
    """Ensure the configured index matches the embedding dimension."""
    settings = manager.settings
    logger.info(
        "Reconciling vector index %s on :%s(%s)...",
        settings.index_name, settings.node_label, settings.embedding_property,
    )
    effective = manager.ensure_index(embedder)
    if effective != settings.index_name:
        logger.warning(
            "  %s has a different dimension; using %s instead", settings.index_name, effective
        )
        logger.warning("  Set VECTOR_INDEX_NAME=%s to query it directly", effective)
    else:
        logger.info("  Using %s", effective)
    return effective


def verify_vector_indexes(manager):
    """Check that vector indexes are online."""
    logger.info("Verifying vector indexes...")
    indexes = manager.list_indexes()

    for idx in indexes:
        status = "OK" if idx.state == "ONLINE" else f"WARNING: {idx.state}"
        logger.info(
            "  %s (:%s.%s, dim=%s, %s): %s",
            idx.name, idx.node_label, idx.property, idx.dimension,
            idx.similarity_function.value if idx.similarity_function else "?",
            status,
        )

    if not indexes:
        logger.warning("  No vector indexes found. Neo4j 5.11+ is required.")
    return indexes


def print_summary(config, effective_index):
    """Print configuration summary."""
    logger.info("")
    logger.info("=== Vector Index Configuration ===")
    logger.info("  NEO4J_URI:            %s", config.address)
    logger.info("  NEO4J_DATABASE:       %s", config.database or "(default)")
    logger.info("  EMBEDDING_MODEL:      %s", os.getenv("EMBEDDING_MODEL", "BAAI/bge-large-en-v1.5"))
    logger.info("  EMBEDDING_DEVICE:     %s", os.getenv("EMBEDDING_DEVICE", "auto"))
    logger.info("  EFFECTIVE INDEX:      %s", effective_index)
    logger.info("")
    logger.info("MCP server command:")
    logger.info("  python -m vector_index.mcp_server")


def main():
    from vector_index.config import ConnectionConfig
    from vector_index.embeddings import LocalEmbeddingService
    from vector_index.manager import VectorIndexManager

    logger.info("Setting up Neo4j vector index")
    logger.info("=" * 40)

    config = check_neo4j_connection(ConnectionConfig.from_env())
    manager = VectorIndexManager(config=config)
    effective = reconcile_index(manager, LocalEmbeddingService())
    verify_vector_indexes(manager)

    print_summary(config, effective)
    logger.info("Setup complete.")


if __name__ == "__main__":
    main()

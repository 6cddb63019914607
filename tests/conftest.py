"""
Shared fixtures for the vector index test suite

Provides an in-memory stand-in for the Neo4j index catalog, embedder
mocks and environment helpers. No live database is needed.
"""

import os
import re
import sys
import pytest
from unittest.mock import MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


CREATE_PATTERN = re.compile(
    r"CREATE VECTOR INDEX `([^`]+)` IF NOT EXISTS\s+"
    r"FOR \(n:`([^`]+)`\) ON \(n\.`([^`]+)`\)"
)
DIMENSION_PATTERN = re.compile(r"`vector\.dimensions`: (\d+)")
SIMILARITY_PATTERN = re.compile(r"`vector\.similarity_function`: '(\w+)'")
DROP_PATTERN = re.compile(r"DROP INDEX `([^`]+)` IF EXISTS")


class FakeCatalogGraph:
    """Graph client double that interprets the catalog statements.

    Mirrors Neo4j semantics for IF NOT EXISTS / IF EXISTS so that
    idempotence can be asserted on the resulting catalog state.
    """

    def __init__(self, indexes=None):
        self.indexes = {}
        for row in indexes or []:
            self.add_index(**row)
        self.statements = []
        self.closed = False

    def add_index(self, name, dimension, similarity_function="cosine",
                  node_label="Chunk", property="embedding", state="ONLINE"):
        self.indexes[name] = {
            "name": name,
            "state": state,
            "node_label": node_label,
            "property": property,
            "dimension": dimension,
            "similarity_function": similarity_function,
        }

    @property
    def writes(self):
        return [s for s, _, _ in self.statements if not s.strip().startswith("SHOW")]

    def execute_query(self, cypher, params=None, database=None):
        params = params or {}
        self.statements.append((cypher, params, database))
        text = cypher.strip()

        if text.startswith("SHOW VECTOR INDEXES"):
            rows = list(self.indexes.values())
            if "index_name" in params:
                rows = [r for r in rows if r["name"] == params["index_name"]]
            return [dict(r) for r in rows]

        if text.startswith("CREATE VECTOR INDEX"):
            name, label, prop = CREATE_PATTERN.search(text).groups()
            if name not in self.indexes:
                self.add_index(
                    name,
                    int(DIMENSION_PATTERN.search(text).group(1)),
                    SIMILARITY_PATTERN.search(text).group(1),
                    node_label=label,
                    property=prop,
                )
            return []

        if text.startswith("DROP INDEX"):
            self.indexes.pop(DROP_PATTERN.search(text).group(1), None)
            return []

        raise AssertionError(f"Unexpected statement: {text}")

    # Context manager protocol, as used by VectorIndexManager
    def __call__(self, config, log=None):
        self.config = config
        self.closed = False
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def make_graph():
    """Factory for fake catalogs seeded with index rows"""
    return FakeCatalogGraph


@pytest.fixture
def empty_graph():
    """Catalog with no vector indexes"""
    return FakeCatalogGraph()


@pytest.fixture
def docs_1536_graph():
    """Catalog holding a 'docs' index built for 1536-dimensional vectors"""
    return FakeCatalogGraph([{"name": "docs", "dimension": 1536}])


# =============================================================================
# Embedding Fixtures
# =============================================================================

@pytest.fixture
def embedder_768():
    """Embedder mock producing 768-dimensional vectors"""
    embedder = MagicMock()
    embedder.embed_batch.return_value = [[0.1] * 768]
    return embedder


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set mock Neo4j and index environment variables"""
    monkeypatch.setenv("NEO4J_URI", "neo4j://graph.local:7687")
    monkeypatch.setenv("NEO4J_USER", "neo4j")
    monkeypatch.setenv("NEO4J_PASSWORD", "test-password")
    monkeypatch.setenv("NEO4J_DATABASE", "vectors")
    monkeypatch.setenv("VECTOR_INDEX_NAME", "docs")
    monkeypatch.setenv("VECTOR_INDEX_LABEL", "Document")
    monkeypatch.setenv("VECTOR_INDEX_PROPERTY", "vec")
    monkeypatch.setenv("VECTOR_SIMILARITY_FUNCTION", "euclidean")

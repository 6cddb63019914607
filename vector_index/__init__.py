"""
Neo4j vector index management.

Checks, creates, drops and lists vector indexes, reconciles an index
against the dimension of an embedding model, and falls back from
routing to direct connections when discovery fails.
"""

from vector_index.catalog import VectorIndexCatalog
from vector_index.config import ConnectionConfig, IndexSettings
from vector_index.connection import should_retry_direct, to_direct_address, with_direct_fallback
from vector_index.errors import (
    CatalogError,
    EmbeddingProbeError,
    IndexAlreadyExistsError,
    IndexNotFoundError,
    ValidationError,
    VectorIndexError,
)
from vector_index.graph_client import Neo4jGraphClient
from vector_index.manager import VectorIndexManager
from vector_index.models import IndexDescriptor, IndexExistence, SimilarityFunction
from vector_index.reconciler import DimensionReconciler
from vector_index.validation import validate_dimension, validate_identifier

__all__ = [
    "CatalogError",
    "ConnectionConfig",
    "DimensionReconciler",
    "EmbeddingProbeError",
    "IndexAlreadyExistsError",
    "IndexDescriptor",
    "IndexExistence",
    "IndexNotFoundError",
    "IndexSettings",
    "Neo4jGraphClient",
    "SimilarityFunction",
    "ValidationError",
    "VectorIndexCatalog",
    "VectorIndexError",
    "VectorIndexManager",
    "should_retry_direct",
    "to_direct_address",
    "validate_dimension",
    "validate_identifier",
    "with_direct_fallback",
]

"""Make sure a vector index matching the embedding dimension exists.

An existing index whose dimension differs from the embeddings is never
reused. Instead an index named ``<base>_<dimension>`` is used, created
on demand. Both names are deterministic, and every create is
``IF NOT EXISTS``, so rerunning after a failure converges on the same
catalog state.

Two callers reconciling the same base name at the same time may both
see the index as missing and both issue the create; the statement is
idempotent, so only one index results.
"""

import logging
from typing import List, Optional, Protocol, Sequence, Union

from vector_index.catalog import VectorIndexCatalog
from vector_index.errors import EmbeddingProbeError
from vector_index.models import SimilarityFunction
from vector_index.validation import validate_identifier, validate_similarity_function

logger = logging.getLogger(__name__)

PROBE_TEXT = "test"


class Embedder(Protocol):
    def embed_batch(self, texts: Sequence[str]) -> List[List[float]]:
        ...


def detect_embedding_dimension(embedder: Embedder) -> int:
    """Embed a fixed probe string once and return the vector length."""
    vectors = embedder.embed_batch([PROBE_TEXT])
    if not vectors or not len(vectors[0]):
        raise EmbeddingProbeError("Embedding probe returned no vector")
    return len(vectors[0])


def suffixed_index_name(base_name: str, dimension: int) -> str:
    # Two different (base, dimension) pairs can format to the same name;
    # that collision is accepted, not guarded.
    return f"{base_name}_{dimension}"


class DimensionReconciler:
    def __init__(self, catalog: VectorIndexCatalog, log: Optional[logging.Logger] = None):
        self.catalog = catalog
        self.log = log or logger

    def ensure_index(
        self,
        base_name: str,
        label: str,
        property_name: str,
        embedder: Embedder,
        similarity: Union[str, SimilarityFunction] = SimilarityFunction.COSINE,
        database: Optional[str] = None,
    ) -> str:
        """Return the name of an index safe to use with ``embedder``.

        Errors from the probe or the catalog abort reconciliation and
        propagate unchanged.
        """
        validate_identifier(base_name, "index_name")
        validate_identifier(label, "node_label")
        validate_identifier(property_name, "property_name")
        similarity = validate_similarity_function(similarity)

        dimension = detect_embedding_dimension(embedder)
        existing = self.catalog.check_exists(base_name, database)

        if not existing.exists:
            self.log.info(
                "Vector index %s missing; creating with dimension %d",
                base_name, dimension,
            )
            self.catalog.create(
                base_name, label, property_name, dimension, similarity, database
            )
            return base_name

        # Indexes created without vector.dimensions report None
        if existing.dimension is None or existing.dimension == dimension:
            self.log.debug("Reusing vector index %s (dimension %s)", base_name, existing.dimension)
            return base_name

        suffixed = suffixed_index_name(base_name, dimension)
        validate_identifier(suffixed, "index_name")
        self.log.info(
            "Vector index %s has dimension %d, embeddings have %d; using %s",
            base_name, existing.dimension, dimension, suffixed,
        )
        if not self.catalog.check_exists(suffixed, database).exists:
            self.catalog.create(
                suffixed, label, property_name, dimension, similarity, database
            )
        return suffixed

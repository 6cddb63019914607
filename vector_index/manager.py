"""High-level vector index operations with strict existence checks."""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

from vector_index.catalog import VectorIndexCatalog
from vector_index.config import ConnectionConfig, IndexSettings
from vector_index.errors import IndexAlreadyExistsError, IndexNotFoundError
from vector_index.graph_client import Neo4jGraphClient
from vector_index.models import IndexDescriptor
from vector_index.reconciler import DimensionReconciler, Embedder
from vector_index.validation import validate_identifier, validate_similarity_function

logger = logging.getLogger(__name__)


class VectorIndexManager:
    """Runs each operation on its own driver, closed before returning.

    Unlike :class:`VectorIndexCatalog`, create and delete here refuse to
    act on an index that already exists or is missing.
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        settings: Optional[IndexSettings] = None,
        client_factory: Callable[..., Neo4jGraphClient] = Neo4jGraphClient,
        log: Optional[logging.Logger] = None,
    ):
        self.config = config or ConnectionConfig.from_env()
        self.settings = settings or IndexSettings.from_env()
        self.client_factory = client_factory
        self.log = log or logger

    @contextmanager
    def _catalog(self) -> Iterator[VectorIndexCatalog]:
        with self.client_factory(self.config, log=self.log) as client:
            yield VectorIndexCatalog(client, log=self.log)

    def _database(self, database: Optional[str]) -> Optional[str]:
        return database or self.config.database

    def list_indexes(self, database: Optional[str] = None) -> List[IndexDescriptor]:
        with self._catalog() as catalog:
            return catalog.list_indexes(self._database(database))

    def get_index_info(self, name: str, database: Optional[str] = None) -> IndexDescriptor:
        with self._catalog() as catalog:
            info = catalog.get_info(name, self._database(database))
        if info is None:
            raise IndexNotFoundError(name)
        return info

    def create_index(
        self,
        name: str,
        label: str,
        property_name: str,
        dimension: int,
        similarity: str = "cosine",
        database: Optional[str] = None,
    ) -> Dict[str, Any]:
        similarity = validate_similarity_function(similarity)
        database = self._database(database)
        with self._catalog() as catalog:
            existing = catalog.check_exists(name, database)
            if existing.exists:
                raise IndexAlreadyExistsError(name, existing.dimension)
            catalog.create(name, label, property_name, dimension, similarity, database)
        return {
            "success": True,
            "index_name": name,
            "node_label": label,
            "embedding_property": property_name,
            "dimension": dimension,
            "similarity_function": similarity.value,
        }

    def delete_index(self, name: str, database: Optional[str] = None) -> Dict[str, Any]:
        database = self._database(database)
        with self._catalog() as catalog:
            if not catalog.check_exists(name, database).exists:
                raise IndexNotFoundError(name)
            catalog.delete(name, database)
        return {"success": True, "deleted_index": name}

    def ensure_index(
        self,
        embedder: Embedder,
        base_name: Optional[str] = None,
        label: Optional[str] = None,
        property_name: Optional[str] = None,
        similarity: Optional[str] = None,
        database: Optional[str] = None,
    ) -> str:
        """Reconcile the index against ``embedder``; returns the name to use."""
        base_name = base_name or self.settings.index_name
        label = label or self.settings.node_label
        property_name = property_name or self.settings.embedding_property
        validate_identifier(base_name, "index_name")
        validate_identifier(label, "node_label")
        validate_identifier(property_name, "property_name")
        similarity = validate_similarity_function(
            similarity or self.settings.similarity_function
        )

        with self._catalog() as catalog:
            return DimensionReconciler(catalog, log=self.log).ensure_index(
                base_name, label, property_name, embedder, similarity,
                self._database(database),
            )

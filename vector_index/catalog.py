"""Index catalog client: existence checks, create, drop, list, describe."""

import logging
from typing import Any, Dict, List, Optional, Union

from vector_index import queries
from vector_index.errors import CatalogError
from vector_index.graph_client import Neo4jGraphClient
from vector_index.models import (
    MISSING_INDEX,
    IndexDescriptor,
    IndexExistence,
    SimilarityFunction,
)
from vector_index.validation import validate_similarity_function

logger = logging.getLogger(__name__)


def normalize_dimension(value: Any, index_name: str) -> Optional[int]:
    """Coerce the catalog's numeric dimension into a non-negative int.

    Indexes created without ``vector.dimensions`` report ``None``.
    """
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise CatalogError(
            f"Index {index_name!r} reports a non-numeric dimension: {value!r}"
        ) from None
    if number < 0 or not number.is_integer():
        raise CatalogError(
            f"Index {index_name!r} reports an invalid dimension: {value!r}"
        )
    return int(number)


def _parse_similarity(value: Any) -> Optional[SimilarityFunction]:
    if value is None:
        return None
    try:
        return SimilarityFunction(str(value).lower())
    except ValueError:
        raise CatalogError(f"Unknown similarity function: {value!r}") from None


def _to_descriptor(row: Dict[str, Any]) -> IndexDescriptor:
    name = row.get("name")
    return IndexDescriptor(
        name=name,
        node_label=row.get("node_label"),
        property=row.get("property"),
        dimension=normalize_dimension(row.get("dimension"), name),
        similarity_function=_parse_similarity(row.get("similarity_function")),
        state=row.get("state"),
    )


class VectorIndexCatalog:
    """Translates vector index lifecycle intents into catalog statements.

    Stateless apart from the client it talks through. Driver errors are
    surfaced unchanged; nothing here retries a statement.
    """

    def __init__(self, graph_client: Neo4jGraphClient, log: Optional[logging.Logger] = None):
        self.graph = graph_client
        self.log = log or logger

    def check_exists(self, name: str, database: Optional[str] = None) -> IndexExistence:
        rows = self.graph.execute_query(
            queries.CHECK_INDEX_EXISTS, {"index_name": name}, database
        )
        self.log.debug("Existence check for %s returned %d row(s)", name, len(rows))
        if not rows:
            return MISSING_INDEX
        row = rows[0]
        similarity = row.get("similarity_function")
        return IndexExistence(
            exists=True,
            dimension=normalize_dimension(row.get("dimension"), name),
            similarity_function=str(similarity) if similarity is not None else None,
        )

    def create(
        self,
        name: str,
        label: str,
        property_name: str,
        dimension: int,
        similarity: Union[str, SimilarityFunction] = SimilarityFunction.COSINE,
        database: Optional[str] = None,
    ) -> None:
        """Create the index if absent. Safe to repeat with the same arguments."""
        similarity = validate_similarity_function(similarity)
        statement = queries.create_vector_index(
            name, label, property_name, dimension, similarity
        )
        self.graph.execute_query(statement, database=database)
        self.log.info(
            "Ensured vector index %s on :%s(%s) dim=%d %s",
            name, label, property_name, dimension, similarity.value,
        )

    def delete(self, name: str, database: Optional[str] = None) -> None:
        """Drop the index if present."""
        statement = queries.drop_index(name)
        self.graph.execute_query(statement, database=database)
        self.log.info("Dropped vector index %s", name)

    def list_indexes(self, database: Optional[str] = None) -> List[IndexDescriptor]:
        """All vector indexes in the database, in no particular order."""
        rows = self.graph.execute_query(queries.LIST_VECTOR_INDEXES, database=database)
        return [_to_descriptor(row) for row in rows]

    def get_info(self, name: str, database: Optional[str] = None) -> Optional[IndexDescriptor]:
        rows = self.graph.execute_query(
            queries.GET_VECTOR_INDEX, {"index_name": name}, database
        )
        if not rows:
            return None
        return _to_descriptor(rows[0])

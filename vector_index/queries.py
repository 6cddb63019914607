"""Cypher statements for the vector index catalog.

Read queries take the index name as a parameter. Schema commands cannot,
so the builders below validate every identifier before interpolating it.
"""

from vector_index.models import SimilarityFunction
from vector_index.validation import (
    validate_dimension,
    validate_identifier,
    validate_similarity_function,
)

CHECK_INDEX_EXISTS = """
SHOW VECTOR INDEXES
YIELD name, options
WHERE name = $index_name
RETURN
    name,
    options.indexConfig['vector.dimensions'] AS dimension,
    options.indexConfig['vector.similarity_function'] AS similarity_function
"""

_DESCRIBE_COLUMNS = """
RETURN
    name,
    state,
    labelsOrTypes[0] AS node_label,
    properties[0] AS property,
    options.indexConfig['vector.dimensions'] AS dimension,
    options.indexConfig['vector.similarity_function'] AS similarity_function
"""

LIST_VECTOR_INDEXES = (
    """
SHOW VECTOR INDEXES
YIELD name, state, labelsOrTypes, properties, options"""
    + _DESCRIBE_COLUMNS
)

GET_VECTOR_INDEX = (
    """
SHOW VECTOR INDEXES
YIELD name, state, labelsOrTypes, properties, options
WHERE name = $index_name"""
    + _DESCRIBE_COLUMNS
)

VERIFY_CONNECTIVITY = "RETURN 1 AS ok"


def create_vector_index(
    index_name: str,
    node_label: str,
    property_name: str,
    dimension: int,
    similarity: SimilarityFunction,
) -> str:
    """Build an idempotent CREATE VECTOR INDEX statement."""
    validate_identifier(index_name, "index_name")
    validate_identifier(node_label, "node_label")
    validate_identifier(property_name, "property_name")
    validate_dimension(dimension)
    similarity = validate_similarity_function(similarity)

    return f"""
CREATE VECTOR INDEX `{index_name}` IF NOT EXISTS
FOR (n:`{node_label}`) ON (n.`{property_name}`)
OPTIONS {{indexConfig: {{
  `vector.dimensions`: {int(dimension)},
  `vector.similarity_function`: '{similarity.value}'
}}}}"""


def drop_index(index_name: str) -> str:
    """Build an idempotent DROP INDEX statement."""
    validate_identifier(index_name, "index_name")
    return f"DROP INDEX `{index_name}` IF EXISTS"

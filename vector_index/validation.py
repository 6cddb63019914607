"""Validation of identifiers and options embedded into catalog statements.

Neo4j does not accept parameters for index names, labels or property
names in schema commands, so those values are interpolated into the
statement text. Every code path that builds such a statement must run
the values through these checks first.
"""

import re
from numbers import Integral
from typing import Union

from vector_index.errors import ValidationError
from vector_index.models import SimilarityFunction

# Neo4j 5.11+ supports up to 2048 dimensions
MAX_VECTOR_DIMENSION = 2048
MAX_IDENTIFIER_LENGTH = 255

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def validate_identifier(identifier: str, role: str) -> None:
    """Validate an index name, label or property name.

    Raises:
        ValidationError: if the identifier is not a plain Cypher name.
    """
    if not isinstance(identifier, str):
        raise ValidationError(role, identifier, "Must be a string.")
    if "`" in identifier:
        raise ValidationError(role, identifier, "Backticks are not allowed.")
    if len(identifier) > MAX_IDENTIFIER_LENGTH:
        raise ValidationError(
            role, identifier,
            f"Must be {MAX_IDENTIFIER_LENGTH} characters or less.",
        )
    if not IDENTIFIER_PATTERN.fullmatch(identifier):
        raise ValidationError(
            role, identifier,
            "Must start with a letter, underscore, or dollar sign, "
            "and contain only letters, numbers, underscores, and dollar signs.",
        )


def validate_dimension(dimension: int) -> None:
    """Validate a vector dimension against the database limit."""
    if isinstance(dimension, bool) or not isinstance(dimension, Integral):
        raise ValidationError(
            "dimension", dimension, "Vector dimension must be an integer."
        )
    if dimension < 1 or dimension > MAX_VECTOR_DIMENSION:
        raise ValidationError(
            "dimension", dimension,
            f"Vector dimension must be between 1 and {MAX_VECTOR_DIMENSION}.",
        )


def validate_similarity_function(
    similarity: Union[str, SimilarityFunction]
) -> SimilarityFunction:
    """Return the matching SimilarityFunction or raise ValidationError."""
    if isinstance(similarity, SimilarityFunction):
        return similarity
    try:
        return SimilarityFunction(similarity)
    except ValueError:
        raise ValidationError(
            "similarity_function", similarity,
            "Must be 'cosine' or 'euclidean'.",
        ) from None

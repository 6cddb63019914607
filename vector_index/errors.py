"""Exceptions raised by the vector index management layer."""


class VectorIndexError(Exception):
    """Base exception for vector index operations."""


class ValidationError(VectorIndexError, ValueError):
    """Raised when an identifier, dimension or option fails validation.

    Always raised before any statement is sent to the database.
    """

    def __init__(self, role: str, value, reason: str):
        self.role = role
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {role}: {value!r}. {reason}")


class CatalogError(VectorIndexError):
    """Raised when a catalog row cannot be interpreted."""


class IndexNotFoundError(VectorIndexError, LookupError):
    """Raised when an operation requires an index that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Vector index "{name}" does not exist')


class IndexAlreadyExistsError(VectorIndexError):
    """Raised when a strict create targets an index name that is taken."""

    def __init__(self, name: str, dimension=None):
        self.name = name
        self.dimension = dimension
        super().__init__(
            f'Vector index "{name}" already exists with dimension {dimension}'
        )


class EmbeddingProbeError(VectorIndexError):
    """Raised when the embedding probe returns no usable vector."""

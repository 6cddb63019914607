"""Value types describing vector indexes as reported by the catalog."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class SimilarityFunction(str, Enum):
    COSINE = "cosine"
    EUCLIDEAN = "euclidean"


@dataclass(frozen=True)
class IndexDescriptor:
    """One vector index row from SHOW VECTOR INDEXES."""

    name: str
    node_label: str
    property: str
    dimension: Optional[int]
    similarity_function: Optional[SimilarityFunction]
    state: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.similarity_function is not None:
            data["similarity_function"] = self.similarity_function.value
        return data


@dataclass(frozen=True)
class IndexExistence:
    """Result of an existence probe.

    ``dimension`` and ``similarity_function`` are only populated when
    ``exists`` is true.
    """

    exists: bool
    dimension: Optional[int] = None
    similarity_function: Optional[str] = None


MISSING_INDEX = IndexExistence(exists=False)

"""Sentence-transformers embedder used to probe the embedding dimension."""

import logging
import os
from typing import List, Optional, Sequence

import torch
from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "BAAI/bge-large-en-v1.5"


def resolve_device() -> str:
    env_device = os.getenv("EMBEDDING_DEVICE")
    if env_device and env_device != "auto":
        return env_device
    if torch.cuda.is_available():
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return "mps"
    return "cpu"


class LocalEmbeddingService:
    """Embeds text locally; the model is loaded once per instance."""

    def __init__(self, model_name: Optional[str] = None, device: Optional[str] = None):
        self.model_name = model_name or os.getenv("EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL)
        self.device = device or resolve_device()
        logger.info("Loading embedding model %s on %s", self.model_name, self.device)
        self.model = SentenceTransformer(self.model_name, device=self.device)

    def embed_text(self, text: str) -> List[float]:
        embedding = self.model.encode(
            text, normalize_embeddings=True, show_progress_bar=False
        )
        return embedding.tolist()

    def embed_batch(self, texts: Sequence[str], batch_size: int = 32) -> List[List[float]]:
        """Embed multiple texts. Returns one float list per input."""
        embeddings = self.model.encode(
            list(texts),
            normalize_embeddings=True,
            batch_size=batch_size,
            show_progress_bar=False,
        )
        return embeddings.tolist()

"""Tests for the local embedding probe (model mocked)."""

from unittest.mock import MagicMock, patch

import numpy as np

from vector_index.reconciler import detect_embedding_dimension


class TestLocalEmbeddingServiceMocked:
    @patch("vector_index.embeddings.SentenceTransformer")
    def test_embed_batch(self, mock_st_class):
        mock_model = MagicMock()
        mock_model.encode.return_value = np.random.randn(3, 1024).astype(np.float32)
        mock_st_class.return_value = mock_model

        from vector_index.embeddings import LocalEmbeddingService
        svc = LocalEmbeddingService(model_name="test-model", device="cpu")
        result = svc.embed_batch(["a", "b", "c"])

        assert len(result) == 3
        assert all(len(v) == 1024 for v in result)
        mock_st_class.assert_called_once_with("test-model", device="cpu")

    @patch("vector_index.embeddings.SentenceTransformer")
    def test_embed_text(self, mock_st_class):
        mock_model = MagicMock()
        mock_model.encode.return_value = np.random.randn(384).astype(np.float32)
        mock_st_class.return_value = mock_model

        from vector_index.embeddings import LocalEmbeddingService
        result = LocalEmbeddingService(model_name="test-model", device="cpu").embed_text("hi")

        assert isinstance(result, list)
        assert len(result) == 384

    @patch("vector_index.embeddings.SentenceTransformer")
    def test_serves_as_dimension_probe(self, mock_st_class):
        mock_model = MagicMock()
        mock_model.encode.return_value = np.zeros((1, 768), dtype=np.float32)
        mock_st_class.return_value = mock_model

        from vector_index.embeddings import LocalEmbeddingService
        svc = LocalEmbeddingService(model_name="test-model", device="cpu")

        assert detect_embedding_dimension(svc) == 768


class TestResolveDevice:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EMBEDDING_DEVICE", "cpu")
        from vector_index.embeddings import resolve_device
        assert resolve_device() == "cpu"

    @patch("vector_index.embeddings.torch")
    def test_prefers_cuda(self, mock_torch, monkeypatch):
        monkeypatch.delenv("EMBEDDING_DEVICE", raising=False)
        mock_torch.cuda.is_available.return_value = True
        from vector_index.embeddings import resolve_device
        assert resolve_device() == "cuda"

    @patch("vector_index.embeddings.torch")
    def test_auto_falls_back_to_cpu(self, mock_torch, monkeypatch):
        monkeypatch.setenv("EMBEDDING_DEVICE", "auto")
        mock_torch.cuda.is_available.return_value = False
        mock_torch.backends.mps.is_available.return_value = False
        from vector_index.embeddings import resolve_device
        assert resolve_device() == "cpu"

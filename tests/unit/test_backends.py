"""Tests for persistence backends and the backend factory."""

import json
import pytest
from shared.domain.errors import CacheIOError, CacheParseError
from shared.factories.backend_factory import create_backend
from shared.implementations.backends import JsonBackend, YamlBackend


DOCUMENT = {
    "apiVersion": "qaengine.io/v1alpha1",
    "kind": "QACache",
    "metadata": {"name": "qacache"},
    "spec": {"solutions": [{"id": "q1", "type": "Input", "answer": "a"}]},
}


class TestBackendFactory:
    """Tests for backend factory."""
    
    def test_json_extension(self):
        """Test that .json selects the JSON backend, case-insensitively."""
        assert isinstance(create_backend("cache.json"), JsonBackend)
        assert isinstance(create_backend("/tmp/CACHE.JSON"), JsonBackend)
    
    def test_yaml_is_default(self):
        """Test that other extensions select the YAML backend."""
        assert isinstance(create_backend("cache.yaml"), YamlBackend)
        assert isinstance(create_backend("cache.yml"), YamlBackend)
        assert isinstance(create_backend("cache"), YamlBackend)


class TestYamlBackend:
    """Tests for YAML backend."""
    
    def test_write_then_read(self, tmp_path):
        """Test that a written document reads back equal."""
        path = str(tmp_path / "c.yaml")
        backend = YamlBackend()
        
        backend.write(path, DOCUMENT)
        
        assert backend.read(path) == DOCUMENT
    
    def test_write_preserves_key_order(self, tmp_path):
        """Test that keys are written in insertion order."""
        path = tmp_path / "c.yaml"
        
        YamlBackend().write(str(path), DOCUMENT)
        
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("apiVersion:")
        assert lines[1].startswith("kind:")
    
    def test_read_missing_file(self, tmp_path):
        """Test that a missing file raises CacheIOError."""
        with pytest.raises(CacheIOError):
            YamlBackend().read(str(tmp_path / "missing.yaml"))
    
    def test_read_invalid_yaml(self, tmp_path):
        """Test that invalid YAML raises CacheParseError."""
        path = tmp_path / "c.yaml"
        path.write_text("a: [b\n", encoding="utf-8")
        
        with pytest.raises(CacheParseError):
            YamlBackend().read(str(path))
    
    def test_read_empty_file(self, tmp_path):
        """Test that an empty file is not a document."""
        path = tmp_path / "c.yaml"
        path.write_text("", encoding="utf-8")
        
        with pytest.raises(CacheParseError):
            YamlBackend().read(str(path))
    
    def test_write_to_directory_fails(self, tmp_path):
        """Test that writing over a directory raises CacheIOError."""
        with pytest.raises(CacheIOError):
            YamlBackend().write(str(tmp_path), DOCUMENT)
    
    def test_write_unrepresentable_value(self, tmp_path):
        """Test that values YAML cannot represent raise CacheIOError."""
        with pytest.raises(CacheIOError):
            YamlBackend().write(str(tmp_path / "c.yaml"), {"answer": object()})

    def test_failed_write_keeps_previous_file(self, tmp_path):
        """Test that a failed write leaves the existing file and no temp file."""
        path = str(tmp_path / "c.yaml")
        backend = YamlBackend()
        backend.write(path, DOCUMENT)

        with pytest.raises(CacheIOError):
            backend.write(path, {"answer": object()})

        assert backend.read(path) == DOCUMENT
        assert [p.name for p in tmp_path.iterdir()] == ["c.yaml"]


class TestJsonBackend:
    """Tests for JSON backend."""
    
    def test_write_then_read(self, tmp_path):
        """Test that a written document reads back equal."""
        path = str(tmp_path / "c.json")
        backend = JsonBackend()
        
        backend.write(path, DOCUMENT)
        
        assert backend.read(path) == DOCUMENT
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == DOCUMENT
    
    def test_read_missing_file(self, tmp_path):
        """Test that a missing file raises CacheIOError."""
        with pytest.raises(CacheIOError):
            JsonBackend().read(str(tmp_path / "missing.json"))
    
    def test_read_invalid_json(self, tmp_path):
        """Test that invalid JSON raises CacheParseError."""
        path = tmp_path / "c.json"
        path.write_text("{not json", encoding="utf-8")
        
        with pytest.raises(CacheParseError):
            JsonBackend().read(str(path))
    
    def test_read_non_object(self, tmp_path):
        """Test that a top-level JSON array is rejected."""
        path = tmp_path / "c.json"
        path.write_text("[1, 2]", encoding="utf-8")
        
        with pytest.raises(CacheParseError):
            JsonBackend().read(str(path))
    
    def test_write_unserializable_value(self, tmp_path):
        """Test that unserializable values raise CacheIOError."""
        with pytest.raises(CacheIOError):
            JsonBackend().write(str(tmp_path / "c.json"), {"answer": object()})

    def test_failed_write_keeps_previous_file(self, tmp_path):
        """Test that a failed write leaves the existing file and no temp file."""
        path = str(tmp_path / "c.json")
        backend = JsonBackend()
        backend.write(path, DOCUMENT)

        with pytest.raises(CacheIOError):
            backend.write(path, {"answer": object()})

        assert backend.read(path) == DOCUMENT
        assert [p.name for p in tmp_path.iterdir()] == ["c.json"]

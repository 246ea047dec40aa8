"""test suite for configuration."""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gemdiff.config import SOURCES_KEY, add_source, get_configured_sources


class TestConfig:
    @pytest.fixture(autouse=True)
    def no_env(self, monkeypatch):
        monkeypatch.delenv(SOURCES_KEY, raising=False)

    def test_missing_file(self, tmp_path):
        assert get_configured_sources(tmp_path / "config") == []

    def test_read_sources(self, tmp_path):
        config_file = tmp_path / "config"
        config_file.write_text("# sources\nGEMDIFF_SOURCES=https://rubygems.org/, https://gems.example.com/\n")

        assert get_configured_sources(config_file) == ["https://rubygems.org/", "https://gems.example.com/"]

    def test_environment_wins(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config"
        config_file.write_text("GEMDIFF_SOURCES=https://rubygems.org/\n")
        monkeypatch.setenv(SOURCES_KEY, "https://mirror.example.com/")

        assert get_configured_sources(config_file) == ["https://mirror.example.com/"]

    def test_add_source_preserves_other_values(self, tmp_path):
        config_file = tmp_path / "nested" / "config"
        config_file.parent.mkdir()
        config_file.write_text("OTHER=1\nGEMDIFF_SOURCES=https://rubygems.org/\n")

        sources = add_source("https://gems.example.com/", config_file)

        assert sources == ["https://rubygems.org/", "https://gems.example.com/"]
        assert "OTHER=1" in config_file.read_text()
        assert get_configured_sources(config_file) == sources

    def test_add_source_is_idempotent(self, tmp_path):
        config_file = tmp_path / "config"
        add_source("https://gems.example.com/", config_file)
        add_source("https://gems.example.com/", config_file)

        assert get_configured_sources(config_file) == ["https://gems.example.com/"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

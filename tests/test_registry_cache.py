"""test suite for the gem archive cache."""
import pytest
from pathlib import Path
import tempfile
import shutil
import sys

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gemdiff.domain.models import PackageVersion
from gemdiff.registry.cache import GemCache


class TestGemCache:
    @pytest.fixture
    def temp_cache_dir(self):
        """create a temporary cache directory."""
        temp_dir = Path(tempfile.mkdtemp())
        yield temp_dir / "cache"
        # cleanup
        if temp_dir.exists():
            shutil.rmtree(temp_dir)

    @pytest.fixture
    def cache(self, temp_cache_dir):
        """create a GemCache instance."""
        return GemCache(temp_cache_dir)

    def test_cache_creation(self, temp_cache_dir):
        cache = GemCache(temp_cache_dir)
        assert cache.cache_dir == temp_cache_dir
        assert temp_cache_dir.exists()

    def test_path_for_is_deterministic(self, cache, temp_cache_dir):
        key = PackageVersion(name="foo", version="2.0.0")
        assert cache.path_for(key) == temp_cache_dir / "foo-2.0.0.gem"
        assert cache.path_for(key) == cache.path_for(PackageVersion(name="foo", version="2.0.0"))

    def test_path_for_does_not_create_files(self, cache, temp_cache_dir):
        cache.path_for(PackageVersion(name="foo", version="2.0.0"))
        assert list(temp_cache_dir.iterdir()) == []

    def test_has_not_present(self, cache):
        assert not cache.has(PackageVersion(name="nonexistent", version="1.0.0"))

    def test_has_present(self, cache):
        key = PackageVersion(name="foo", version="1.0.0")
        cache.path_for(key).write_bytes(b"fake archive")

        assert cache.has(key)
        assert not cache.has(PackageVersion(name="foo", version="1.0.1"))

    def test_entry_for(self, cache):
        key = PackageVersion(name="foo", version="1.0.0")
        entry = cache.entry_for(key)
        assert entry.key == key
        assert entry.path == cache.path_for(key)

    def test_archives(self, cache):
        for version in ("1.0.0", "2.0.0"):
            cache.path_for(PackageVersion(name="foo", version=version)).write_bytes(b"gem")
        (cache.cache_dir / "notes.txt").write_text("not an archive")

        assert [p.name for p in cache.archives()] == ["foo-1.0.0.gem", "foo-2.0.0.gem"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

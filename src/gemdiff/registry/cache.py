from pathlib import Path

from ..domain.models import CacheEntry, PackageVersion


class GemCache:
    """flat directory of archives named after their gem and version."""

    def __init__(self, cache_dir: Path):
        self.cache_dir = cache_dir
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: PackageVersion) -> Path:
        return self.cache_dir / key.archive_name

    def has(self, key: PackageVersion) -> bool:
        return self.path_for(key).exists()

    def entry_for(self, key: PackageVersion) -> CacheEntry:
        return CacheEntry(key=key, path=self.path_for(key))

    def archives(self) -> list:
        return sorted(p for p in self.cache_dir.glob("*.gem") if p.is_file())

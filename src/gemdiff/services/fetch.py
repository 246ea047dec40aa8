import shutil
from pathlib import Path
from typing import Optional

from ..domain.errors import CommandFailed, FetchError
from ..domain.models import PackageVersion, RegistrySource
from ..registry.cache import GemCache
from ..session import Session
from ..ui.logger import plain

FETCH_GEM_COMMAND = ["gem", "fetch"]


class GemFetcher:
    """downloads gem archives with `gem fetch` and keeps them in the cache."""

    def __init__(self, session: Session, cache: GemCache, work_dir: Optional[Path] = None):
        self.session = session
        self.cache = cache
        self.work_dir = work_dir

    def fetch(self, package_name: str, version: str, source: RegistrySource) -> Path:
        """
        return the cached archive for a gem version, downloading it first if needed.

        args:
            package_name: gem name
            version: exact version number
            source: gem source to download from

        raises:
            FetchError: if `gem fetch` fails or leaves no archive behind
        """
        key = PackageVersion(name=package_name, version=version)
        cache_path = self.cache.path_for(key)
        logger = self.session.logger

        if self.cache.has(key):
            logger.info(f"Using cached gem file for {plain(package_name)} version {plain(version)}.")
            return cache_path

        logger.info(f"Fetching {plain(package_name)} version {plain(version)}...")
        work_dir = self.work_dir or Path.cwd()
        command = [*FETCH_GEM_COMMAND, package_name, "-v", version, "-s", f"https://{source.host}"]
        try:
            self.session.runner.run(command, cwd=work_dir)
        except CommandFailed as e:
            raise FetchError(package_name, version, f"exit status {e.returncode}") from e

        # only a confirmed download is moved into the cache
        fetched = work_dir / key.archive_name
        if not fetched.exists():
            raise FetchError(package_name, version, f"{key.archive_name} not found")
        shutil.move(str(fetched), str(cache_path))
        logger.success(f"{plain(str(cache_path))} saved.")
        return cache_path

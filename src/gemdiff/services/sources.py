from pathlib import Path
from typing import Dict, List

from ..config import CONFIG_FILE, DEFAULT_SOURCE, get_configured_sources
from ..domain.models import RegistrySource
from ..session import Session

GEM_SOURCES_COMMAND = ["gem", "sources", "--list"]


class SourceCatalog:
    """gem sources the operator can choose from, keyed by host."""

    def __init__(self, session: Session, config_file: Path = CONFIG_FILE):
        self.session = session
        self.config_file = config_file

    def _rubygems_sources(self) -> List[str]:
        # rubygems prints a "*** CURRENT SOURCES ***" banner before the urls
        result = self.session.runner.run(GEM_SOURCES_COMMAND, strict=False, quiet=True)
        if result.failure:
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip().startswith("http")]

    def urls(self) -> List[str]:
        return get_configured_sources(self.config_file) or self._rubygems_sources() or [DEFAULT_SOURCE]

    def sources(self) -> Dict[str, RegistrySource]:
        catalog: Dict[str, RegistrySource] = {}
        for url in self.urls():
            try:
                source = RegistrySource.from_url(url)
            except ValueError:
                self.session.logger.warn(f"Ignoring invalid gem source {url!r}.")
                continue
            catalog.setdefault(source.host, source)
        return catalog

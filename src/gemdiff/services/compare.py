import sys
from pathlib import Path
from typing import Callable, List, Optional

import typer
from ..domain.errors import InvalidSource, PrerequisiteMissing, RegistryError
from ..domain.models import DiffJob, RegistrySource
from ..registry.client import RegistryClient
from ..registry.rubygems import RubyGemsRegistry
from ..session import Session
from ..ui.logger import plain
from ..ui.prompts import Prompter
from ..ui.selector import VersionSelector
from .diff import DiffRunner
from .fetch import GemFetcher
from .sources import SourceCatalog

DIFFOSCOPE_COMMAND = "type diffoscope"
DIFFOSCOPE_SUCCESS_MESSAGE = "diffoscope detected."


def diffoscope_install_hint() -> str:
    if sys.platform == "darwin":
        return "run `brew install diffoscope` to install diffoscope."
    return "install the `diffoscope` package with your system package manager, or run `pip install diffoscope`."


class CompareService:
    """
    walks the operator from a gem name to a diffoscope report.

    steps run strictly in order: prerequisite check, source, gem name,
    version listing, selection, two fetches, diff, offer to open. any
    GemDiffError ends the run.
    """

    def __init__(
        self,
        session: Session,
        fetcher: GemFetcher,
        diff_runner: DiffRunner,
        selector: VersionSelector,
        catalog: SourceCatalog,
        prompter: Prompter,
        registry_factory: Callable[[RegistrySource], RegistryClient] = RubyGemsRegistry,
        opener: Callable[[str], int] = typer.launch,
    ):
        self.session = session
        self.fetcher = fetcher
        self.diff_runner = diff_runner
        self.selector = selector
        self.catalog = catalog
        self.prompter = prompter
        self.registry_factory = registry_factory
        self.opener = opener

    def run(
        self,
        package_name: Optional[str] = None,
        source_host: Optional[str] = None,
        open_report: Optional[bool] = None,
    ) -> Path:
        self.ensure_diffoscope_installed()
        source = self.choose_source(source_host)
        package_name = package_name or self.ask_gem_name()
        versions = self.fetch_versions(source, package_name)
        version_a, version_b = self.selector.select_two(versions)
        path_a = self.fetcher.fetch(package_name, version_a, source)
        path_b = self.fetcher.fetch(package_name, version_b, source)
        job = DiffJob(
            name=package_name,
            version_a=version_a,
            version_b=version_b,
            path_a=path_a,
            path_b=path_b,
        )
        outfile = self.generate_diff(job)
        self.offer_open(outfile, open_report)
        return outfile

    def ensure_diffoscope_installed(self):
        check = self.session.runner.run(DIFFOSCOPE_COMMAND, strict=False, quiet=True)
        if check.failure:
            raise PrerequisiteMissing("diffoscope", diffoscope_install_hint())
        self.session.logger.success(DIFFOSCOPE_SUCCESS_MESSAGE)

    def choose_source(self, source_host: Optional[str] = None) -> RegistrySource:
        sources = self.catalog.sources()
        if source_host:
            try:
                requested = RegistrySource.from_url(source_host)
            except ValueError as e:
                raise InvalidSource(source_host) from e
            configured = sources.get(requested.host)
            # credentials given on the command line win over configured ones
            if configured is not None and requested.auth is None:
                return configured
            return requested
        hosts = list(sources.keys())
        if not hosts:
            raise RegistryError("*", "no gem sources configured")
        host = self.prompter.select("Choose a gem source", hosts, default=hosts[0])
        return sources[host]

    def ask_gem_name(self) -> str:
        name = ""
        while not name:
            name = self.prompter.ask("Enter the gem name")
        return name

    def fetch_versions(self, source: RegistrySource, package_name: str) -> List[str]:
        client = self.registry_factory(source)
        try:
            with self.session.progress.spinner(f"Fetching versions of {plain(package_name)} from {source.host}"):
                versions = client.list_versions(package_name)
        finally:
            client.close()
        if len(versions) < 2:
            raise RegistryError(package_name, f"{len(versions)} published version(s), two are needed")
        return versions

    def generate_diff(self, job: DiffJob) -> Path:
        outfile = self.diff_runner.run(job)
        link = f"[link={outfile.resolve().as_uri()}]{plain(str(outfile))}[/link]"
        self.session.logger.success(f"Diff generated at {link}")
        return outfile

    def offer_open(self, outfile: Path, open_report: Optional[bool] = None):
        if open_report is None:
            open_report = self.prompter.yes("Open diff?")
        if open_report:
            self.opener(str(outfile))

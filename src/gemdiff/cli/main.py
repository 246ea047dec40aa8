import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table

from ..config import CACHE_DIR, OUTPUT_DIR
from ..domain.errors import GemDiffError, PrerequisiteMissing, SelectionAborted
from ..registry.cache import GemCache
from ..services.compare import CompareService
from ..services.diff import DiffRunner
from ..services.fetch import GemFetcher
from ..services.sources import SourceCatalog
from ..session import Session
from ..ui.prompts import Prompter
from ..ui.selector import VersionSelector
from .sources_commands import app as sources_app

app = typer.Typer(help="Compare two published versions of a gem with diffoscope.")
console = Console()

app.add_typer(sources_app, name="sources", help="Manage the gem sources to choose from")


def get_compare_service(session: Session, output_dir: Path) -> CompareService:
    cache = GemCache(CACHE_DIR)
    return CompareService(
        session,
        fetcher=GemFetcher(session, cache),
        diff_runner=DiffRunner(session, output_dir=output_dir),
        selector=VersionSelector(session),
        catalog=SourceCatalog(session),
        prompter=Prompter(session),
    )


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    gem_name: Optional[str] = typer.Option(None, "--gem", "-g", help="Gem to compare; prompted for when omitted"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Gem source host or url"),
    output_dir: Path = typer.Option(OUTPUT_DIR, "--output-dir", "-o", help="Directory for the html report"),
    open_report: Optional[bool] = typer.Option(None, "--open/--no-open", help="Open the report without asking"),
):
    """pick two versions of a gem and diff their archives."""
    if ctx.invoked_subcommand is not None:
        return

    session = Session.create(console)
    service = get_compare_service(session, output_dir)
    try:
        service.run(gem_name, source_host=source, open_report=open_report)
    except SelectionAborted:
        raise typer.Exit(code=0)
    except PrerequisiteMissing as e:
        session.logger.fatal(str(e))
        session.logger.fatal(e.hint)
        raise typer.Exit(code=1)
    except GemDiffError as e:
        session.logger.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def cache():
    """list the gem archives kept in the local cache."""
    archives = GemCache(CACHE_DIR).archives()
    if not archives:
        console.print(f"[yellow]No cached gems in {CACHE_DIR}.[/yellow]")
        return

    table = Table(title=f"Cached gems ({CACHE_DIR})")
    table.add_column("Archive", style="cyan")
    table.add_column("Size", justify="right")
    for path in archives:
        table.add_row(path.name, f"{path.stat().st_size / 1024:.1f} KiB")
    console.print(table)


if __name__ == "__main__":
    app()

"""Mini README: Entry point CLI for toursync.

This script exposes a Typer CLI with two commands:

    * ``bulk`` - upload every tour folder (optionally one) and print a
      summary table; ``--watch`` re-runs the whole upload after the folder
      stops changing for two seconds.
    * ``download`` - rebuild a tour folder from a remote tour id.

Options fall back to ``TOURSYNC_*`` environment variables (see
``toursync.configuration``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from toursync.api import TourApiClient
from toursync.configuration import RunConfig, get_settings
from toursync.download import TourDownloader
from toursync.errors import FatalError, IssueLog
from toursync.logging_utils import configure_root_logger
from toursync.reporting import print_summary
from toursync.tours import UploadOrchestrator
from toursync.utils import DirectoryWatcher

cli = typer.Typer(help="Synchronise virtual tour folders with the remote tour service.")


def _build_client(run_config: RunConfig) -> TourApiClient:
    return TourApiClient(
        run_config.domain,
        run_config.api_key,
        timeout=run_config.request_timeout_seconds,
        media_timeout=run_config.media_timeout_seconds,
    )


def _run_bulk(run_config: RunConfig) -> None:
    issues = IssueLog()
    orchestrator = UploadOrchestrator(run_config, _build_client(run_config), issues=issues)
    batch = orchestrator.run()
    print_summary(batch)
    if len(issues):
        typer.echo(f"{len(issues)} item(s) were skipped; see the warnings above.")


@cli.command()
def bulk(
    domain: Optional[str] = typer.Option(None, help="Tour service domain."),
    api_key: Optional[str] = typer.Option(None, help="API key for the tour service."),
    folder: Optional[Path] = typer.Option(None, help="Folder containing one sub-folder per tour."),
    tour: Optional[str] = typer.Option(None, help="Only upload the tour folder with this name."),
    tour_type: Optional[str] = typer.Option(None, "--type", help="Default tour type: automotive or spaces."),
    watch: bool = typer.Option(False, "--watch", "-w", help="Re-upload whenever the folder changes."),
) -> None:
    """Create remote tours from the folder structure."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    try:
        run_config = settings.to_run_config(
            domain=domain,
            api_key=api_key,
            source_root=folder,
            tour_name=tour,
            tour_type=tour_type,
        )
        _run_bulk(run_config)
    except (FatalError, ValueError) as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    if watch:
        typer.echo("Watch mode enabled. Press Ctrl+C to exit.")

        def rerun() -> None:
            try:
                _run_bulk(run_config)
            except FatalError as error:
                typer.echo(f"Error: {error}", err=True)

        DirectoryWatcher(run_config.source_root, rerun).run_forever()


@cli.command()
def download(
    tour_id: str = typer.Argument(..., help="Id of the tour to download."),
    output: Path = typer.Option(Path("virtualTours"), help="Folder to write the tour into."),
    domain: Optional[str] = typer.Option(None, help="Tour service domain."),
    api_key: Optional[str] = typer.Option(None, help="API key for the tour service."),
) -> None:
    """Download a tour into the folder layout ``bulk`` expects."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    try:
        run_config = settings.to_run_config(domain=domain, api_key=api_key, source_root=output)
        downloader = TourDownloader(_build_client(run_config))
        result = downloader.fetch_and_download(tour_id, run_config.source_root)
    except FatalError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    typer.echo(f"Downloaded {result.total_files} files into {result.tour_path}")
    typer.echo("To re-upload this tour, run:")
    typer.echo(f"  toursync bulk --folder {run_config.source_root} --tour {result.tour_path.name}")


if __name__ == "__main__":
    cli()

"""Mini README: Terminal summary of a bulk run.

Structure:
    * render_results_table - one ``rich`` table row per tour.
    * print_summary - table plus success / failure counts and elapsed time.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from .tours import BatchResult


def _truncate(text: str, max_length: int) -> str:
    return text if len(text) <= max_length else text[: max_length - 3] + "..."


def format_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, remainder = divmod(int(seconds), 60)
    return f"{minutes}m {remainder}s"


def render_results_table(batch: BatchResult) -> Table:
    table = Table(title="Results", header_style="bold cyan")
    table.add_column("Tour")
    table.add_column("Status")
    table.add_column("Scenes", justify="right")
    table.add_column("Colors", justify="right")
    table.add_column("Floor plans", justify="right")
    table.add_column("Details")

    for result in batch.results:
        if result.success:
            table.add_row(
                _truncate(result.tour, 23),
                "[green]OK[/green]",
                str(result.scenes_count),
                str(result.colors_count),
                str(result.floor_plans_count),
                f"[dim]ID: {result.tour_id or ''}[/dim]",
            )
        else:
            table.add_row(
                _truncate(result.tour, 23),
                "[red]FAIL[/red]",
                "-",
                "-",
                "-",
                f"[red]{_truncate(result.error or 'Unknown error', 40)}[/red]",
            )
    return table


def print_summary(batch: BatchResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    if batch.results:
        console.print(render_results_table(batch))
    console.print(
        f"[green]Successful: {len(batch.successful)}[/green]  "
        f"[red]Failed: {len(batch.failed)}[/red]  "
        f"Time: {format_elapsed(batch.elapsed_seconds)}"
    )

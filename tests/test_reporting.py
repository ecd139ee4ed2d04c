"""Mini README: Tests for the terminal summary."""

from __future__ import annotations

from rich.console import Console

from toursync.reporting import format_elapsed, print_summary
from toursync.tours import BatchResult, TourResult


def test_format_elapsed() -> None:
    assert format_elapsed(0.25) == "250ms"
    assert format_elapsed(12.34) == "12.3s"
    assert format_elapsed(125) == "2m 5s"


def test_summary_lists_every_tour(tmp_path) -> None:
    batch = BatchResult(
        results=[
            TourResult(tour="DEMO", success=True, tour_id="tour-1", scenes_count=3, colors_count=2),
            TourResult.failure("LOFT", "Could not create tour 'LOFT'"),
        ],
        elapsed_seconds=4.0,
    )
    console = Console(record=True, width=140)

    print_summary(batch, console=console)

    output = console.export_text()
    assert "DEMO" in output and "tour-1" in output
    assert "FAIL" in output and "Could not create tour" in output
    assert "Successful: 1" in output
    assert "Failed: 1" in output
    assert "Time: 4.0s" in output


def test_result_as_dict_uses_camel_case() -> None:
    data = TourResult(tour="DEMO", success=True, tour_id="tour-1", floor_plans_count=1).as_dict()

    assert data["virtualTourId"] == "tour-1"
    assert data["floorPlansCount"] == 1
    assert data["tourType"] is None

"""
Comparison and reporting step of the repro.
"""

from __future__ import annotations

from typing import List, Sequence

from ..models.pixel_buffer import PixelBuffer
from ..services.comparison_service import ComparisonService
from ..services.report_service import ReportService


def get_mismatches(
    equalised_pixels: Sequence[PixelBuffer],
    *,
    comparison_service: ComparisonService = ComparisonService(),
) -> List[int]:
    """Number of differing pixels of every run against run 0."""
    return comparison_service.get_mismatches(equalised_pixels)


def report_mismatches(
    mismatches: Sequence[int],
    equalised_pixels: Sequence[PixelBuffer],
    *,
    report_service: ReportService | None = None,
) -> None:
    """Write one line per compared run to the console."""
    report_service = report_service or ReportService()
    report_service.report_mismatches(mismatches, equalised_pixels)

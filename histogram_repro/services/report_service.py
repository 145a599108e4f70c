import os
from typing import Sequence, Tuple

from dotenv import load_dotenv

from ..models.pixel_buffer import PixelBuffer

# Load environment variables
load_dotenv()

# 24-bit foreground colours
CORNFLOWER_BLUE = (100, 149, 237)
GREEN_YELLOW = (173, 255, 47)
FIREBRICK = (178, 34, 34)


def _paint(text: str, rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m{text}\033[0m"


class ReportService:
    """Console report of per-run mismatches."""

    def __init__(self, color: bool = None):
        if color is None:
            color = os.getenv("REPORT_COLOR", "1").strip().lower() not in ("0", "false", "no", "")
        self.color = color

    def _style(self, text: str, rgb: Tuple[int, int, int]) -> str:
        return _paint(text, rgb) if self.color else text

    def format_mismatch_line(self, run: int, mismatch_count: int, total_pixels: int) -> str:
        """
        Args:
            run: run number as shown to the user (1-based).
            mismatch_count: pixels differing from the reference.
            total_pixels: pixels in the run's buffer.
        """
        prefix = self._style(f"Run #{run}: ", CORNFLOWER_BLUE)
        if mismatch_count == 0:
            return prefix + self._style("identical to reference", GREEN_YELLOW)

        return prefix + self._style(
            f"{self._format_ratio(mismatch_count, total_pixels)} different pixels to reference", FIREBRICK
        )

    @staticmethod
    def _format_ratio(mismatch_count: int, total_pixels: int) -> str:
        # Rounding must never hide a difference or invent a full mismatch
        percent = f"{mismatch_count / total_pixels:.2%}"
        if percent == "0.00%":
            return "<0.01%"
        if percent == "100.00%" and mismatch_count < total_pixels:
            return ">99.99%"
        return percent

    def report_mismatches(self, mismatches: Sequence[int], buffers: Sequence[PixelBuffer]) -> None:
        """Print one line per non-reference run."""
        for i, mismatch_count in enumerate(mismatches):
            print(self.format_mismatch_line(i + 1, mismatch_count, len(buffers[i + 1])))

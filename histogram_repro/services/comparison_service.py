from typing import List, Sequence
import logging

import numpy as np

from ..models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class ComparisonService:
    """
    Counts pixels that differ from the reference run (run 0).
    Exact equality over all four channels, no tolerance.
    """

    @staticmethod
    def count_mismatches(reference: PixelBuffer, buffer: PixelBuffer) -> int:
        if len(buffer) != len(reference):
            raise ValueError(
                f"Cannot compare buffers of different length: "
                f"{len(buffer)} vs reference {len(reference)}"
            )
        differs = np.any(buffer.pixels != reference.pixels, axis=1)
        return int(np.count_nonzero(differs))

    def get_mismatches(self, buffers: Sequence[PixelBuffer]) -> List[int]:
        """
        Args:
            buffers: pixel data of every run, index-aligned with run number.

        Returns:
            (List[int]): mismatch count of runs 1..N-1 against run 0.
        """
        if not buffers:
            raise ValueError("Need at least one pixel buffer to compare")

        reference = buffers[0]
        mismatches = []
        for i, buffer in enumerate(buffers[1:], 1):
            mismatch_count = self.count_mismatches(reference, buffer)
            logger.debug(f"Run {i}: {mismatch_count}/{len(buffer)} pixels differ")
            mismatches.append(mismatch_count)

        return mismatches

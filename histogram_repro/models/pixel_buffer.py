from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class PixelBuffer:
    """
    Flat, row-major pixel data of one equalisation run.
    Index y * width + x holds the full RGBA pixel at (x, y).
    """
    pixels: np.ndarray  # Shape (width * height, 4), dtype uint8, read-only.
    width: int
    height: int

    def __post_init__(self):
        if self.pixels.shape[0] != self.width * self.height:
            raise ValueError(
                f"Pixel buffer holds {self.pixels.shape[0]} pixels, "
                f"expected {self.width}x{self.height}"
            )
        self.pixels.setflags(write=False)

    def __len__(self) -> int:
        return self.pixels.shape[0]

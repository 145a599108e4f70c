from pathlib import Path
from typing import Union
import logging

import cv2
import numpy as np
from PIL import Image as PILImage

from ..models.image import Image

logger = logging.getLogger(__name__)

# cv2.imread channel layout → RGBA
_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


class ImageDecodeError(ValueError):
    """The file exists but could not be decoded as an image."""


class ImageRepository:
    """
    Handles file I/O and pixel access for Image entities.
    Everything is RGBA, 8 bits per channel.
    """

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Image not found: {path}")

        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None:
            raise ImageDecodeError(f"Image unreadable: {path}")

        if arr.dtype == np.uint16:
            arr = (arr / 257).round().astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise ImageDecodeError(f"Unsupported pixel type {arr.dtype}: {path}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        if channels not in _TO_RGBA:
            raise ImageDecodeError(f"Unsupported channel count {channels}: {path}")

        rgba = cv2.cvtColor(arr, _TO_RGBA[channels])
        logger.debug(f"Decoded {path} ({rgba.shape[1]}x{rgba.shape[0]}, {channels} channel(s))")
        return Image(pixels=rgba, path=path)

    @staticmethod
    def clone(image: Image) -> Image:
        """Deep copy: the clone shares no pixel memory with *image*."""
        return Image(pixels=image.pixels.copy(), path=image.path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Cannot save an image without a path")
        PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(image.path)

    @staticmethod
    def set_pixels(image: Image, new_pixels: np.ndarray) -> None:
        image.pixels = new_pixels

    @staticmethod
    def retrieve_pixel_row(image: Image, y: int) -> np.ndarray:
        """Pixels of row *y*, shape (W, 4)."""
        return image.pixels[y]

    @staticmethod
    def ensure_dir(folder: Union[str, Path]) -> Path:
        folder = Path(folder)
        folder.mkdir(parents=True, exist_ok=True)
        return folder

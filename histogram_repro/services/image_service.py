from pathlib import Path
from typing import Union
import numpy as np
from ..models.image import Image
from ..models.pixel_buffer import PixelBuffer
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers and pixel extraction.  No equalisation logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path)

    def clone(self, image: Image) -> Image:
        return self.image_repository.clone(image)

    def update_pixels(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Business-level method to replace the current image pixels.
        """
        if new_pixels.shape != image.pixels.shape:
            raise ValueError(
                f"Pixel shape changed from {image.pixels.shape} to {new_pixels.shape}"
            )
        self.image_repository.set_pixels(image, new_pixels)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)

    def ensure_output_dir(self, folder: Union[str, Path]) -> Path:
        return self.image_repository.ensure_dir(folder)

    def extract_pixels(self, image: Image) -> PixelBuffer:
        """
        Copy every pixel row into one flat, row-major buffer
        (index = y * width + x).
        """
        width, height = image.width, image.height
        data = np.empty((width * height, 4), dtype=np.uint8)

        for y in range(height):
            row = self.image_repository.retrieve_pixel_row(image, y)
            data[y * width:(y + 1) * width] = row

        return PixelBuffer(pixels=data, width=width, height=height)

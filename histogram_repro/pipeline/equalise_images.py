"""
Equalisation step of the repro.
Decodes the sample image once and equalises RUN_COUNT independent clones of it.
"""

from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import List, Union

from dotenv import load_dotenv
from tqdm import trange

from ..models.pixel_buffer import PixelBuffer
from ..services.image_service import ImageService
from ..services.equalization_service import EqualizationService

# Load environment variables
load_dotenv()

OUTPUT_DIR = os.getenv("OUTPUT_DIR_PATH", "Output")

logger = logging.getLogger(__name__)


def equalise_images(
    sample_image: Union[str, Path],
    run_count: int,
    save_output: bool = False,
    *,
    image_service: ImageService = ImageService(),
    equalization_service: EqualizationService | None = None,
    output_dir: Union[str, Path] = OUTPUT_DIR,
) -> List[PixelBuffer]:
    """
    Equalise *run_count* clones of *sample_image*.

    Every clone goes through the same equalisation service, so any
    difference between the returned buffers comes from the transform itself.

    Args:
        sample_image: Path of the image to equalise.
        run_count: Number of independent runs (>= 1).
        save_output: Write each run to ``<output_dir>/Output-<i>.png``.
        image_service: Service for image I/O and pixel extraction.
        equalization_service: Anything with an ``equalize(image)`` method.
        output_dir: Directory for saved runs, created if missing.

    Returns:
        List[PixelBuffer]: pixel data of each run, index-aligned with run number.
    """
    if run_count < 1:
        raise ValueError(f"run_count must be at least 1, got {run_count}")

    equalization_service = equalization_service or EqualizationService()

    source = image_service.load(sample_image)
    logger.info(f"Loaded {sample_image} ({source.width}x{source.height})")

    if save_output:
        output_dir = image_service.ensure_output_dir(output_dir)

    target_pixels = []
    for i in trange(run_count, desc="equalise", ncols=70):
        target = image_service.clone(source)
        equalization_service.equalize(target)

        # Extract all pixel data from image
        target_pixels.append(image_service.extract_pixels(target))

        if not save_output:
            continue

        target.path = Path(output_dir) / f"Output-{i}.png"
        print(f"Writing histogram equalised output to {target.path}")
        image_service.save(target)

    return target_pixels

from __future__ import annotations

import os
import logging

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from ..models.equalization_options import EqualizationOptions, ADAPTIVE
from .image_service import ImageService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class EqualizationService:
    """
    Histogram equalisation of RGBA images, in place.
    *   Equalises the luminance (Y of YCrCb) channel, keeps chroma and alpha.
    *   The algorithm itself is OpenCV's; this class only calls it the
        same way every time.
    """

    def __init__(self, options: EqualizationOptions | None = None):
        self.options = options or EqualizationOptions.from_env()
        self.img_svc = ImageService()

        num_threads = os.getenv("OPENCV_NUM_THREADS")
        if num_threads:
            cv2.setNumThreads(int(num_threads))
            logger.info(f"OpenCV thread count set to {cv2.getNumThreads()}")

        logger.info(f"EqualizationService initialized with {self.options}")

    # ─── Public API ────────────────────────────────────────────────
    def equalize(self, img: Image) -> None:
        """Replace *img*'s pixels with their histogram-equalised version."""
        self.img_svc.update_pixels(img, self._equalize_pixels(img.pixels))

    # ─── Internal helpers ──────────────────────────────────────────
    def _equalize_luma(self, luma: np.ndarray) -> np.ndarray:
        if self.options.method == ADAPTIVE:
            # Fresh CLAHE per call, nothing carried between runs
            clahe = cv2.createCLAHE(
                clipLimit=self.options.clip_limit,
                tileGridSize=(self.options.tiles, self.options.tiles),
            )
            return clahe.apply(luma)
        return cv2.equalizeHist(luma)

    def _equalize_pixels(self, rgba: np.ndarray) -> np.ndarray:
        rgb = np.ascontiguousarray(rgba[:, :, :3])
        alpha = rgba[:, :, 3]

        ycrcb = cv2.cvtColor(rgb, cv2.COLOR_RGB2YCrCb)
        y, cr, cb = cv2.split(ycrcb)
        y_eq = self._equalize_luma(y)
        rgb_eq = cv2.cvtColor(cv2.merge([y_eq, cr, cb]), cv2.COLOR_YCrCb2RGB)

        return np.dstack([rgb_eq, alpha])

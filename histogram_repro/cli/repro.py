"""
Reproduces non-deterministic histogram equalisation between repeated runs.

Usage:
  histogram-repro       compare RUN_COUNT equalisation runs
  histogram-repro -s    also write every run to OUTPUT_DIR_PATH/Output-<i>.png
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Sequence, Union

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..pipeline.equalise_images import equalise_images
from ..pipeline.mismatch_report import get_mismatches, report_mismatches

SAMPLE_IMAGE = os.getenv("SAMPLE_IMAGE_PATH", "Resources/IMG_FD_001_IR105_20200912_001006.jpg")
OUTPUT_DIR = os.getenv("OUTPUT_DIR_PATH", "Output")
RUN_COUNT = int(os.getenv("RUN_COUNT", "5"))

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    sample_image: Union[str, Path] = SAMPLE_IMAGE,
    output_dir: Union[str, Path] = OUTPUT_DIR,
    run_count: int = RUN_COUNT,
) -> int:
    _configure_logging()

    args = sys.argv[1:] if argv is None else list(argv)
    save_output = len(args) > 0 and args[0] == "-s"

    try:
        # Apply histogram equalisation to image
        equalised_pixels = equalise_images(sample_image, run_count, save_output, output_dir=output_dir)
    except Exception:
        logger.exception(f"Equalisation of {sample_image} failed")
        raise

    # Compare every run against the first and report
    mismatches = get_mismatches(equalised_pixels)
    report_mismatches(mismatches, equalised_pixels)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Shared fixtures: small synthetic images written to tmp_path."""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest


def _low_contrast_bgr(height: int = 48, width: int = 64, seed: int = 7) -> np.ndarray:
    rng = np.random.default_rng(seed)
    gradient = np.linspace(90, 150, width, dtype=np.float32)[None, :, None]
    noise = rng.normal(0, 6, size=(height, width, 3))
    return np.clip(gradient + noise, 0, 255).astype(np.uint8)


@pytest.fixture
def sample_jpeg(tmp_path: Path) -> Path:
    path = tmp_path / "sample.jpg"
    assert cv2.imwrite(str(path), _low_contrast_bgr())
    return path


@pytest.fixture
def sample_png_rgba(tmp_path: Path) -> Path:
    bgr = _low_contrast_bgr(seed=11)
    alpha = np.full(bgr.shape[:2], 200, dtype=np.uint8)
    path = tmp_path / "sample_rgba.png"
    assert cv2.imwrite(str(path), np.dstack([bgr, alpha]))
    return path


@pytest.fixture(autouse=True)
def plain_report(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPORT_COLOR", "0")
    monkeypatch.delenv("OPENCV_NUM_THREADS", raising=False)


"""Decode, clone, row access and PNG encode."""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest

from histogram_repro.models.image import Image
from histogram_repro.repositories.image_repository import ImageDecodeError, ImageRepository


def test_load_jpeg_as_rgba(sample_jpeg: Path) -> None:
    img = ImageRepository.load(sample_jpeg)

    assert img.pixels.shape == (48, 64, 4)
    assert img.pixels.dtype == np.uint8
    assert (img.pixels[:, :, 3] == 255).all()
    assert img.path == sample_jpeg


def test_load_keeps_alpha_and_channel_order(sample_png_rgba: Path) -> None:
    img = ImageRepository.load(sample_png_rgba)
    bgra = cv2.imread(str(sample_png_rgba), cv2.IMREAD_UNCHANGED)

    assert (img.pixels[:, :, 3] == 200).all()
    assert np.array_equal(img.pixels[:, :, 0], bgra[:, :, 2])
    assert np.array_equal(img.pixels[:, :, 2], bgra[:, :, 0])


def test_load_grayscale(tmp_path: Path) -> None:
    path = tmp_path / "gray.png"
    cv2.imwrite(str(path), np.arange(256, dtype=np.uint8).reshape(16, 16))

    img = ImageRepository.load(path)

    assert img.pixels.shape == (16, 16, 4)
    assert np.array_equal(img.pixels[:, :, 0], img.pixels[:, :, 1])


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ImageRepository.load(tmp_path / "nope.jpg")


def test_load_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"definitely not a jpeg")

    with pytest.raises(ImageDecodeError):
        ImageRepository.load(path)


def test_clone_is_independent(sample_jpeg: Path) -> None:
    source = ImageRepository.load(sample_jpeg)
    before = source.pixels.copy()

    clone = ImageRepository.clone(source)
    clone.pixels[:] = 0

    assert np.array_equal(source.pixels, before)
    assert not np.shares_memory(source.pixels, clone.pixels)


def test_save_png_is_lossless(sample_png_rgba: Path, tmp_path: Path) -> None:
    img = ImageRepository.load(sample_png_rgba)
    img.path = tmp_path / "copy.png"

    ImageRepository.save(img)

    assert np.array_equal(ImageRepository.load(img.path).pixels, img.pixels)


def test_save_without_path() -> None:
    img = Image(np.zeros((2, 2, 4), dtype=np.uint8))

    with pytest.raises(ValueError):
        ImageRepository.save(img)


def test_ensure_dir_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"

    ImageRepository.ensure_dir(target)
    ImageRepository.ensure_dir(target)

    assert target.is_dir()

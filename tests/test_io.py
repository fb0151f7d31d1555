import dataclasses
from pathlib import Path

import cv2
import numpy as np
import pytest

from pixfilter.helpers import (
    DecodeError, EncodeError, FilterConfig, InputNotFoundError, PixfilterError,
    load_image_rgb, save_image_rgb,
)

from pixfilter.geometry import normalize_rotation

from conftest import random_rgb, read_rgb, write_rgb


def test_load_returns_rgb_order(tmp_path: Path) -> None:
    img = np.zeros((2, 3, 3), dtype=np.uint8)
    img[..., 0] = 200  # red
    write_rgb(tmp_path / "red.png", img)
    loaded = load_image_rgb(tmp_path / "red.png")
    assert loaded.shape == (2, 3, 3)
    assert loaded.dtype == np.uint8
    assert loaded[0, 0].tolist() == [200, 0, 0]


def test_missing_input(tmp_path: Path) -> None:
    with pytest.raises(InputNotFoundError) as exc:
        load_image_rgb(tmp_path / "nope.png")
    assert isinstance(exc.value, FileNotFoundError)
    assert isinstance(exc.value, PixfilterError)


def test_undecodable_input(tmp_path: Path) -> None:
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError):
        load_image_rgb(bad)


def test_alpha_is_dropped(tmp_path: Path) -> None:
    bgra = np.zeros((4, 4, 4), dtype=np.uint8)
    bgra[..., 2] = 90   # red in BGRA
    bgra[..., 3] = 10
    assert cv2.imwrite(str(tmp_path / "alpha.png"), bgra)
    loaded = load_image_rgb(tmp_path / "alpha.png")
    assert loaded.shape == (4, 4, 3)
    assert loaded[0, 0].tolist() == [90, 0, 0]


def test_16_bit_input_is_scaled_to_8_bit(tmp_path: Path) -> None:
    deep = np.zeros((2, 2, 3), dtype=np.uint16)
    deep[0, 0] = 65535
    assert cv2.imwrite(str(tmp_path / "deep.png"), deep)
    loaded = load_image_rgb(tmp_path / "deep.png")
    assert loaded.dtype == np.uint8
    assert loaded[0, 0].tolist() == [255, 255, 255]
    assert loaded[1, 1].tolist() == [0, 0, 0]


def test_save_is_lossless_for_png_and_overwrites(tmp_path: Path) -> None:
    dst = tmp_path / "out.png"
    save_image_rgb(dst, np.zeros((3, 3, 3), dtype=np.uint8))
    img = random_rgb(9, 5)
    save_image_rgb(dst, img)
    assert np.array_equal(read_rgb(dst), img)


def test_save_creates_parent_dirs(tmp_path: Path) -> None:
    dst = tmp_path / "a" / "b" / "out.bmp"
    save_image_rgb(dst, random_rgb(2, 2))
    assert dst.exists()


def test_unknown_extension(tmp_path: Path) -> None:
    with pytest.raises(EncodeError):
        save_image_rgb(tmp_path / "out.notaformat", random_rgb(2, 2))
    assert not (tmp_path / "out.notaformat").exists()


def test_empty_image_cannot_be_encoded(tmp_path: Path) -> None:
    with pytest.raises(EncodeError):
        save_image_rgb(tmp_path / "empty.png", np.zeros((0, 0, 3), dtype=np.uint8))


def test_filter_config_rotation_fallback() -> None:
    assert FilterConfig(rotate=90).rotation == 90
    assert FilterConfig(rotate=45).rotation == 0
    assert FilterConfig(rotate=45).is_identity
    assert not FilterConfig(brightness=-1).is_identity
    with pytest.raises(dataclasses.FrozenInstanceError):
        FilterConfig().grayscale = True


def test_output_under_a_regular_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")
    with pytest.raises(EncodeError):
        save_image_rgb(blocker / "out.png", random_rgb(2, 2))


@pytest.mark.parametrize("degrees", [0, 45, 90, 180, 270, 360])
def test_config_rotation_agrees_with_geometry(degrees: int) -> None:
    assert FilterConfig(rotate=degrees).rotation == normalize_rotation(degrees)

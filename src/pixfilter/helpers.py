from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import cv2
import numpy as np
import os


ROTATIONS: Tuple[int, ...] = (0, 90, 180, 270)


def effective_rotation(degrees: int) -> int:
    """Angles outside ROTATIONS act as 0."""
    return degrees if degrees in ROTATIONS else 0


# Config dataclasses

@dataclass(frozen=True)
class FilterConfig:
    grayscale: bool = False
    invert: bool = False
    brightness: int = 0     # signed offset added per channel after any inversion
    rotate: int = 0         # clockwise degrees; only 90/180/270 have effect

    @property
    def rotation(self) -> int:
        return effective_rotation(self.rotate)

    @property
    def is_identity(self) -> bool:
        return not (self.grayscale or self.invert or self.brightness or self.rotation)


@dataclass
class PipelineConfig:
    filters: FilterConfig = field(default_factory=FilterConfig)
    workers: Optional[int] = None   # None => os.cpu_count()
    show: bool = False


# Errors

class PixfilterError(Exception):
    """Base class for every failure the CLI reports as a clean exit."""


class InputNotFoundError(PixfilterError, FileNotFoundError):
    pass


class DecodeError(PixfilterError):
    pass


class EncodeError(PixfilterError):
    pass


# I/O & filesystem helpers

def ensure_dir(path: str | os.PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def load_image_rgb(path: str | os.PathLike) -> np.ndarray:
    """Load an image as RGB uint8 (H, W, 3). Alpha is dropped, deep images are scaled to 8 bit."""
    if not Path(path).exists():
        raise InputNotFoundError(f"Input file does not exist: {path}")
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise DecodeError(f"Could not decode image: {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image_rgb(path: str | os.PathLike, img_rgb: np.ndarray) -> None:
    """Write an RGB uint8 image; the format follows the file extension. Overwrites."""
    try:
        ensure_dir(Path(path).parent)
        bgr = cv2.cvtColor(img_rgb, cv2.COLOR_RGB2BGR)
        ok = cv2.imwrite(str(path), bgr)
    except (cv2.error, OSError) as e:
        raise EncodeError(f"Could not encode image to {path}: {e}") from e
    if not ok:
        raise EncodeError(f"Could not encode image to {path}")

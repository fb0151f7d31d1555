"""
Quarter-turn rotations. All turns are clockwise, lossless, and return a new array.
"""
import logging

import numpy as np

from .helpers import effective_rotation

logger = logging.getLogger(__name__)


def rot90_cw(img):
    """Rotate 90° clockwise."""
    return np.rot90(img, k=-1, axes=(0, 1)).copy()


def rot180(img):
    """Rotate 180°."""
    return np.rot90(img, k=2, axes=(0, 1)).copy()


def rot270_cw(img):
    """Rotate 270° clockwise (90° counter-clockwise)."""
    return np.rot90(img, k=1, axes=(0, 1)).copy()


def normalize_rotation(degrees: int) -> int:
    """Unsupported angles fall back to 0 (no rotation)."""
    if effective_rotation(degrees) == degrees:
        return degrees
    logger.warning("Ignoring unsupported rotation %s; only 90, 180 and 270 are applied", degrees)
    return 0


_TURNS = {
    90: rot90_cw,
    180: rot180,
    270: rot270_cw,
}


def rotate(img: np.ndarray, degrees: int) -> np.ndarray:
    turn = _TURNS.get(normalize_rotation(degrees))
    if turn is None:
        return img.copy()
    return turn(img)

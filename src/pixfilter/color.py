from __future__ import annotations
from concurrent.futures import Future, ThreadPoolExecutor
import logging
import os
from typing import List, Optional

import numpy as np

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights, single precision
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)

# below this many pixels the pool costs more than it saves
PARALLEL_MIN_PIXELS = 65_536


def _luma_rows(rows: np.ndarray) -> np.ndarray:
    """RGB uint8 rows -> gray uint8 rows (truncate toward zero, then clamp)."""
    r = rows[..., 0].astype(np.float32)
    g = rows[..., 1].astype(np.float32)
    b = rows[..., 2].astype(np.float32)
    lum = LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b
    return np.clip(lum.astype(np.int32), 0, 255).astype(np.uint8)


def to_grayscale(img_rgb: np.ndarray, workers: Optional[int] = None) -> np.ndarray:
    """
    Luminance grayscale, replicated into all three channels.
    Rows are split across a thread pool; every worker fills its own slice of a
    fresh output, so the result does not depend on the worker count.
    """
    h = img_rgb.shape[0]
    out = np.empty_like(img_rgb)
    max_workers = min(max(1, workers or os.cpu_count() or 1), max(1, h))

    def _fill(lo: int, hi: int) -> None:
        out[lo:hi] = _luma_rows(img_rgb[lo:hi])[..., None]

    if img_rgb.shape[0] * img_rgb.shape[1] < PARALLEL_MIN_PIXELS or max_workers == 1:
        _fill(0, h)
        return out

    chunk = (h + max_workers - 1) // max_workers
    ranges = [(lo, min(lo + chunk, h)) for lo in range(0, h, chunk)]
    logger.debug("grayscale: %d rows over %d workers", h, len(ranges))
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures: List[Future[None]] = [pool.submit(_fill, lo, hi) for lo, hi in ranges]
        for fut in futures:
            fut.result()
    return out


class GrayscaleConverter:
    """Per-pixel color stage. No-op unless enabled."""

    def __init__(self, enabled: bool = False, workers: Optional[int] = None) -> None:
        if workers is not None and workers < 1:
            raise ValueError("workers must be >= 1")
        self.enabled = enabled
        self.workers = workers

    def run(self, img_rgb: np.ndarray) -> np.ndarray:
        if not self.enabled:
            return img_rgb
        return to_grayscale(img_rgb, self.workers)

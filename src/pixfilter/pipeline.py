from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import time
from typing import Optional

import numpy as np

from .adjust import ChannelAdjuster
from .color import GrayscaleConverter
from .geometry import normalize_rotation, rotate
from .helpers import InputNotFoundError, PipelineConfig, load_image_rgb, save_image_rgb

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    before: np.ndarray      # as loaded, RGB uint8
    after: np.ndarray       # as saved


class FilterPipeline:
    """
    Fixed order, never reconfigured at runtime:
      1) grayscale (per pixel, threaded)
      2) rotation (new grid, may swap width/height)
      3) invert, then brightness (in place)
    """

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        self.config = config or PipelineConfig()
        f = self.config.filters
        self.color = GrayscaleConverter(enabled=f.grayscale, workers=self.config.workers)
        self.adjuster = ChannelAdjuster(invert=f.invert, brightness=f.brightness)
        self.rotation = normalize_rotation(f.rotate)

    def run(self, img_rgb: np.ndarray) -> np.ndarray:
        if self.config.filters.is_identity:
            return img_rgb.copy()
        t0 = time.perf_counter()
        colored = self.color.run(img_rgb)
        rotated = rotate(colored, self.rotation)
        out = self.adjuster.run(rotated)
        logger.debug(
            "processed %s -> %s in %.1f ms",
            img_rgb.shape, out.shape, (time.perf_counter() - t0) * 1000.0,
        )
        return out

    def process_file(self, src: str | os.PathLike, dst: str | os.PathLike) -> PipelineResult:
        if not Path(src).exists():
            raise InputNotFoundError(f"Input file does not exist: {src}")
        logger.info("Loading image...")
        img = load_image_rgb(src)
        logger.debug("loaded %s: %dx%d", src, img.shape[1], img.shape[0])

        logger.info("Processing image...")
        out = self.run(img)

        logger.info("Saving image...")
        save_image_rgb(dst, out)
        logger.info("Done! Image saved as %s", dst)
        return PipelineResult(before=img, after=out)

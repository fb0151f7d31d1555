from __future__ import annotations

import numpy as np


def adjust_channels(img_rgb: np.ndarray, invert: bool = False, brightness: int = 0) -> np.ndarray:
    """
    In place, per channel: v = 255 - v (if invert), then v + brightness, then clamp to [0, 255].
    Returns the same array.
    """
    if not invert and brightness == 0:
        return img_rgb
    # any |offset| >= 255 saturates anyway; keeps int16 from overflowing
    offset = max(-255, min(255, int(brightness)))
    v = img_rgb.astype(np.int16)
    if invert:
        v = 255 - v
    v += offset
    np.clip(v, 0, 255, out=v)
    img_rgb[...] = v.astype(np.uint8)
    return img_rgb


class ChannelAdjuster:
    """Per-pixel adjustment stage: inversion, then brightness offset."""

    def __init__(self, invert: bool = False, brightness: int = 0) -> None:
        self.invert = invert
        self.brightness = int(brightness)

    def run(self, img_rgb: np.ndarray) -> np.ndarray:
        return adjust_channels(img_rgb, self.invert, self.brightness)

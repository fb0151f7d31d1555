from .helpers import (
    FilterConfig, PipelineConfig, ensure_dir, load_image_rgb, save_image_rgb,
    PixfilterError, InputNotFoundError, DecodeError, EncodeError,
)
from .color import GrayscaleConverter, to_grayscale
from .geometry import rotate, rot90_cw, rot180, rot270_cw, normalize_rotation
from .adjust import ChannelAdjuster, adjust_channels
from .pipeline import FilterPipeline, PipelineResult
from .viz import Visualizer

__all__ = [
    "FilterConfig", "PipelineConfig", "ensure_dir", "load_image_rgb", "save_image_rgb",
    "PixfilterError", "InputNotFoundError", "DecodeError", "EncodeError",
    "GrayscaleConverter", "to_grayscale",
    "rotate", "rot90_cw", "rot180", "rot270_cw", "normalize_rotation",
    "ChannelAdjuster", "adjust_channels",
    "FilterPipeline", "PipelineResult",
    "Visualizer",
]

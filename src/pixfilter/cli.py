from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .helpers import FilterConfig, PipelineConfig, PixfilterError
from .pipeline import FilterPipeline
from .viz import Visualizer


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pixfilter", description="Apply simple pixel filters to an image")
    g_io = p.add_argument_group("I/O")
    g_io.add_argument("input", type=str, help="Source image path")
    g_io.add_argument("output", type=str, help="Destination path; format follows the extension")
    g_io.add_argument("--show", action="store_true", help="Display input and output side by side")

    g_flt = p.add_argument_group("Filters")
    g_flt.add_argument("--grayscale", action="store_true", help="Convert to luminance grayscale")
    g_flt.add_argument("--invert", action="store_true", help="Invert every channel")
    g_flt.add_argument("--brightness", type=int, default=0, help="Signed offset added per channel after inversion")
    g_flt.add_argument("--rotate", type=_non_negative_int, default=0, help="Clockwise rotation: 90, 180 or 270 (others ignored)")

    g_run = p.add_argument_group("Runtime")
    g_run.add_argument("--workers", type=_positive_int, default=None, help="Grayscale worker threads (default: CPU count)")
    g_run.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    filters = FilterConfig(
        grayscale=args.grayscale,
        invert=args.invert,
        brightness=args.brightness,
        rotate=args.rotate,
    )
    pipe_cfg = PipelineConfig(filters=filters, workers=args.workers, show=args.show)

    try:
        result = FilterPipeline(pipe_cfg).process_file(args.input, args.output)
    except PixfilterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if pipe_cfg.show:
        Visualizer().show_before_after(result.before, result.after)
    return 0


if __name__ == "__main__":
    sys.exit(main())

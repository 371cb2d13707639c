from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..bitmap import BitmapColorBuf, ChannelLayout, encode_bitmap
from ..buffer import PixelBuffer
from ..ops import SubRegionView, blend_onto
from ..rendering import load_bitmap, save_buffer

DEFAULT_GAMMA = 2.2
DEFAULT_LAYOUT = "RGBA"
GAMMA_ENV_VAR = "COLORBUF_GAMMA"
LAYOUT_ENV_VAR = "COLORBUF_LAYOUT"

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    gamma: float = DEFAULT_GAMMA
    layout: ChannelLayout = ChannelLayout.parse(DEFAULT_LAYOUT)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "RenderSettings":
        environ = os.environ if environ is None else environ
        settings = cls()
        gamma = environ.get(GAMMA_ENV_VAR)
        if gamma:
            try:
                settings.gamma = float(gamma)
            except ValueError:
                raise ValueError(f"{GAMMA_ENV_VAR} must be a number, got {gamma!r}") from None
        layout = environ.get(LAYOUT_ENV_VAR)
        if layout:
            settings.layout = ChannelLayout.parse(layout)
        return settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="colorbuf",
        description="colorbuf: crop, composite and repack images as raw bitmap payloads.",
    )
    parser.add_argument("path", help="Image to load (any format Pillow can open)")
    parser.add_argument("--crop", nargs=4, type=int, metavar=("X", "Y", "W", "H"), help="Keep only this rectangle")
    parser.add_argument("--overlay", metavar="IMAGE", help="Image blended over the input before cropping")
    parser.add_argument("--at", nargs=2, type=int, default=(0, 0), metavar=("X", "Y"), help="Overlay position (default: 0 0)")
    parser.add_argument("--gamma", type=float, help=f"Blend gamma (default: ${GAMMA_ENV_VAR} or {DEFAULT_GAMMA})")
    parser.add_argument("--output", "-o", metavar="FILE", help="Write the result as an image file")
    parser.add_argument("--raw", metavar="FILE", help="Write the result as a raw bitmap payload")
    parser.add_argument(
        "--layout",
        choices=["RGBA", "ARGB", "RGB"],
        type=str.upper,
        help=f"Channel order of --raw output (default: ${LAYOUT_ENV_VAR} or {DEFAULT_LAYOUT})",
    )
    parser.add_argument("--info", action="store_true", help="Print the size of the result")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings.from_env()
    if args.gamma is not None:
        settings.gamma = args.gamma
    if args.layout:
        settings.layout = ChannelLayout.parse(args.layout)
    return settings


def apply_overlay(base: BitmapColorBuf, overlay_path: str, x: int, y: int, gamma: float) -> None:
    overlay = load_bitmap(overlay_path)
    logger.debug("Blending %s (%dx%d) at (%d, %d), gamma %s", overlay_path, overlay.width, overlay.height, x, y, gamma)
    with SubRegionView(base, x, y, overlay.width, overlay.height) as target:
        blend_onto(target, overlay, gamma)


def write_raw(buffer: PixelBuffer, path: str, layout: ChannelLayout) -> int:
    stride, data = encode_bitmap(buffer, layout)
    with open(path, "wb") as handle:
        handle.write(data)
    return stride


def run(args: argparse.Namespace) -> int:
    settings = resolve_settings(args)
    base = load_bitmap(args.path)
    if args.overlay:
        apply_overlay(base, args.overlay, args.at[0], args.at[1], settings.gamma)

    views: List[SubRegionView] = []
    result: PixelBuffer = base
    try:
        if args.crop:
            x, y, width, height = args.crop
            result = SubRegionView(base, x, y, width, height)
            views.append(result)
        if args.info:
            print(f"{result.width}x{result.height}")
        if args.output:
            save_buffer(result, args.output)
        if args.raw:
            stride = write_raw(result, args.raw, settings.layout)
            print(f"{args.raw}: {settings.layout.order.name} {result.width}x{result.height}, stride {stride}")
    finally:
        for view in reversed(views):
            view.release()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if not (args.output or args.raw or args.info):
        print("Nothing to do: pass --output, --raw or --info. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        return run(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

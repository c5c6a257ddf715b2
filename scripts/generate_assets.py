#!/usr/bin/env python3
"""
Render every fighter and technique sprite sheet to PNG.

Sheets are painted in memory at import time; this script only rasterises
them (nearest-neighbour upscaled) and writes a manifest with per-action
row, frame count and frame duration for the game client.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from fighter_sprites.config import EXPORT_SCALE, OUTPUT_ROOT
from fighter_sprites.export import export_all


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('--out', type=Path, default=OUTPUT_ROOT, help=f'output directory (default: {OUTPUT_ROOT})')
    parser.add_argument('--scale', type=int, default=EXPORT_SCALE, help=f'upscale factor (default: {EXPORT_SCALE})')
    parser.add_argument('--mirror', action='store_true', help='also write left-facing character sheets')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )
    paths = export_all(args.out, scale=args.scale, mirror=args.mirror)
    logging.getLogger(__name__).info('wrote %d files to %s', len(paths), args.out)


if __name__ == '__main__':
    main()

from __future__ import annotations

from typing import Mapping, Sequence

from fighter_sprites.types import Frame, PixelColor, SpriteAssemblyError

PaletteMap = Mapping[str, PixelColor]


def frame_from_palette(rows: Sequence[str], palette: PaletteMap) -> Frame:
    """Build a frame from symbol rows; symbols missing from ``palette`` are transparent.

    >>> frame_from_palette(["AB", "BA"], {"A": "#fff", "B": None})
    [['#fff', None], [None, '#fff']]
    """
    if len({len(row) for row in rows}) > 1:
        raise SpriteAssemblyError(f"palette rows must share one length, got {[len(r) for r in rows]}")
    return [[palette.get(symbol) for symbol in row] for row in rows]


def scale_frame(frame: Frame, factor: int) -> Frame:
    """Nearest-neighbour upscale: every pixel becomes a ``factor`` x ``factor`` block."""
    if factor < 1:
        raise ValueError(f"scale factor must be >= 1, got {factor}")
    if factor == 1:
        return frame
    scaled = []
    for row in frame:
        big_row = []
        for px in row:
            big_row.extend([px] * factor)
        for _ in range(factor):
            scaled.append(big_row[:])
    return scaled


def mirror_frame(frame: Frame) -> Frame:
    return [row[::-1] for row in frame]

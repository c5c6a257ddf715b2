from __future__ import annotations

import math

from fighter_sprites.frame import clone_frame, frame_size
from fighter_sprites.types import RGB, Frame, PixelColor

NEIGHBOURS_8 = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (-1, -1), (1, -1), (-1, 1)]


def rgba(color: RGB, alpha: float) -> str:
    r, g, b = color
    return f'rgba({r},{g},{b},{alpha:.2f})'


def round_half_up(value: float) -> int:
    # ties round towards +inf
    return int(math.floor(value + 0.5))


def set_pixel(frame: Frame, x: int, y: int, color: PixelColor) -> None:
    width, height = frame_size(frame)
    if 0 <= x < width and 0 <= y < height:
        frame[y][x] = color


def fill_rect(frame: Frame, x: int, y: int, w: int, h: int, color: PixelColor) -> None:
    width, height = frame_size(frame)
    for row in range(max(0, y), min(height, y + h)):
        line = frame[row]
        for col in range(max(0, x), min(width, x + w)):
            line[col] = color


def fill_disc(frame: Frame, cx: int, cy: int, radius: int, color: PixelColor) -> None:
    width, height = frame_size(frame)
    r_sq = radius * radius
    for dy in range(-radius, radius + 1):
        py = cy + dy
        if not 0 <= py < height:
            continue
        for dx in range(-radius, radius + 1):
            px = cx + dx
            if 0 <= px < width and dx * dx + dy * dy <= r_sq:
                frame[py][px] = color


def apply_glow(frame: Frame, cx: int, cy: int, radius: int, color_base: RGB, intensity: float) -> None:
    """Paint a radial glow that fades from ``intensity`` at the centre to zero at ``radius``.

    Each covered pixel is overwritten, not blended, so paint the widest and
    faintest glow first. Pixels whose alpha rounds to zero at two decimals are
    left alone.
    """
    if radius <= 0:
        return
    width, height = frame_size(frame)
    r_sq = radius * radius
    for dy in range(-radius, radius + 1):
        py = cy + dy
        if not 0 <= py < height:
            continue
        for dx in range(-radius, radius + 1):
            px = cx + dx
            dist_sq = dx * dx + dy * dy
            if not 0 <= px < width or dist_sq > r_sq:
                continue
            alpha = max(0.0, 1 - dist_sq / r_sq) * intensity
            if round(alpha, 2) <= 0:
                continue
            frame[py][px] = rgba(color_base, alpha)


def compute_outline(frame: Frame, outline_color: str) -> Frame:
    """Return a copy of ``frame`` with every transparent pixel touching the
    silhouette (8-connectivity) painted ``outline_color``.

    Single pass over the source frame; opaque pixels are never changed and a
    pixel that has already been outlined keeps its first assignment.
    """
    width, height = frame_size(frame)
    outlined = clone_frame(frame)
    for y in range(height):
        for x in range(width):
            if not frame[y][x]:
                continue
            for dx, dy in NEIGHBOURS_8:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and not frame[ny][nx]:
                    if outlined[ny][nx] is None:
                        outlined[ny][nx] = outline_color
    return outlined

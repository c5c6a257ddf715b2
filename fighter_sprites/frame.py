from __future__ import annotations

from typing import Tuple

from fighter_sprites.types import Frame


def create_frame(width: int, height: int) -> Frame:
    return [[None] * width for _ in range(height)]


def clone_frame(frame: Frame) -> Frame:
    return [row[:] for row in frame]


def frame_size(frame: Frame) -> Tuple[int, int]:
    """Return ``(width, height)`` of a frame."""
    height = len(frame)
    width = len(frame[0]) if height else 0
    return width, height

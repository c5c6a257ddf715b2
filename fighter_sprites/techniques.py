from __future__ import annotations

import math
from typing import Dict, List

from fighter_sprites.animation import build_animation, build_effect_sheet
from fighter_sprites.config import EFFECT_HEIGHT, EFFECT_WIDTH
from fighter_sprites.draw import apply_glow, fill_disc, rgba, round_half_up, set_pixel
from fighter_sprites.frame import create_frame
from fighter_sprites.types import RGB, EffectSpriteSheet, Frame

CENTER = (EFFECT_WIDTH // 2, EFFECT_HEIGHT // 2)

RASENGAN_INNER: RGB = (51, 196, 255)
RASENGAN_MID: RGB = (94, 214, 255)
RASENGAN_OUTER: RGB = (162, 240, 255)
CHIDORI_SPARK: RGB = (159, 225, 255)
IMPACT_FLASH: RGB = (255, 180, 122)

CHIDORI_SPIKES = 12
CHIDORI_ROTATION = math.pi / 8


def new_canvas() -> Frame:
    return create_frame(EFFECT_WIDTH, EFFECT_HEIGHT)


def rasengan_frames() -> List[Frame]:
    """Spinning chakra sphere: stacked glows under a two-tone core whose radius pulses 6/7."""
    cx, cy = CENTER
    frames = []
    for i in range(6):
        frame = new_canvas()
        radius = 6 + i % 2
        apply_glow(frame, cx, cy, radius + 4, RASENGAN_OUTER, 0.45)
        apply_glow(frame, cx, cy, radius + 2, RASENGAN_MID, 0.6)
        fill_disc(frame, cx, cy, radius, rgba(RASENGAN_INNER, 0.95))
        fill_disc(frame, cx, cy, max(2, radius - 2), rgba(RASENGAN_MID, 0.75))
        frames.append(frame)
    return frames


def chidori_frames() -> List[Frame]:
    """Crackling lightning: a soft glow with rays that fade outwards and rotate each frame."""
    cx, cy = CENTER
    frames = []
    for i in range(6):
        frame = new_canvas()
        apply_glow(frame, cx, cy, 12, CHIDORI_SPARK, 0.4)
        for s in range(CHIDORI_SPIKES):
            angle = math.pi * 2 * s / CHIDORI_SPIKES + i * CHIDORI_ROTATION
            length = 10 + (s + i) % 3
            for d in range(length):
                x = round_half_up(cx + math.cos(angle) * d)
                y = round_half_up(cy + math.sin(angle) * d)
                set_pixel(frame, x, y, rgba(CHIDORI_SPARK, 0.9 - d * 0.07))
        frames.append(frame)
    return frames


def impact_frames() -> List[Frame]:
    cx, cy = CENTER
    frames = []
    for i in range(4):
        frame = new_canvas()
        radius = 4 + i * 2
        apply_glow(frame, cx, cy, radius + 1, IMPACT_FLASH, 0.5)
        fill_disc(frame, cx, cy, radius, rgba(IMPACT_FLASH, 0.7 - i * 0.1))
        frames.append(frame)
    return frames


RASENGAN = build_effect_sheet('rasengan', build_animation(rasengan_frames(), 60))
CHIDORI = build_effect_sheet('chidori', build_animation(chidori_frames(), 60))
IMPACT_SPARK = build_effect_sheet('impact', build_animation(impact_frames(), 50))

EFFECT_SHEETS: Dict[str, EffectSpriteSheet] = {
    sheet.name: sheet for sheet in (RASENGAN, CHIDORI, IMPACT_SPARK)
}

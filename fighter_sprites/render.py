from __future__ import annotations

import re
from typing import Tuple

import numpy as np
from PIL import Image

from fighter_sprites.frame import frame_size
from fighter_sprites.types import ACTION_NAMES, Animation, CharacterSpriteSheet, Frame, PixelColor

Color = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)

_HEX_RE = re.compile(r'^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_RGBA_RE = re.compile(
    r'^rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d*\.?\d+)\s*\)$'
)


def parse_color(value: str) -> Color:
    """Convert a canvas colour string (``#rgb``, ``#rrggbb`` or ``rgba(r,g,b,a)``) to RGBA bytes."""
    m = _HEX_RE.match(value)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), 255)

    m = _RGBA_RE.match(value)
    if m:
        r, g, b = (int(m.group(i)) for i in (1, 2, 3))
        a = float(m.group(4))
        if max(r, g, b) > 255 or a > 1:
            raise ValueError(f'colour component out of range: {value!r}')
        return (r, g, b, int(round(a * 255)))

    raise ValueError(f'unrecognised colour: {value!r}')


def is_valid_color(value: PixelColor) -> bool:
    if value is None:
        return True
    if not isinstance(value, str):
        return False
    try:
        parse_color(value)
    except ValueError:
        return False
    return True


def frame_to_array(frame: Frame) -> np.ndarray:
    width, height = frame_size(frame)
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    for y, row in enumerate(frame):
        for x, px in enumerate(row):
            if px is not None:
                arr[y, x] = parse_color(px)
    return arr


def frame_to_image(frame: Frame, scale: int = 1) -> Image.Image:
    img = Image.fromarray(frame_to_array(frame))
    if scale != 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    return img


def animation_strip(animation: Animation, scale: int = 1) -> Image.Image:
    """Lay the frames of one animation out left to right."""
    width, height = animation.size
    fw, fh = width * scale, height * scale
    strip = Image.new('RGBA', (fw * len(animation.frames), fh), TRANSPARENT)
    for i, frame in enumerate(animation.frames):
        strip.paste(frame_to_image(frame, scale), (i * fw, 0))
    return strip


def character_sheet_image(sheet: CharacterSpriteSheet, scale: int = 1) -> Image.Image:
    """One row per action in ``ACTION_NAMES`` order, as many columns as the longest action."""
    width, height = sheet.idle.size
    fw, fh = width * scale, height * scale
    cols = max(len(anim.frames) for _, anim in sheet.items())
    image = Image.new('RGBA', (fw * cols, fh * len(ACTION_NAMES)), TRANSPARENT)
    for row, action in enumerate(ACTION_NAMES):
        image.paste(animation_strip(sheet[action], scale), (0, row * fh))
    return image

"""
Configuration constants for sprite generation and export.
"""
import os
from pathlib import Path

from fighter_sprites.types import ACTION_NAMES

# Character frames
FRAME_WIDTH = 24
FRAME_HEIGHT = 24

# Effect (technique) frames
EFFECT_WIDTH = 32
EFFECT_HEIGHT = 32

SPRITE_DIMENSIONS = {"width": FRAME_WIDTH, "height": FRAME_HEIGHT}
EFFECT_DIMENSIONS = {"width": EFFECT_WIDTH, "height": EFFECT_HEIGHT}

# Export
OUTPUT_ROOT = Path(os.environ.get("FIGHTER_SPRITES_OUTPUT", "public/assets/sprites"))
CHAR_DIR_NAME = "characters"
EFFECT_DIR_NAME = "effects"
MANIFEST_NAME = "manifest.json"
EXPORT_SCALE = 4
OUTPUT_FORMAT = "PNG"

__all__ = [
    "ACTION_NAMES",
    "FRAME_WIDTH",
    "FRAME_HEIGHT",
    "EFFECT_WIDTH",
    "EFFECT_HEIGHT",
    "SPRITE_DIMENSIONS",
    "EFFECT_DIMENSIONS",
    "OUTPUT_ROOT",
    "CHAR_DIR_NAME",
    "EFFECT_DIR_NAME",
    "MANIFEST_NAME",
    "EXPORT_SCALE",
    "OUTPUT_FORMAT",
]

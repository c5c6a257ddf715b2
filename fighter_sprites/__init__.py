"""Procedural pixel-art sprites for the fighting game.

Every sheet below is painted once, at import, from fixed pose tables.
"""
from fighter_sprites.animation import build_animation, build_character_sheet, build_effect_sheet
from fighter_sprites.characters import (
    CHARACTER_SHEETS,
    NARUTO_SPRITES,
    SASUKE_SPRITES,
    draw_naruto_pose,
    draw_sasuke_pose,
)
from fighter_sprites.config import EFFECT_DIMENSIONS, SPRITE_DIMENSIONS
from fighter_sprites.draw import apply_glow, compute_outline, fill_disc, fill_rect, set_pixel
from fighter_sprites.frame import clone_frame, create_frame, frame_size
from fighter_sprites.techniques import CHIDORI, EFFECT_SHEETS, IMPACT_SPARK, RASENGAN
from fighter_sprites.transform import frame_from_palette, mirror_frame, scale_frame
from fighter_sprites.types import (
    ACTION_NAMES,
    Animation,
    ArmPosition,
    CharacterSpriteSheet,
    EffectSpriteSheet,
    LegPosition,
    PoseConfig,
    SpriteAssemblyError,
    TorsoLean,
    Weapon,
)

__all__ = [
    "ACTION_NAMES",
    "Animation",
    "ArmPosition",
    "CHARACTER_SHEETS",
    "CHIDORI",
    "CharacterSpriteSheet",
    "EFFECT_DIMENSIONS",
    "EFFECT_SHEETS",
    "EffectSpriteSheet",
    "IMPACT_SPARK",
    "LegPosition",
    "NARUTO_SPRITES",
    "PoseConfig",
    "RASENGAN",
    "SASUKE_SPRITES",
    "SPRITE_DIMENSIONS",
    "SpriteAssemblyError",
    "TorsoLean",
    "Weapon",
    "apply_glow",
    "build_animation",
    "build_character_sheet",
    "build_effect_sheet",
    "clone_frame",
    "compute_outline",
    "create_frame",
    "draw_naruto_pose",
    "draw_sasuke_pose",
    "fill_disc",
    "fill_rect",
    "frame_from_palette",
    "frame_size",
    "mirror_frame",
    "scale_frame",
    "set_pixel",
]

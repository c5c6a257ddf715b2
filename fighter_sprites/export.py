from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from fighter_sprites.animation import build_animation, build_character_sheet
from fighter_sprites.characters import CHARACTER_SHEETS
from fighter_sprites.config import (
    ACTION_NAMES,
    CHAR_DIR_NAME,
    EFFECT_DIR_NAME,
    EXPORT_SCALE,
    MANIFEST_NAME,
    OUTPUT_FORMAT,
)
from fighter_sprites.render import animation_strip, character_sheet_image
from fighter_sprites.techniques import EFFECT_SHEETS
from fighter_sprites.transform import mirror_frame
from fighter_sprites.types import CharacterSpriteSheet, EffectSpriteSheet

logger = logging.getLogger(__name__)


def ensure_dirs(out_dir: Path) -> None:
    (out_dir / CHAR_DIR_NAME).mkdir(parents=True, exist_ok=True)
    (out_dir / EFFECT_DIR_NAME).mkdir(parents=True, exist_ok=True)


def mirrored_sheet(sheet: CharacterSpriteSheet) -> CharacterSpriteSheet:
    """The same sheet facing the other way."""
    animations = {
        action: build_animation([mirror_frame(f) for f in anim.frames], anim.frame_duration)
        for action, anim in sheet.items()
    }
    return build_character_sheet(animations, name=f'{sheet.name}_mirrored')


def character_manifest(sheet: CharacterSpriteSheet, scale: int) -> Dict[str, Any]:
    width, height = sheet.idle.size
    return {
        'frame_width': width * scale,
        'frame_height': height * scale,
        'scale': scale,
        'actions': {
            action: {
                'row': row,
                'frames': len(sheet[action].frames),
                'frame_duration': sheet[action].frame_duration,
            }
            for row, action in enumerate(ACTION_NAMES)
        },
    }


def effect_manifest(effect: EffectSpriteSheet, scale: int) -> Dict[str, Any]:
    width, height = effect.animation.size
    return {
        'frame_width': width * scale,
        'frame_height': height * scale,
        'scale': scale,
        'frames': len(effect.animation.frames),
        'frame_duration': effect.animation.frame_duration,
    }


def write_character_sheet(sheet: CharacterSpriteSheet, out_dir: Path, scale: int = EXPORT_SCALE) -> Path:
    path = out_dir / CHAR_DIR_NAME / f'{sheet.name}.png'
    image = character_sheet_image(sheet, scale)
    image.save(path, OUTPUT_FORMAT)
    logger.info('generated: %s %s', path, image.size)
    return path


def write_effect_sheet(effect: EffectSpriteSheet, out_dir: Path, scale: int = EXPORT_SCALE) -> Path:
    path = out_dir / EFFECT_DIR_NAME / f'{effect.name}.png'
    image = animation_strip(effect.animation, scale)
    image.save(path, OUTPUT_FORMAT)
    logger.info('generated: %s %s', path, image.size)
    return path


def export_all(out_dir: Path, scale: int = EXPORT_SCALE, mirror: bool = False) -> List[Path]:
    """Write every character and effect sheet as PNG plus a JSON manifest.

    Returns the written paths, manifest last.
    """
    if scale < 1:
        raise ValueError(f'scale must be >= 1, got {scale}')
    out_dir = Path(out_dir)
    ensure_dirs(out_dir)

    written: List[Path] = []
    manifest: Dict[str, Any] = {'characters': {}, 'effects': {}}

    for sheet in CHARACTER_SHEETS.values():
        variants = [sheet, mirrored_sheet(sheet)] if mirror else [sheet]
        for variant in variants:
            written.append(write_character_sheet(variant, out_dir, scale))
            manifest['characters'][variant.name] = character_manifest(variant, scale)

    for effect in EFFECT_SHEETS.values():
        written.append(write_effect_sheet(effect, out_dir, scale))
        manifest['effects'][effect.name] = effect_manifest(effect, scale)

    manifest_path = out_dir / MANIFEST_NAME
    manifest_path.write_text(json.dumps(manifest, indent=2))
    logger.info('wrote manifest: %s', manifest_path)
    written.append(manifest_path)
    return written

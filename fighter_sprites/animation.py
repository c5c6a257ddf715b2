from __future__ import annotations

import logging
from typing import Mapping, Sequence

from fighter_sprites.types import (
    ACTION_NAMES,
    Animation,
    CharacterSpriteSheet,
    EffectSpriteSheet,
    Frame,
    SpriteAssemblyError,
)

logger = logging.getLogger(__name__)


def build_animation(frames: Sequence[Frame], frame_duration: int) -> Animation:
    return Animation(frames=tuple(frames), frame_duration=frame_duration)


def build_character_sheet(animations: Mapping[str, Animation], name: str = "") -> CharacterSpriteSheet:
    """Bundle the eight action animations into a sheet.

    Raises SpriteAssemblyError when an action is missing or an unknown one is
    supplied, or when the animations do not share one frame size.
    """
    missing = [action for action in ACTION_NAMES if action not in animations]
    extra = sorted(set(animations) - set(ACTION_NAMES))
    if missing or extra:
        raise SpriteAssemblyError(f"sheet {name!r}: missing actions {missing}, unknown actions {extra}")

    sizes = {animations[action].size for action in ACTION_NAMES}
    if len(sizes) != 1:
        raise SpriteAssemblyError(f"sheet {name!r}: animations have mismatched frame sizes {sorted(sizes)}")

    sheet = CharacterSpriteSheet(name=name, **{action: animations[action] for action in ACTION_NAMES})
    logger.debug(
        "built character sheet %r: %d frames total",
        name,
        sum(len(anim.frames) for _, anim in sheet.items()),
    )
    return sheet


def build_effect_sheet(name: str, animation: Animation) -> EffectSpriteSheet:
    if not name:
        raise SpriteAssemblyError("effect sheet needs a name")
    logger.debug("built effect sheet %r: %d frames @ %dms", name, len(animation.frames), animation.frame_duration)
    return EffectSpriteSheet(name=name, animation=animation)

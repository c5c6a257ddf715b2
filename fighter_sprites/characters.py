from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from fighter_sprites.animation import build_animation, build_character_sheet
from fighter_sprites.config import FRAME_HEIGHT, FRAME_WIDTH
from fighter_sprites.draw import compute_outline, fill_rect, rgba, round_half_up, set_pixel
from fighter_sprites.frame import create_frame
from fighter_sprites.types import (
    RGB,
    ArmPosition,
    CharacterSpriteSheet,
    Frame,
    LegPosition,
    PoseConfig,
    Side,
    TorsoLean,
    Weapon,
)


A = ArmPosition
L = LegPosition

AURA_ALPHAS = (0.45, 0.3, 0.15)
AURA_CENTER = (11, 17)
AURA_BASE_RADIUS = 6


@dataclass(frozen=True)
class NarutoPalette:
    outline: str = '#141214'
    hair: str = '#f7c948'
    skin: str = '#f9d0aa'
    jacket_orange: str = '#f47920'
    jacket_black: str = '#1e1e2f'
    blue: str = '#3250a4'
    metal: str = '#d0d7e4'
    eye: str = '#1a1a1a'
    chakra: str = '#66e0ff'
    aura: RGB = (102, 224, 255)


@dataclass(frozen=True)
class SasukePalette:
    outline: str = '#1a1a28'
    hair: str = '#181836'
    skin: str = '#f2cdb3'
    shirt: str = '#9aa8ff'
    rope: str = '#9b6ad9'
    pants: str = '#3c4d92'
    eye: str = '#1a1a1a'
    chidori: str = '#9fe1ff'
    aura: RGB = (155, 106, 217)
    spark: RGB = (159, 225, 255)


NARUTO = NarutoPalette()
SASUKE = SasukePalette()


def lean_offset(lean: TorsoLean) -> int:
    if lean is TorsoLean.FORWARD:
        return 1
    if lean is TorsoLean.BACK:
        return -1
    return 0


def new_canvas() -> Frame:
    return create_frame(FRAME_WIDTH, FRAME_HEIGHT)


def draw_head(frame: Frame, hair: str, skin: str, eye: str, offset_y: int = 0, headband: Optional[str] = None) -> None:
    fill_rect(frame, 8, 2 + offset_y, 8, 2, hair)
    fill_rect(frame, 7, 3 + offset_y, 10, 3, hair)
    fill_rect(frame, 8, 5 + offset_y, 8, 1, headband or hair)
    fill_rect(frame, 9, 6 + offset_y, 6, 5, skin)
    set_pixel(frame, 10, 8 + offset_y, eye)
    set_pixel(frame, 13, 8 + offset_y, eye)
    set_pixel(frame, 11, 11 + offset_y, eye)


def draw_aura(frame: Frame, color: RGB, step_degrees: int, offset_y: int) -> None:
    cx, cy = AURA_CENTER
    for ring, alpha in enumerate(AURA_ALPHAS):
        ring_color = rgba(color, alpha)
        radius = AURA_BASE_RADIUS + ring
        for degrees in range(0, 360, step_degrees):
            rad = math.radians(degrees)
            x = round_half_up(cx + math.cos(rad) * radius)
            y = round_half_up(cy + offset_y + math.sin(rad) * radius)
            set_pixel(frame, x, y, ring_color)


# Fighter A

def _naruto_arm(frame: Frame, side: Side, position: ArmPosition, oy: int) -> None:
    x = 7 if side is Side.LEFT else 15
    d = -1 if side is Side.LEFT else 1
    color = NARUTO.jacket_orange
    if position is A.DOWN:
        fill_rect(frame, x, 12 + oy, 2, 6, color)
    elif position is A.FORWARD:
        fill_rect(frame, x - d, 12 + oy, 3, 3, color)
        fill_rect(frame, x - 2 * d, 14 + oy, 3, 2, color)
    elif position is A.UP:
        fill_rect(frame, x, 10 + oy, 2, 5, color)
        fill_rect(frame, x - d, 9 + oy, 2, 2, color)
    elif position is A.BACK:
        fill_rect(frame, x + d, 12 + oy, 2, 4, color)


def _naruto_leg(frame: Frame, side: Side, position: LegPosition, oy: int) -> None:
    left = side is Side.LEFT
    x = 10 if left else 14
    if position is L.NEUTRAL:
        fill_rect(frame, x, 19 + oy, 2, 5, NARUTO.blue)
        fill_rect(frame, x, 23 + oy, 2, 1, NARUTO.metal)
    elif position is L.FORWARD:
        fx = x - 1 if left else x
        fill_rect(frame, fx, 20 + oy, 3, 4, NARUTO.blue)
        fill_rect(frame, fx, 23 + oy, 3, 1, NARUTO.metal)
    elif position is L.BACK:
        bx = x + 1 if left else x
        fill_rect(frame, bx, 19 + oy, 2, 5, NARUTO.blue)
        fill_rect(frame, bx, 23 + oy, 2, 1, NARUTO.metal)
    elif position is L.AIR:
        fill_rect(frame, x - 1, 18 + oy, 3, 3, NARUTO.blue)
        fill_rect(frame, x, 21 + oy, 3, 2, NARUTO.blue)
        fill_rect(frame, x, 23 + oy, 3, 1, NARUTO.metal)


def draw_naruto_pose(pose: PoseConfig) -> Frame:
    frame = new_canvas()
    lean = lean_offset(pose.torso_lean)
    oy = pose.head_tilt

    draw_head(frame, NARUTO.hair, NARUTO.skin, NARUTO.eye, oy, headband=NARUTO.metal)

    fill_rect(frame, 9 + lean, 11 + oy, 6, 5, NARUTO.jacket_black)
    fill_rect(frame, 9 + lean, 16 + oy, 6, 6, NARUTO.jacket_orange)
    fill_rect(frame, 9 + lean, 16 + oy, 6, 1, NARUTO.blue)  # belt

    _naruto_arm(frame, Side.LEFT, pose.arm_left, oy)
    _naruto_arm(frame, Side.RIGHT, pose.arm_right, oy)
    _naruto_leg(frame, Side.LEFT, pose.leg_left, oy)
    _naruto_leg(frame, Side.RIGHT, pose.leg_right, oy)

    if pose.chakra_burst:
        for i in range(8):
            set_pixel(frame, 6 + i * 2, 10 + oy + i % 2, NARUTO.chakra)

    if pose.special_aura:
        draw_aura(frame, NARUTO.aura, 20, oy)

    return compute_outline(frame, NARUTO.outline)


# Fighter B

def _sasuke_arm(frame: Frame, side: Side, position: ArmPosition, oy: int) -> None:
    left = side is Side.LEFT
    x = 7 if left else 17
    d = -1 if left else 1
    color = SASUKE.shirt
    if position is A.DOWN:
        fill_rect(frame, x - 1 if left else x, 12 + oy, 3, 6, color)
    elif position is A.FORWARD:
        fill_rect(frame, x - 2 * d, 12 + oy, 4, 3, color)
        fill_rect(frame, x - 2 * d, 14 + oy, 3, 2, color)
    elif position is A.UP:
        fill_rect(frame, x - d, 10 + oy, 3, 5, color)
    elif position is A.BACK:
        fill_rect(frame, x + d, 12 + oy, 2, 4, color)


def _sasuke_leg(frame: Frame, side: Side, position: LegPosition, oy: int) -> None:
    left = side is Side.LEFT
    x = 9 if left else 15
    if position is L.NEUTRAL:
        fill_rect(frame, x, 20 + oy, 3, 4, SASUKE.pants)
        fill_rect(frame, x, 23 + oy, 3, 1, SASUKE.hair)
    elif position is L.FORWARD:
        fx = x - 1 if left else x
        fill_rect(frame, fx, 20 + oy, 3, 4, SASUKE.pants)
        fill_rect(frame, fx, 23 + oy, 3, 1, SASUKE.hair)
    elif position is L.BACK:
        bx = x + 1 if left else x
        fill_rect(frame, bx, 19 + oy, 3, 5, SASUKE.pants)
        fill_rect(frame, bx, 23 + oy, 3, 1, SASUKE.hair)
    elif position is L.AIR:
        fill_rect(frame, x - 1, 18 + oy, 4, 3, SASUKE.pants)
        fill_rect(frame, x, 21 + oy, 3, 2, SASUKE.pants)
        fill_rect(frame, x, 23 + oy, 3, 1, SASUKE.hair)


def _draw_chidori_charge(frame: Frame, oy: int) -> None:
    # the spark spiral is anchored to the hand, not the head
    for i in range(16):
        angle = i / 16 * math.pi * 2
        radius = 4 + i % 5
        x = round_half_up(17 + math.cos(angle) * radius)
        y = round_half_up(16 + math.sin(angle) * radius)
        set_pixel(frame, x, y, rgba(SASUKE.spark, 0.3 + (i % 3) * 0.2))
    fill_rect(frame, 16, 14 + oy, 3, 3, SASUKE.chidori)


def draw_sasuke_pose(pose: PoseConfig) -> Frame:
    frame = new_canvas()
    lean = lean_offset(pose.torso_lean)
    oy = pose.head_tilt

    draw_head(frame, SASUKE.hair, SASUKE.skin, SASUKE.eye, oy)

    fill_rect(frame, 8 + lean, 11 + oy, 8, 5, SASUKE.shirt)
    fill_rect(frame, 8 + lean, 16 + oy, 8, 5, SASUKE.rope)
    fill_rect(frame, 7 + lean, 21 + oy, 10, 3, SASUKE.pants)

    _sasuke_arm(frame, Side.LEFT, pose.arm_left, oy)
    _sasuke_arm(frame, Side.RIGHT, pose.arm_right, oy)
    _sasuke_leg(frame, Side.LEFT, pose.leg_left, oy)
    _sasuke_leg(frame, Side.RIGHT, pose.leg_right, oy)

    if pose.weapon is Weapon.CHIDORI:
        _draw_chidori_charge(frame, oy)

    if pose.special_aura:
        draw_aura(frame, SASUKE.aura, 24, oy)

    return compute_outline(frame, SASUKE.outline)


# Pose tables

PoseTable = Dict[str, Tuple[int, Sequence[PoseConfig]]]

FWD = TorsoLean.FORWARD
BCK = TorsoLean.BACK

NARUTO_POSES: PoseTable = {
    'idle': (250, [
        PoseConfig(A.DOWN, A.DOWN, L.NEUTRAL, L.NEUTRAL),
        PoseConfig(A.FORWARD, A.BACK, L.FORWARD, L.BACK, head_tilt=1),
    ]),
    'run': (90, [
        PoseConfig(A.FORWARD, A.BACK, L.FORWARD, L.BACK, torso_lean=FWD),
        PoseConfig(A.BACK, A.FORWARD, L.BACK, L.FORWARD, torso_lean=FWD),
        PoseConfig(A.FORWARD, A.BACK, L.AIR, L.FORWARD, torso_lean=FWD),
        PoseConfig(A.BACK, A.FORWARD, L.FORWARD, L.AIR, torso_lean=FWD),
    ]),
    'jump': (120, [
        PoseConfig(A.FORWARD, A.FORWARD, L.AIR, L.AIR, torso_lean=FWD),
    ]),
    'fall': (120, [
        PoseConfig(A.FORWARD, A.FORWARD, L.AIR, L.AIR, torso_lean=BCK),
    ]),
    'attack': (80, [
        PoseConfig(A.FORWARD, A.FORWARD, L.FORWARD, L.BACK, torso_lean=FWD, chakra_burst=True),
        PoseConfig(A.FORWARD, A.FORWARD, L.FORWARD, L.BACK, torso_lean=FWD, chakra_burst=True, special_aura=True),
    ]),
    'special': (120, [
        PoseConfig(A.FORWARD, A.FORWARD, L.NEUTRAL, L.NEUTRAL, torso_lean=FWD, chakra_burst=True, special_aura=True),
        PoseConfig(A.UP, A.FORWARD, L.NEUTRAL, L.NEUTRAL, torso_lean=FWD, chakra_burst=True, special_aura=True),
    ]),
    'hit': (120, [
        PoseConfig(A.UP, A.BACK, L.BACK, L.FORWARD, torso_lean=BCK, head_tilt=-1),
    ]),
    'ko': (160, [
        PoseConfig(A.FORWARD, A.FORWARD, L.NEUTRAL, L.NEUTRAL, torso_lean=BCK, head_tilt=-2),
    ]),
}

SASUKE_POSES: PoseTable = {
    'idle': (250, [
        PoseConfig(A.DOWN, A.DOWN, L.NEUTRAL, L.NEUTRAL),
        PoseConfig(A.FORWARD, A.BACK, L.FORWARD, L.BACK, head_tilt=1),
    ]),
    'run': (90, [
        PoseConfig(A.FORWARD, A.BACK, L.FORWARD, L.BACK, torso_lean=FWD),
        PoseConfig(A.BACK, A.FORWARD, L.BACK, L.FORWARD, torso_lean=FWD),
        PoseConfig(A.FORWARD, A.BACK, L.FORWARD, L.AIR, torso_lean=FWD),
        PoseConfig(A.BACK, A.FORWARD, L.AIR, L.FORWARD, torso_lean=FWD),
    ]),
    'jump': (120, [
        PoseConfig(A.FORWARD, A.FORWARD, L.AIR, L.AIR, torso_lean=FWD),
    ]),
    'fall': (120, [
        PoseConfig(A.FORWARD, A.FORWARD, L.AIR, L.AIR, torso_lean=BCK),
    ]),
    'attack': (90, [
        PoseConfig(A.FORWARD, A.FORWARD, L.FORWARD, L.BACK, torso_lean=FWD, weapon=Weapon.KUNAI),
        PoseConfig(A.FORWARD, A.FORWARD, L.FORWARD, L.BACK, torso_lean=FWD, weapon=Weapon.KUNAI),
    ]),
    'special': (110, [
        PoseConfig(A.FORWARD, A.FORWARD, L.NEUTRAL, L.NEUTRAL, torso_lean=FWD, weapon=Weapon.CHIDORI, special_aura=True),
        PoseConfig(A.FORWARD, A.FORWARD, L.NEUTRAL, L.NEUTRAL, torso_lean=FWD, weapon=Weapon.CHIDORI, special_aura=True,
                   head_tilt=1),
    ]),
    'hit': (120, [
        PoseConfig(A.UP, A.BACK, L.BACK, L.FORWARD, torso_lean=BCK, head_tilt=-1),
    ]),
    'ko': (160, [
        PoseConfig(A.FORWARD, A.FORWARD, L.NEUTRAL, L.NEUTRAL, torso_lean=BCK, head_tilt=-2),
    ]),
}


def build_sheet(name: str, draw: Callable[[PoseConfig], Frame], table: PoseTable) -> CharacterSpriteSheet:
    animations = {
        action: build_animation([draw(pose) for pose in poses], duration)
        for action, (duration, poses) in table.items()
    }
    return build_character_sheet(animations, name=name)


def create_naruto_sheet() -> CharacterSpriteSheet:
    return build_sheet('naruto', draw_naruto_pose, NARUTO_POSES)


def create_sasuke_sheet() -> CharacterSpriteSheet:
    return build_sheet('sasuke', draw_sasuke_pose, SASUKE_POSES)


NARUTO_SPRITES = create_naruto_sheet()
SASUKE_SPRITES = create_sasuke_sheet()

CHARACTER_SHEETS: Dict[str, CharacterSpriteSheet] = {
    NARUTO_SPRITES.name: NARUTO_SPRITES,
    SASUKE_SPRITES.name: SASUKE_SPRITES,
}

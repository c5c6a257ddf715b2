from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

PixelColor = Optional[str]
Frame = List[List[PixelColor]]
RGB = Tuple[int, int, int]


class SpriteAssemblyError(ValueError):
    """Raised when a frame, animation or sheet breaks a construction invariant."""


class ArmPosition(Enum):
    DOWN = "down"
    FORWARD = "forward"
    UP = "up"
    BACK = "back"


class LegPosition(Enum):
    NEUTRAL = "neutral"
    FORWARD = "forward"
    BACK = "back"
    AIR = "air"


class TorsoLean(Enum):
    NEUTRAL = "neutral"
    FORWARD = "forward"
    BACK = "back"


class Weapon(Enum):
    KUNAI = "kunai"
    CHIDORI = "chidori"


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PoseConfig:
    arm_left: ArmPosition
    arm_right: ArmPosition
    leg_left: LegPosition
    leg_right: LegPosition
    torso_lean: TorsoLean = TorsoLean.NEUTRAL
    chakra_burst: bool = False
    special_aura: bool = False
    weapon: Optional[Weapon] = None
    head_tilt: int = 0


@dataclass(frozen=True)
class Animation:
    frames: Tuple[Frame, ...]
    frame_duration: int

    def __post_init__(self) -> None:
        if not self.frames:
            raise SpriteAssemblyError("animation needs at least one frame")
        if self.frame_duration <= 0:
            raise SpriteAssemblyError(f"frame duration must be positive, got {self.frame_duration}")
        sizes = {(len(f[0]) if f else 0, len(f)) for f in self.frames}
        if len(sizes) != 1:
            raise SpriteAssemblyError(f"frames have mismatched dimensions: {sorted(sizes)}")

    @property
    def size(self) -> Tuple[int, int]:
        first = self.frames[0]
        return (len(first[0]) if first else 0, len(first))

    @property
    def total_duration(self) -> int:
        return self.frame_duration * len(self.frames)

    def frame_index_at(self, elapsed_ms: float) -> int:
        return int(elapsed_ms // self.frame_duration) % len(self.frames)

    def frame_at(self, elapsed_ms: float) -> Frame:
        return self.frames[self.frame_index_at(elapsed_ms)]


@dataclass(frozen=True)
class CharacterSpriteSheet(Mapping):
    """One animation per action. Also a read-only mapping keyed by action name."""

    idle: Animation
    run: Animation
    jump: Animation
    fall: Animation
    attack: Animation
    special: Animation
    hit: Animation
    ko: Animation
    name: str = field(default="", compare=False)

    def __getitem__(self, action: str) -> Animation:
        if action not in ACTION_NAMES:
            raise KeyError(action)
        return getattr(self, action)

    def __iter__(self) -> Iterator[str]:
        return iter(ACTION_NAMES)

    def __len__(self) -> int:
        return len(ACTION_NAMES)

    def as_dict(self) -> Dict[str, Animation]:
        return dict(self)


@dataclass(frozen=True)
class EffectSpriteSheet:
    name: str
    animation: Animation


ACTION_NAMES: Tuple[str, ...] = ("idle", "run", "jump", "fall", "attack", "special", "hit", "ko")

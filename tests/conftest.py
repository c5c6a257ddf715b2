"""Shared pytest fixtures for sprite tests."""

import pytest

from fighter_sprites.frame import create_frame
from fighter_sprites.types import ArmPosition, LegPosition, PoseConfig, TorsoLean, Weapon


# =============================================================================
# Frame Fixtures
# =============================================================================


@pytest.fixture
def small_frame():
    """A blank 5x5 frame."""
    return create_frame(5, 5)


@pytest.fixture
def effect_frame():
    """A blank 32x32 frame."""
    return create_frame(32, 32)


# =============================================================================
# Pose Fixtures
# =============================================================================


@pytest.fixture
def standing_pose() -> PoseConfig:
    """Arms down, legs neutral, no lean or effects."""
    return PoseConfig(ArmPosition.DOWN, ArmPosition.DOWN, LegPosition.NEUTRAL, LegPosition.NEUTRAL)


@pytest.fixture
def leaning_pose() -> PoseConfig:
    return PoseConfig(
        ArmPosition.DOWN,
        ArmPosition.DOWN,
        LegPosition.NEUTRAL,
        LegPosition.NEUTRAL,
        torso_lean=TorsoLean.FORWARD,
    )


@pytest.fixture
def chidori_pose() -> PoseConfig:
    """Both arms forward holding a chidori charge, no aura."""
    return PoseConfig(
        ArmPosition.FORWARD,
        ArmPosition.FORWARD,
        LegPosition.NEUTRAL,
        LegPosition.NEUTRAL,
        torso_lean=TorsoLean.FORWARD,
        weapon=Weapon.CHIDORI,
    )

"""
Configuration structures for the world and its emitters.

Every field has an explicit default taken from ``constants`` so a bare
``WorldConfig()`` describes the stock 500x500 scene.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

import constants
from .Vec2 import Vec2


@dataclass
class WorldConfig:
    width: int = constants.WIDTH
    height: int = constants.HEIGHT
    fps: int = constants.FPS
    background: Tuple[int, int, int] = constants.BACKGROUND_COLOR


@dataclass
class EmitterConfig:
    coords: Vec2 = field(default_factory=Vec2)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0, -constants.EMITTER_FORCE))
    max_amount: int = constants.EMITTER_MAX_AMOUNT
    creation_amount: int = constants.EMITTER_CREATION_AMOUNT
    particle_size: int = constants.EMITTER_PARTICLE_SIZE
    scatter: float = constants.EMITTER_SCATTER
    is_controllable: bool = False

    def __post_init__(self):
        if not isinstance(self.coords, Vec2):
            self.coords = Vec2(self.coords[0], self.coords[1])
        if not isinstance(self.gravity, Vec2):
            self.gravity = Vec2(self.gravity[0], self.gravity[1])
        if self.max_amount < 0:
            raise ValueError(f"max_amount must be >= 0, got {self.max_amount}")
        if self.creation_amount < 0:
            raise ValueError(f"creation_amount must be >= 0, got {self.creation_amount}")
        if self.particle_size < constants.MIN_PARTICLE_SIZE:
            raise ValueError(f"particle_size must be >= {constants.MIN_PARTICLE_SIZE}, got {self.particle_size}")
        self.scatter = max(constants.MIN_SCATTER, float(self.scatter))
        self.is_controllable = bool(self.is_controllable)


def default_emitters() -> List[EmitterConfig]:
    """The four stock emitters: one per edge, each pushing toward the center."""
    f = constants.EMITTER_FORCE
    return [
        EmitterConfig(coords=Vec2(250, 450), gravity=Vec2(0, -f), is_controllable=True),
        EmitterConfig(coords=Vec2(250, 50), gravity=Vec2(0, f)),
        EmitterConfig(coords=Vec2(50, 250), gravity=Vec2(f, 0)),
        EmitterConfig(coords=Vec2(450, 250), gravity=Vec2(-f, 0)),
    ]

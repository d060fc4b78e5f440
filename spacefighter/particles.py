"""Particles, their initializers and updaters, and the emitter that spawns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple

from spacefighter.geometry import Vector2

Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class GameTime:
    """Timing values for one frame, in seconds."""

    elapsed_time: float = 0.0
    total_time: float = 0.0


@dataclass
class Particle:
    """A basic particle that moves with a constant velocity for a limited life."""

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    color: Color = WHITE
    scale: float = 1.0
    life_span: float = 0.0
    life_remaining: float = 0.0
    life_percentage: float = 0.0

    def is_active(self) -> bool:
        """Return True while the particle has life remaining."""
        return self.life_remaining > 0

    def initialize(self, position: Vector2) -> None:
        """Place the particle and restore its full life."""
        self.position = position.copy()
        self.life_remaining = self.life_span

    def update(self, game_time: GameTime) -> None:
        """Age the particle and move it along its velocity."""
        elapsed = game_time.elapsed_time
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        self.life_percentage = (
            self.life_remaining / self.life_span if self.life_span else 0.0
        )
        self.position += self.velocity * elapsed


class ParticleInitializer:
    """Gives new particles a fixed life span, velocity, scale and color."""

    def __init__(self, color: Color = WHITE, scale: float = 1.0) -> None:
        self.color = color
        self.scale = scale
        self.life_span = 0.5
        self.velocity = Vector2.UNIT_Y * 50

    def initialize(self, particle: Particle, position: Vector2) -> None:
        """Configure a particle and start it at the given position."""
        particle.life_span = self.life_span
        particle.velocity = self.velocity.copy()
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleUpdater:
    """Advances a particle by one frame."""

    def update(self, particle: Particle, game_time: GameTime) -> None:
        """Update the particle with the frame's timing values."""
        particle.update(game_time)


class _ParticlePool(Protocol):
    def get_inactive_particle(self) -> Optional[Particle]: ...


class ParticleEmitter:
    """Takes inactive particles from a pool and initializes them at its position."""

    def __init__(self, initializer: ParticleInitializer) -> None:
        self.initializer = initializer
        self.position = Vector2()
        self.max_particles_per_second = 100
        self.remaining_particles = 0.0
        self.pool: Optional[_ParticlePool] = None

    def emit(self, amount: float, game_time: GameTime) -> None:
        """Emit particles; amount in [0, 1] scales the per-second maximum."""
        count_f = amount * self.max_particles_per_second * game_time.elapsed_time
        count = int(count_f)
        self.remaining_particles += count_f - count

        while count:
            if self.pool is None:
                raise RuntimeError("no particle pool set for the emitter")
            particle = self.pool.get_inactive_particle()
            if particle is None:
                self.remaining_particles += count
                return
            self.initializer.initialize(particle, self.position)
            count -= 1
"""
Pyroshow Entities

Rocket and Particle. Both take a random source (random.Random or
anything with random() and uniform()) so tests can replay a fixed
sequence.
"""
import math
import random
from contextlib import contextmanager
from typing import List, Optional, Tuple

from .colors import hsl_to_rgb
from .config import (
    ROCKET_SPEED,
    ROCKET_RADIUS,
    PARTICLES_PER_EXPLOSION,
    PARTICLE_RADIUS,
    PARTICLE_GRAVITY,
    PARTICLE_DRAG,
    PARTICLE_MIN_SPEED,
    PARTICLE_MAX_SPEED,
    PARTICLE_MIN_DECAY,
    PARTICLE_MAX_DECAY,
)


FADE_EPSILON = 1e-12


@contextmanager
def paint_opacity(surface, alpha: float):
    """Set the surface's global alpha for the duration of a draw."""
    surface.set_global_alpha(alpha)
    try:
        yield surface
    finally:
        surface.set_global_alpha(1)


def draw_dot(surface, x: float, y: float, radius: float, rgb: Tuple[int, int, int]) -> None:
    surface.begin_path()
    surface.arc(x, y, radius)
    surface.set_fill_color(*rgb)
    surface.fill()


class Particle:
    """A spark from an exploded rocket.

    Falls under gravity, slows down with drag and fades out by `decay`
    every tick. Dead once alpha reaches zero.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 decay: float, color: Tuple[int, int, int],
                 gravity: float = PARTICLE_GRAVITY, drag: float = PARTICLE_DRAG):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.gravity = gravity
        self.drag = drag
        self.alpha = 1.0
        self.decay = decay
        self.age = 0
        self.color = color
        self.alive = True

    @classmethod
    def spawn(cls, origin: Tuple[float, float], rng: Optional[random.Random] = None) -> "Particle":
        """Create a particle at origin flying in a random direction."""
        rng = rng or random
        speed = rng.uniform(PARTICLE_MIN_SPEED, PARTICLE_MAX_SPEED)
        angle = rng.uniform(0, math.pi * 2)
        decay = rng.uniform(PARTICLE_MIN_DECAY, PARTICLE_MAX_DECAY)
        color = (
            int(rng.random() * 255),
            int(rng.random() * 255),
            int(rng.random() * 255),
        )
        x, y = origin
        return cls(
            x=x, y=y,
            vx=math.cos(angle) * speed,
            vy=math.sin(angle) * speed,
            decay=decay,
            color=color,
        )

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def advance(self) -> None:
        """Apply drag and gravity, move, fade."""
        self.vx *= self.drag
        self.vy *= self.drag
        self.vy += self.gravity
        self.x += self.vx
        self.y += self.vy
        # alpha follows age exactly, reaching zero after ceil(1 / decay) ticks
        self.age += 1
        self.alpha = 1.0 - self.decay * self.age
        if self.alpha <= FADE_EPSILON:
            self.alpha = min(self.alpha, 0.0)
            self.alive = False

    def render(self, surface) -> None:
        with paint_opacity(surface, self.alpha):
            draw_dot(surface, self.x, self.y, PARTICLE_RADIUS, self.color)


class Rocket:
    """Flies in a straight line to its target, then bursts into particles."""

    speed = ROCKET_SPEED

    def __init__(self, x: float, y: float, target_x: float, target_y: float,
                 rng: Optional[random.Random] = None):
        self.x = x
        self.y = y
        self.target_x = target_x
        self.target_y = target_y
        self.rng = rng or random

        self.angle = math.atan2(target_y - y, target_x - x)
        self.vx = math.cos(self.angle) * self.speed
        self.vy = math.sin(self.angle) * self.speed
        self.distance_to_target = math.hypot(target_x - x, target_y - y)
        self.distance_traveled = 0.0
        self.alive = True

    @classmethod
    def launch(cls, origin: Tuple[float, float], target: Tuple[float, float],
               rng: Optional[random.Random] = None) -> "Rocket":
        return cls(origin[0], origin[1], target[0], target[1], rng=rng)

    @property
    def pos(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def target(self) -> Tuple[float, float]:
        return (self.target_x, self.target_y)

    def advance(self) -> List[Particle]:
        """Move one tick. Returns the burst particles on the tick it arrives."""
        if not self.alive:
            return []

        self.x += self.vx
        self.y += self.vy
        self.distance_traveled += self.speed

        if self.distance_traveled >= self.distance_to_target:
            self.alive = False
            return self.explode()
        return []

    def explode(self) -> List[Particle]:
        return [Particle.spawn(self.pos, self.rng) for _ in range(PARTICLES_PER_EXPLOSION)]

    def render(self, surface) -> None:
        # New colour every frame, so the rocket flickers on its way up
        hue = math.floor(self.rng.random() * 360)
        rgb = hsl_to_rgb(hue, 1, self.rng.random())
        draw_dot(surface, self.x, self.y, ROCKET_RADIUS, rgb)

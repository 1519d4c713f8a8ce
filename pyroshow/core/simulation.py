"""
Simulation Loop
Owns the active rockets and particles and drives one frame per tick.
"""
import random
from typing import List, Optional, Iterable

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, FPS, TRAIL_ALPHA
from .entities import Rocket, Particle
from .events import (
    EventBus,
    EventType,
    InputEvent,
    RocketLaunchedEvent,
    RocketExplodedEvent,
    SimulationStoppedEvent,
)


class Simulation:
    """Fireworks simulation context.

    Created once at startup. Each tick drains the surface's events,
    advances every entity, drops the dead ones and draws the frame
    over a translucent black overlay, which leaves fading trails.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 fps: int = FPS, rng: Optional[random.Random] = None,
                 bus: Optional[EventBus] = None):
        self.width = width
        self.height = height
        self.fps = fps
        self.rng = rng or random.Random()
        self.events = bus or EventBus()

        self.rockets: List[Rocket] = []
        # Rockets that burst this tick, drawn once at their target
        self.exploded: List[Rocket] = []
        self.particles: List[Particle] = []

        self.running = True
        self.ticks = 0

    @property
    def origin(self) -> tuple:
        """Launch point: bottom centre of the canvas."""
        return (self.width / 2, self.height)

    @property
    def frame_ms(self) -> float:
        return 1000 / self.fps

    # === Input ===

    def launch(self, x: float, y: float) -> Rocket:
        """Launch a rocket from the origin toward (x, y)."""
        rocket = Rocket.launch(self.origin, (x, y), rng=self.rng)
        self.rockets.append(rocket)
        self.events.publish(RocketLaunchedEvent(origin=self.origin, target=(x, y)))
        return rocket

    def handle_events(self, events: Iterable[InputEvent]) -> bool:
        """Process drained input events in order.

        Returns False as soon as a quit event is seen; anything queued
        after it is dropped. Malformed events are ignored.
        """
        for event in events:
            event_type = getattr(event, "type", None)
            if event_type == EventType.QUIT:
                self.running = False
                return False
            if event_type == EventType.MOUSE_BUTTON_DOWN and getattr(event, "has_position", False):
                self.launch(event.x, event.y)
        return True

    # === Simulation ===

    def step(self) -> None:
        """Advance all entities by one tick without drawing anything."""
        spawned: List[Particle] = []
        for rocket in self.rockets:
            burst = rocket.advance()
            if burst:
                spawned.extend(burst)
                self.events.publish(RocketExplodedEvent(pos=rocket.pos, particle_count=len(burst)))
        self.exploded = [r for r in self.rockets if not r.alive]
        self.rockets = [r for r in self.rockets if r.alive]

        for particle in self.particles:
            particle.advance()
        # New bursts join after the advance so they start at full alpha
        self.particles = [p for p in self.particles if p.alive] + spawned

        self.ticks += 1

    # === Presentation ===

    def render(self, surface) -> None:
        """Draw the trail overlay, then every live entity."""
        surface.set_fill_color(0, 0, 0, TRAIL_ALPHA)
        surface.fill_rect(0, 0, self.width, self.height)

        for rocket in self.rockets + self.exploded:
            rocket.render(surface)
        for particle in self.particles:
            particle.render(surface)

    # === Frame Driver ===

    def tick(self, surface) -> bool:
        """Run one full frame against a surface.

        Returns False once the loop has ended; the surface has been
        released by then.
        """
        if not self.running:
            return False

        if not self.handle_events(drain_events(surface)):
            surface.quit()
            self.events.publish(SimulationStoppedEvent(ticks=self.ticks))
            return False

        self.step()
        self.render(surface)
        surface.show()
        surface.sleep(self.frame_ms)
        return True

    def run(self, surface, max_ticks: Optional[int] = None) -> int:
        """Tick until quit (or max_ticks). Returns the number of ticks run."""
        start = self.ticks
        while max_ticks is None or self.ticks - start < max_ticks:
            if not self.tick(surface):
                break
        return self.ticks - start

    def clear(self) -> None:
        """Remove all rockets and particles."""
        self.rockets.clear()
        self.exploded.clear()
        self.particles.clear()


def drain_events(surface) -> List[InputEvent]:
    """Poll the surface until it has no pending events."""
    events = []
    while True:
        event = surface.poll_event()
        if event is None:
            break
        events.append(event)
    return events

"""
Pyroshow Handlers

Subscribe to the simulation's EventBus. The Simulation publishes
events and knows nothing about who listens.
"""
from .events import EventBus, RocketLaunchedEvent, RocketExplodedEvent, SimulationStoppedEvent


class LoggerHandler:
    """Simple handler that logs events to console."""

    def __init__(self, bus: EventBus, verbose: bool = False):
        self.verbose = verbose
        bus.subscribe(SimulationStoppedEvent, self.on_stopped)
        if verbose:
            bus.subscribe(RocketLaunchedEvent, self.on_launch)
            bus.subscribe(RocketExplodedEvent, self.on_explode)

    def on_launch(self, event: RocketLaunchedEvent) -> None:
        ox, oy = event.origin
        tx, ty = event.target
        print(f"[LAUNCH] Rocket from ({ox:.0f}, {oy:.0f}) to ({tx:.0f}, {ty:.0f})")

    def on_explode(self, event: RocketExplodedEvent) -> None:
        print(f"[EXPLODE] {event.particle_count} particles at ({event.pos[0]:.1f}, {event.pos[1]:.1f})")

    def on_stopped(self, event: SimulationStoppedEvent) -> None:
        print(f"[STOP] Quit after {event.ticks} ticks")


class StatsHandler:
    """Counts launches and explosions over a session."""

    def __init__(self, bus: EventBus):
        self.launched = 0
        self.exploded = 0
        self.particles_spawned = 0
        bus.subscribe(RocketLaunchedEvent, self.on_launch)
        bus.subscribe(RocketExplodedEvent, self.on_explode)

    def on_launch(self, event: RocketLaunchedEvent) -> None:
        self.launched += 1

    def on_explode(self, event: RocketExplodedEvent) -> None:
        self.exploded += 1
        self.particles_spawned += event.particle_count

    def summary(self) -> str:
        return (f"Rockets launched: {self.launched}, exploded: {self.exploded}, "
                f"particles spawned: {self.particles_spawned}")

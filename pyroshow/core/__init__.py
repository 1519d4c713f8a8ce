"""Pyroshow Core - Simulation Logic"""
from .colors import hsl_to_rgb
from .config import Settings, ConfigError, load_settings
from .entities import Rocket, Particle
from .events import (
    EventBus,
    EventType,
    InputEvent,
    RocketLaunchedEvent,
    RocketExplodedEvent,
    SimulationStoppedEvent,
)
from .handlers import LoggerHandler, StatsHandler
from .simulation import Simulation, drain_events

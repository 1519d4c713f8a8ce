"""
Pyroshow Events

Two kinds of events live here:
- Input events, produced by a frontend's poll_event() and drained
  by the Simulation every tick.
- Simulation events, published on the EventBus so that logging and
  statistics can react without the Simulation knowing about them.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Any, Optional


# === Input Events ===

class EventType:
    """Input event type tags."""
    QUIT = 0x100
    KEY_DOWN = 0x300
    KEY_UP = 0x301
    MOUSE_MOTION = 0x400
    MOUSE_BUTTON_DOWN = 0x401
    MOUSE_BUTTON_UP = 0x402


@dataclass
class InputEvent:
    """A single event from the event source."""
    type: int
    x: Optional[float] = None
    y: Optional[float] = None
    button: Optional[int] = None
    key: Optional[int] = None

    @property
    def has_position(self) -> bool:
        return _is_number(self.x) and _is_number(self.y)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# === Simulation Events ===

@dataclass
class RocketLaunchedEvent:
    """Fired when a pointer press launches a rocket."""
    origin: tuple      # (x, y)
    target: tuple      # (x, y)


@dataclass
class RocketExplodedEvent:
    """Fired when a rocket reaches its target and bursts."""
    pos: tuple         # (x, y)
    particle_count: int


@dataclass
class SimulationStoppedEvent:
    """Fired once when a quit event ends the loop."""
    ticks: int


# === EventBus ===

class EventBus:
    """Dispatches simulation events to subscribed handlers."""

    def __init__(self):
        self._subscribers: Dict[type, List[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Register a handler for an event type."""
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Remove a handler from an event type."""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Any) -> None:
        """Notify all handlers subscribed to this event's type."""
        for handler in list(self._subscribers.get(type(event), [])):
            handler(event)

    def clear(self) -> None:
        """Clear all subscribers."""
        self._subscribers.clear()

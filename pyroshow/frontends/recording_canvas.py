"""
Recording Canvas
Headless canvas with the same interface as PygameCanvas.

Nothing is drawn; every call is appended to `calls`, and each fill()
records the circles it would have painted in `dots`. Input comes
from a scripted queue.
"""
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.config import SCREEN_WIDTH, SCREEN_HEIGHT
from ..core.events import InputEvent


@dataclass
class Dot:
    """A filled circle as it would appear on screen."""
    x: float
    y: float
    radius: float
    color: Tuple[int, int, int]
    alpha: float


class RecordingCanvas:
    """Canvas that records draw calls instead of drawing them."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 events: Iterable[InputEvent] = ()):
        self.width = width
        self.height = height
        self.pending = deque(events)

        self.calls: List[tuple] = []
        self.dots: List[Dot] = []
        self.frames = 0
        self.sleeps: List[float] = []
        self.closed = False

        self.fill_color: Tuple[int, int, int, int] = (255, 255, 255, 255)
        self.global_alpha = 1.0
        self._path: List[Tuple[float, float, float]] = []

    def push_event(self, event: InputEvent) -> None:
        self.pending.append(event)

    # === Drawing ===

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))
        self._path = []

    def arc(self, x: float, y: float, radius: float) -> None:
        self.calls.append(("arc", x, y, radius))
        self._path.append((x, y, radius))

    def set_fill_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        self.calls.append(("set_fill_color", r, g, b, a))
        self.fill_color = (r, g, b, a)

    def set_global_alpha(self, alpha: float) -> None:
        self.calls.append(("set_global_alpha", alpha))
        self.global_alpha = alpha

    def fill(self) -> None:
        self.calls.append(("fill",))
        r, g, b, a = self.fill_color
        for x, y, radius in self._path:
            self.dots.append(Dot(x, y, radius, (r, g, b), self.global_alpha * a / 255))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("fill_rect", x, y, w, h))

    def show(self) -> None:
        self.calls.append(("show",))
        self.frames += 1

    # === Events ===

    def poll_event(self) -> Optional[InputEvent]:
        if self.pending:
            return self.pending.popleft()
        return None

    # === Clock ===

    def sleep(self, ms: float) -> None:
        self.sleeps.append(ms)

    def quit(self) -> None:
        if not self.closed:
            self.calls.append(("quit",))
            self.closed = True

    def names(self) -> List[str]:
        """Names of the recorded calls, in order."""
        return [call[0] for call in self.calls]

    def clear(self) -> None:
        """Forget recorded calls (keeps pending events)."""
        self.calls.clear()
        self.dots.clear()

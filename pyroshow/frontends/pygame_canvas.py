"""
Pygame Canvas
Window-backed drawing surface, event source and clock.

Fills with an alpha below 255 go through an SRCALPHA layer and are
blitted onto the screen, which is how the trail overlay and the
fading particles get their translucency.
"""
import pygame
from typing import List, Optional, Tuple

from ..core.config import SCREEN_WIDTH, SCREEN_HEIGHT, TITLE
from ..core.events import EventType, InputEvent


class PygameCanvas:
    """Pygame implementation of the canvas interface."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 title: str = TITLE, quit_on_escape: bool = True):
        pygame.init()
        pygame.display.set_caption(title)

        self.width = width
        self.height = height
        self.quit_on_escape = quit_on_escape

        self.screen = pygame.display.set_mode((width, height))
        self.closed = False

        self._path: List[Tuple[float, float, float]] = []
        self._fill_color: Tuple[int, int, int, int] = (255, 255, 255, 255)
        self._global_alpha = 1.0
        self._overlay: Optional[pygame.Surface] = None

    # === Drawing ===

    def begin_path(self) -> None:
        self._path = []

    def arc(self, x: float, y: float, radius: float) -> None:
        """Add a full circle to the current path."""
        self._path.append((x, y, radius))

    def set_fill_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        self._fill_color = (int(r), int(g), int(b), int(a))

    def set_global_alpha(self, alpha: float) -> None:
        self._global_alpha = max(0.0, min(1.0, float(alpha)))

    @property
    def global_alpha(self) -> float:
        return self._global_alpha

    def _effective_color(self) -> Tuple[int, int, int, int]:
        r, g, b, a = self._fill_color
        return (r, g, b, int(a * self._global_alpha))

    def fill(self) -> None:
        """Fill every circle in the current path."""
        r, g, b, a = self._effective_color()
        if a <= 0:
            return

        for x, y, radius in self._path:
            if a >= 255:
                pygame.draw.circle(self.screen, (r, g, b), (int(x), int(y)), int(radius))
                continue

            size = int(radius) * 2 + 1
            dot = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(dot, (r, g, b, a), (size // 2, size // 2), int(radius))
            self.screen.blit(dot, (int(x) - size // 2, int(y) - size // 2))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        r, g, b, a = self._effective_color()
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        if a >= 255:
            pygame.draw.rect(self.screen, (r, g, b), rect)
            return
        if a <= 0:
            return

        if self._overlay is None or self._overlay.get_size() != rect.size:
            self._overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        self._overlay.fill((r, g, b, a))
        self.screen.blit(self._overlay, rect.topleft)

    def show(self) -> None:
        """Present the frame."""
        pygame.display.flip()

    # === Events ===

    def poll_event(self) -> Optional[InputEvent]:
        """Return the next translatable pending event, or None."""
        while True:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return None
            translated = self._translate(event)
            if translated is not None:
                return translated

    def _translate(self, event) -> Optional[InputEvent]:
        if event.type == pygame.QUIT:
            return InputEvent(EventType.QUIT)
        if event.type == pygame.KEYDOWN:
            if self.quit_on_escape and event.key == pygame.K_ESCAPE:
                return InputEvent(EventType.QUIT)
            return InputEvent(EventType.KEY_DOWN, key=event.key)
        if event.type == pygame.KEYUP:
            return InputEvent(EventType.KEY_UP, key=event.key)
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            return InputEvent(EventType.MOUSE_MOTION, x=x, y=y)
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            return InputEvent(EventType.MOUSE_BUTTON_DOWN, x=x, y=y, button=event.button)
        if event.type == pygame.MOUSEBUTTONUP:
            x, y = event.pos
            return InputEvent(EventType.MOUSE_BUTTON_UP, x=x, y=y, button=event.button)
        return None

    # === Clock ===

    def sleep(self, ms: float) -> None:
        """Fixed frame delay."""
        pygame.time.wait(int(round(ms)))

    def quit(self) -> None:
        """Release the window."""
        if not self.closed:
            pygame.quit()
            self.closed = True

#!/usr/bin/env python3
"""
Pyroshow - Main Entry Point
===========================

Run with: python -m pyroshow.main [--verbose]

Click anywhere to launch a rocket from the bottom of the window.
ESC or closing the window quits.

Headless mode runs the same loop on a RecordingCanvas, e.g.:

    pyroshow --headless --ticks 300 --click 400,100 --click 200,250
"""
import argparse
import random
import sys
from typing import List, Optional, Tuple

from pyroshow.core.config import ConfigError, load_settings
from pyroshow.core.events import EventType, InputEvent
from pyroshow.core.handlers import LoggerHandler, StatsHandler
from pyroshow.core.simulation import Simulation


HEADLESS_DEFAULT_TICKS = 600


def parse_click(value: str) -> Tuple[float, float]:
    """argparse type for X,Y click positions."""
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {value!r}")
    return x, y


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pyroshow - click to launch fireworks")
    parser.add_argument('--width', type=int, help='Canvas width in pixels')
    parser.add_argument('--height', type=int, help='Canvas height in pixels')
    parser.add_argument('--fps', type=int, help='Ticks per second')
    parser.add_argument('--seed', type=int, help='Seed for the random source')
    parser.add_argument('--config', help='JSON settings file (width, height, fps, title)')
    parser.add_argument('--headless', action='store_true',
                        help='Run without a window on a recording canvas')
    parser.add_argument('--ticks', type=int,
                        help=f'Stop after N ticks (headless default: {HEADLESS_DEFAULT_TICKS})')
    parser.add_argument('--click', type=parse_click, action='append', default=[],
                        metavar='X,Y', help='Launch a rocket at X,Y on the first tick')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every launch and explosion')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
        for key in ("width", "height", "fps"):
            value = getattr(args, key)
            if value is not None:
                setattr(settings, key, value)
        settings.validate()
    except (ConfigError, OSError) as e:
        parser.error(str(e))

    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must not be negative")

    rng = random.Random(args.seed)
    simulation = Simulation(settings.width, settings.height, fps=settings.fps, rng=rng)
    LoggerHandler(simulation.events, verbose=args.verbose)
    stats = StatsHandler(simulation.events)

    clicks = [InputEvent(EventType.MOUSE_BUTTON_DOWN, x=x, y=y, button=1) for x, y in args.click]

    max_ticks = args.ticks
    if args.headless:
        from pyroshow.frontends.recording_canvas import RecordingCanvas
        canvas = RecordingCanvas(settings.width, settings.height)
        if max_ticks is None:
            max_ticks = HEADLESS_DEFAULT_TICKS
    else:
        from pyroshow.frontends.pygame_canvas import PygameCanvas
        canvas = PygameCanvas(settings.width, settings.height, title=settings.title)
        print("Pyroshow started!")
        print("Controls: LMB launch rocket, ESC quit")

    try:
        simulation.handle_events(clicks)
        simulation.run(canvas, max_ticks=max_ticks)
    except KeyboardInterrupt:
        pass
    finally:
        canvas.quit()

    print(f"\n{stats.summary()}")
    print(f"Active at exit: {len(simulation.rockets)} rockets, {len(simulation.particles)} particles")
    return 0


if __name__ == '__main__':
    sys.exit(main())

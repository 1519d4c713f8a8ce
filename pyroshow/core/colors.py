"""
Colour helpers.
"""
from typing import Tuple


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL to an integer RGB triple.

    Hue is in degrees and wraps around. Saturation and lightness are
    fractions in [0, 1]; values above 1 are read as percentages.
    """
    h = h % 360
    if s > 1:
        s /= 100
    if l > 1:
        l /= 100

    c = (1 - abs(2 * l - 1)) * s
    hh = h / 60
    x = c * (1 - abs(hh % 2 - 1))

    if hh < 1:
        r1, g1, b1 = c, x, 0.0
    elif hh < 2:
        r1, g1, b1 = x, c, 0.0
    elif hh < 3:
        r1, g1, b1 = 0.0, c, x
    elif hh < 4:
        r1, g1, b1 = 0.0, x, c
    elif hh < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    m = l - c / 2
    return (
        _channel(r1 + m),
        _channel(g1 + m),
        _channel(b1 + m),
    )


def _channel(value: float) -> int:
    # Round half up, like Math.round, instead of Python's banker's rounding
    return min(255, max(0, int(value * 255 + 0.5)))

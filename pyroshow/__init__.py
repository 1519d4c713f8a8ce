"""
Pyroshow
Click-launched fireworks on a 2D canvas.

Rockets fly from the bottom centre of the canvas to the clicked point
and burst into particles that fall, slow down and fade out.
"""
__version__ = "0.1.0"

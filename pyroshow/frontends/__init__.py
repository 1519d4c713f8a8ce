"""
Pyroshow Frontends
Drawing surfaces the Simulation can run on.

DUCK TYPING:
Both canvases have the same interface:
- begin_path(), arc(x, y, radius), set_fill_color(r, g, b, a=255), fill()
- set_global_alpha(alpha), fill_rect(x, y, w, h)
- show(), quit(), poll_event() -> InputEvent | None, sleep(ms)

    # Real window
    canvas = PygameCanvas(800, 600)

    # Or headless, for tests and scripted runs
    canvas = RecordingCanvas(800, 600, events=[...])

    simulation.run(canvas)
"""

# Note: Don't import canvases here to avoid importing pygame
# when it might not be needed. Import directly in main.py instead.

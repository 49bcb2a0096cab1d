"""logic — Game systems package.

Top-level modules
-----------------
movement       — direction → (dx, dy) resolution and the per-frame step
input_events   — raw pygame events → closed set of input events
input_router   — input events → game-state changes (press/release/fire/quit)
"""

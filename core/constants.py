"""core/constants.py — Shared defaults used across the codebase.

Every value here is the fallback for a key in ``core/data/tuning.toml``;
the tuning file wins when it sets the key.

Unit System
-----------
Positions are integer **pixels** in world space, with the world origin
mapped to the centre of the window by the renderer's camera offset.
Speeds are pixels per frame (not per second): the loop runs at a fixed
``FRAME_RATE`` and every live entity advances exactly once per frame.
"""

# ── Window ──────────────────────────────────────────────────────────
WINDOW_TITLE = "Birdshot"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
FRAME_RATE = 20                 # frames per second

# ── Movement ────────────────────────────────────────────────────────
PLAYER_MOVEMENT_SPEED = 8       # px / frame while a direction is held
PROJECTILE_SPEED = 10           # px / frame

# Key-release policies
#   remove — drop only the released direction (other held keys keep moving)
#   stop   — drop the direction and zero the speed (single-direction parity)
RELEASE_REMOVE = "remove"
RELEASE_STOP = "stop"
RELEASE_POLICIES = (RELEASE_REMOVE, RELEASE_STOP)

# ── Sprites ─────────────────────────────────────────────────────────
PLAYER_SPRITE_SIZE = 32         # px, square
PROJECTILE_SIZE = 24            # px, square

PLAYER_TEXTURE = "tweety_bird.png"
PROJECTILE_TEXTURE = "bomb.png"

# Render
CLEAR_COLOR = (0, 0, 0)

# ── Diagnostics ─────────────────────────────────────────────────────
DEBUG = True

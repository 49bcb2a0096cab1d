"""core/errors.py — Fatal error types.

Only startup problems get their own type.  A failure while drawing a
frame is whatever ``pygame.error`` the display raised; it propagates
unchanged out of ``App.run`` and ends the process.
"""

from __future__ import annotations


class SetupError(RuntimeError):
    """Window, display, texture or tuning setup failed — abort startup."""

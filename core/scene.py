"""
core/scene.py — Scene interface

Every screen in the game is a Scene. The app holds a stack of them.
Only the top scene gets events, update and draw calls.

To make a new scene:

    class MyScene(Scene):
        def on_enter(self, app):
            # setup, called when scene becomes active
            pass

        def handle_events(self, events, app):
            # translated input events for this frame;
            # return False to stop the game loop
            return True

        def update(self, app):
            # one fixed simulation step
            pass

        def draw(self, surface, app):
            # draw to the surface
            pass
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App
    from logic.input_events import InputEvent


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes active (pushed or revealed)."""
        pass

    def on_exit(self, app: App):
        """Called when this scene is removed or covered."""
        pass

    def handle_events(self, events: list[InputEvent], app: App) -> bool:
        """Process this frame's input.  Return False to quit."""
        return True

    def update(self, app: App):
        """Advance the simulation by one frame."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        """Draw to the screen surface."""
        pass

"""scenes/play_scene.py — The one and only gameplay scene.

Each frame:
  1. ``handle_events`` — drain input into the game state (may quit)
  2. ``update``        — movement step for player + projectiles
  3. ``draw``          — clear, projectiles, player

The scene owns the GameState; nothing else holds a reference to it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.scene import Scene
from components.resources import GameState
from logic.input_router import drain_events
from logic.movement import movement_system
from scenes.play_draw import draw_frame

if TYPE_CHECKING:
    import pygame
    from core.app import App
    from core.assets import Textures
    from logic.input_events import InputEvent


class PlayScene(Scene):
    def __init__(self, state: GameState, textures: Textures):
        self.state = state
        self.textures = textures

    def on_enter(self, app: App):
        app.log.record("app", f"play scene entered "
                              f"(player at {self.state.player.position.as_tuple()})",
                       frame=self.state.frame)

    def handle_events(self, events: list[InputEvent], app: App) -> bool:
        return drain_events(self.state, events)

    def update(self, app: App):
        movement_system(self.state)

    def draw(self, surface: pygame.Surface, app: App):
        draw_frame(surface, self.state, self.textures)

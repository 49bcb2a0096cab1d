"""scenes/play_draw.py — Rendering helpers for the play scene.

All pure-draw functions live here so that PlayScene.draw() stays thin.
World coordinates are centred: world (0, 0) lands in the middle of the
output surface, whatever its current size.

Draw order each frame: clear → projectiles → player.  Presenting the
frame is the App's job.  Blit failures are not caught here.
"""

from __future__ import annotations
import pygame

from components.spatial import Position
from components.resources import GameState
from core.assets import Textures
from core.constants import CLEAR_COLOR


# ── Camera ──────────────────────────────────────────────────────────

def camera_offset(output_size: tuple[int, int]) -> tuple[int, int]:
    """Screen translation that maps world (0, 0) to the output centre."""
    w, h = output_size
    return w // 2, h // 2


def screen_rect(pos: Position, width: int, height: int,
                output_size: tuple[int, int]) -> pygame.Rect:
    """*width*×*height* screen rect centred on *pos* after the camera offset."""
    ox, oy = camera_offset(output_size)
    rect = pygame.Rect(0, 0, width, height)
    rect.center = (pos.x + ox, pos.y + oy)
    return rect


# ── Frame ───────────────────────────────────────────────────────────

def draw_projectiles(surface: pygame.Surface, state: GameState,
                     texture: pygame.Surface,
                     output_size: tuple[int, int]) -> None:
    size = state.rules.projectile_size
    src = pygame.Rect(0, 0, size, size)
    for proj in state.projectiles:
        surface.blit(texture, screen_rect(proj.position, size, size, output_size), src)


def draw_player(surface: pygame.Surface, state: GameState,
                texture: pygame.Surface,
                output_size: tuple[int, int]) -> None:
    player = state.player
    dest = screen_rect(player.position, player.sprite.width,
                       player.sprite.height, output_size)
    surface.blit(texture, dest, player.sprite)


def draw_frame(surface: pygame.Surface, state: GameState,
               textures: Textures) -> None:
    output_size = surface.get_size()
    surface.fill(CLEAR_COLOR)
    draw_projectiles(surface, state, textures.projectile, output_size)
    draw_player(surface, state, textures.player, output_size)

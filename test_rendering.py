"""test_rendering.py — Camera mapping, draw order and failure propagation.

Uses off-screen surfaces only; no window is opened.

Run:  python test_rendering.py      (or collect with pytest)
"""
from __future__ import annotations
import sys, traceback
import pygame

from components import Position, Player, Projectile, GameRules, GameState
from core.assets import Textures
from scenes.play_draw import camera_offset, screen_rect, draw_frame


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


class RecordingSurface:
    """Stands in for the display surface and records every draw call."""

    def __init__(self, size: tuple[int, int], fail_on: object = None):
        self.size = size
        self.calls: list[tuple] = []
        self.fail_on = fail_on

    def get_size(self) -> tuple[int, int]:
        return self.size

    def fill(self, color):
        self.calls.append(("fill", tuple(color)))

    def blit(self, source, dest, area=None):
        if source is self.fail_on:
            raise pygame.error("blit failed")
        self.calls.append(("blit", source, pygame.Rect(dest), pygame.Rect(area)))


PLAYER_TEX = object()
BOMB_TEX = object()


# ════════════════════════════════════════════════════════════════════════
#  Camera mapping
# ════════════════════════════════════════════════════════════════════════

def test_camera_offset_is_half_the_output():
    assert camera_offset((800, 800)) == (400, 400)
    assert camera_offset((800, 600)) == (400, 300)
    assert camera_offset((801, 599)) == (400, 299)


def test_origin_maps_to_screen_centre():
    rect = screen_rect(Position(0, 0), 32, 32, (800, 800))
    assert rect.center == (400, 400)
    assert rect.size == (32, 32)
    assert rect.topleft == (384, 384)


def test_world_offset_follows_position():
    rect = screen_rect(Position(-100, 50), 24, 24, (800, 600))
    assert rect.center == (300, 350)
    assert rect.size == (24, 24)


# ════════════════════════════════════════════════════════════════════════
#  Draw order
# ════════════════════════════════════════════════════════════════════════

def test_clear_then_projectiles_then_player():
    state = GameState(rules=GameRules(projectile_size=24))
    state.projectiles.append(Projectile(position=Position(0, -40)))
    state.projectiles.append(Projectile(position=Position(16, -80)))
    surface = RecordingSurface((800, 800))
    draw_frame(surface, state, Textures(player=PLAYER_TEX, projectile=BOMB_TEX))

    kinds = [c[0] if c[0] == "fill" else c[1] for c in surface.calls]
    assert kinds == ["fill", BOMB_TEX, BOMB_TEX, PLAYER_TEX]

    _, _, dest, area = surface.calls[1]
    assert dest.center == (400, 360)
    assert dest.size == (24, 24)
    assert area == pygame.Rect(0, 0, 24, 24)

    _, _, dest, area = surface.calls[3]
    assert dest.center == (400, 400)
    assert area == state.player.sprite


def test_output_size_is_read_each_frame():
    state = GameState()
    tex = Textures(player=PLAYER_TEX, projectile=BOMB_TEX)
    small = RecordingSurface((200, 100))
    draw_frame(small, state, tex)
    assert small.calls[-1][2].center == (100, 50)
    big = RecordingSurface((1000, 800))
    draw_frame(big, state, tex)
    assert big.calls[-1][2].center == (500, 400)


def test_projectile_draw_failure_propagates():
    state = GameState()
    state.projectiles.append(Projectile())
    surface = RecordingSurface((800, 800), fail_on=BOMB_TEX)
    try:
        draw_frame(surface, state, Textures(player=PLAYER_TEX, projectile=BOMB_TEX))
    except pygame.error:
        # Player is never drawn after a failed projectile blit
        assert all(c[0] == "fill" for c in surface.calls)
        return
    raise AssertionError("expected pygame.error")


def test_player_draw_failure_propagates():
    surface = RecordingSurface((800, 800), fail_on=PLAYER_TEX)
    try:
        draw_frame(surface, GameState(), Textures(player=PLAYER_TEX, projectile=BOMB_TEX))
    except pygame.error:
        return
    raise AssertionError("expected pygame.error")


def test_pixels_land_at_screen_centre():
    surface = pygame.Surface((800, 800))
    surface.fill((255, 255, 255))
    player_tex = pygame.Surface((32, 32))
    player_tex.fill((255, 0, 0))
    bomb_tex = pygame.Surface((24, 24))
    bomb_tex.fill((0, 0, 255))
    state = GameState(player=Player(position=Position(0, 0)))
    state.projectiles.append(Projectile(position=Position(0, -100)))

    draw_frame(surface, state, Textures(player=player_tex, projectile=bomb_tex))

    assert surface.get_at((400, 400))[:3] == (255, 0, 0)
    assert surface.get_at((384, 384))[:3] == (255, 0, 0)
    assert surface.get_at((383, 383))[:3] == (0, 0, 0)
    assert surface.get_at((400, 300))[:3] == (0, 0, 255)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)


# ════════════════════════════════════════════════════════════════════════
#  Runner
# ════════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    print("\n=== Rendering ===")
    for _name, _fn in list(globals().items()):
        if _name.startswith("test_") and callable(_fn):
            try:
                _fn()
                ok(_name)
            except Exception:
                fail(_name, traceback.format_exc())

    print(f"\n{'═' * 50}")
    print(f"  Results: {_passed} passed, {_failed} failed")
    print(f"{'═' * 50}")
    sys.exit(1 if _failed else 0)

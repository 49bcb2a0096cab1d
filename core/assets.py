"""core/assets.py — Texture loading.

Images ship inside the ``core`` package under ``data/sprites/``.
Loading happens once, after the display exists (``convert_alpha`` needs a video mode), and any
failure is fatal: the game has nothing to draw without its sprites.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import pygame

from core.constants import PLAYER_TEXTURE, PROJECTILE_TEXTURE
from core.errors import SetupError
from core.tuning import get as _tun

ASSETS_DIR = Path(__file__).resolve().parent / "data" / "sprites"


@dataclass
class Textures:
    player: pygame.Surface
    projectile: pygame.Surface


def load_texture(path: str | Path, assets_dir: Path = ASSETS_DIR) -> pygame.Surface:
    """Load *path* (relative to *assets_dir*) as a display-ready surface."""
    full = assets_dir / path
    print(f"[ASSETS] Loading image: {full}")
    if not full.exists():
        raise SetupError(f"texture not found: {full}")
    try:
        img = pygame.image.load(str(full))
        return img.convert_alpha()
    except pygame.error as exc:
        raise SetupError(f"could not load texture {full}: {exc}") from exc


def load_textures(assets_dir: Path = ASSETS_DIR) -> Textures:
    """Load the player and projectile textures named in tuning."""
    return Textures(
        player=load_texture(_tun("assets", "player", PLAYER_TEXTURE), assets_dir),
        projectile=load_texture(_tun("assets", "projectile", PROJECTILE_TEXTURE), assets_dir),
    )

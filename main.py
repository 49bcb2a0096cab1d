"""
main.py — Bootstrap

1. Load tuning
2. Create the app (window, display, diagnostics)
3. Load textures
4. Create the game state (player at the world origin)
5. Push the play scene
6. Run

Exit status is 0 on a normal quit and 1 on any fatal setup or render
error.
"""

from __future__ import annotations
import sys
import pygame

from core import tuning
from core.app import App
from core.assets import load_textures
from core.constants import (
    WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, FRAME_RATE, DEBUG,
    PLAYER_SPRITE_SIZE,
)
from core.dev_log import DevLog
from core.errors import SetupError
from core.tuning import get as _tun, get_int as _tun_int
from components import Player, GameRules, GameState
from scenes.play_scene import PlayScene


def build_state(log: DevLog) -> GameState:
    """Fresh game state: player at (0, 0), no projectiles."""
    size = _tun_int("player", "sprite_size", PLAYER_SPRITE_SIZE)
    player = Player(sprite=pygame.Rect(0, 0, size, size))
    return GameState(player=player, rules=GameRules.from_tuning(), log=log)


def main(tuning_path: str | None = None) -> int:
    try:
        tuning.load(tuning_path)
        log = DevLog(enabled=bool(_tun("debug", "enabled", DEBUG)))
        app = App(
            title=_tun("window", "title", WINDOW_TITLE),
            width=_tun_int("window", "width", WINDOW_WIDTH),
            height=_tun_int("window", "height", WINDOW_HEIGHT),
            fps=_tun_int("window", "fps", FRAME_RATE),
            log=log,
        )
        try:
            textures = load_textures()
            state = build_state(log)
        except SetupError:
            pygame.quit()
            raise
        app.push_scene(PlayScene(state, textures))
        app.run()
    except (SetupError, pygame.error) as exc:
        print(f"[MAIN] fatal: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
core/app.py — Pygame application shell

Handles the window, the fixed-rate frame loop, and the scene stack.
You don't edit this file to build your game.
You write Scenes and push them.

    app = App(title="Birdshot", width=800, height=800)
    app.push_scene(MyScene())
    app.run()

One frame = drain events → scene update → scene draw → present → sleep
until the next tick (``1 / fps`` seconds after the previous one).
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.dev_log import DevLog
from core.errors import SetupError
from core.constants import WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, FRAME_RATE
from logic.input_events import translate
from logic.input_router import is_quit


class App:
    def __init__(self, title: str = WINDOW_TITLE, width: int = WINDOW_WIDTH,
                 height: int = WINDOW_HEIGHT, fps: int = FRAME_RATE,
                 log: DevLog | None = None):
        pygame.init()
        self._windowed_size = (width, height)
        try:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise SetupError(f"could not create {width}x{height} window: {exc}") from exc
        pygame.display.set_caption(title)
        # Text input drives the fire action
        pygame.key.start_text_input()
        self.clock = pygame.time.Clock()
        self.running = True
        self.fullscreen = False
        self.fps = fps
        self.frame = 0
        self.log = log if log is not None else DevLog()

        self.log.record("render", f'Using display driver "{pygame.display.get_driver()}"')

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    # -- Main loop --

    def step(self, raw_events: list[pygame.event.Event]) -> bool:
        """Run one frame (without the end-of-frame sleep).

        Returns False once the game should stop.  A quit stops the frame
        right there: no update, no draw, and nothing queued after it
        (window events included) is handled.  Errors raised while drawing
        or presenting are not caught.
        """
        scene = self.scene
        if scene is None:
            self.running = False
            return False

        events = []
        for event in raw_events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.toggle_fullscreen()
            elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                self._windowed_size = (event.w, event.h)
                self.screen = pygame.display.set_mode(
                    (event.w, event.h), pygame.RESIZABLE)
            else:
                events.append(translate(event))
                if is_quit(events[-1]):
                    break

        if not scene.handle_events(events, self):
            self.running = False
            return False

        scene.update(self)
        scene.draw(self.screen, self)
        pygame.display.flip()
        self.frame += 1
        return True

    def run(self):
        try:
            while self.running:
                if not self.step(pygame.event.get()):
                    break
                self.clock.tick(self.fps)
        finally:
            pygame.quit()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)

"""The game window: event handling, the frame loop and the command entry point."""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from dinorunner.assets import AssetError, load_assets
from dinorunner.game import DinoGame
from dinorunner.gui import create_buttons
from dinorunner.highscore import HighScoreStore
from dinorunner.render import Renderer

log = logging.getLogger(__name__)

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
TITLE = "Chrome Dino Game"
MAX_DELTA = 0.05
FRAME_DELAY = 0.016


class GameApp:
    """A window with one game, wired to keyboard and mouse input."""

    def __init__(
        self,
        asset_dir: Union[str, Path] = ".",
        score_path: Union[str, Path] = "highscore.txt",
    ) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        try:
            self.assets = load_assets(asset_dir)
        except AssetError:
            pygame.quit()
            raise
        ground = self.assets.ground
        self.game = DinoGame(
            score_store=HighScoreStore(score_path),
            music=self.assets.music,
            window_width=float(WINDOW_WIDTH),
            ground_width=float(ground.get_width()) if ground is not None else None,
        )
        self.buttons = create_buttons(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.renderer = Renderer(self.window, self.assets, self.buttons)
        self.open = True
        self._closed = False

    def __enter__(self) -> GameApp:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one input event; False means the window was closed."""
        game = self.game
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_UP):
                if game.show_menu:
                    game.hide_start_menu()
                    game.restart()
                elif game.running:
                    game.jump()
                else:
                    game.restart()
            if event.key == pygame.K_DOWN:
                game.crouch(True)
            if event.key == pygame.K_p:
                game.toggle_pause()
            if event.key == pygame.K_r:
                game.restart()
        elif event.type == pygame.KEYUP:
            if event.key == pygame.K_DOWN:
                game.crouch(False)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.update_gui(*event.pos, True)
        elif event.type == pygame.MOUSEMOTION:
            self.update_gui(*event.pos, False)
        return True

    def update_gui(self, x: float, y: float, click: bool) -> None:
        """Update button hover states and act on a click at (x, y)."""
        game, buttons = self.game, self.buttons
        if game.show_menu:
            buttons.start.update_hover(x, y)
            buttons.exit.update_hover(x, y)
            if buttons.start.is_clicked(x, y, click):
                game.hide_start_menu()
                game.restart()
            if buttons.exit.is_clicked(x, y, click):
                game.music.stop()
                self.open = False
        if game.running and not game.show_menu:
            buttons.pause.update_hover(x, y)
            buttons.restart.update_hover(x, y)
            if buttons.pause.is_clicked(x, y, click):
                game.toggle_pause()
            if buttons.restart.is_clicked(x, y, click):
                game.restart()

    def update(self, delta_time: float) -> bool:
        """Process pending events and advance the game; False ends the loop."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False
        self.game.update(delta_time)
        return self.open

    def render(self) -> None:
        if self._closed or not self.open:
            return
        self.renderer.draw(self.game)
        pygame.display.flip()

    def close(self) -> None:
        """Stop the music, store the high score and shut the window."""
        if self._closed:
            return
        self._closed = True
        self.open = False
        self.game.music.stop()
        self.game.save_high_score()
        pygame.quit()


def run(app: GameApp) -> int:
    """Run the frame loop until the game ends, then close the app."""
    last = time.perf_counter()
    running = True
    try:
        while running:
            try:
                now = time.perf_counter()
                delta_time = min(now - last, MAX_DELTA)
                last = now
                running = app.update(delta_time)
                app.render()
                time.sleep(FRAME_DELAY)
            except Exception:
                log.exception("Error in the game loop")
                running = False
    finally:
        app.close()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Endless runner game.")
    parser.add_argument("--assets", default=".", help="directory holding the game assets")
    parser.add_argument("--highscore", default="highscore.txt", help="high score file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        app = GameApp(args.assets, args.highscore)
    except AssetError as exc:
        log.error("Cannot initialise the game: %s", exc)
        return -1
    return run(app)


if __name__ == "__main__":
    raise SystemExit(main())
"""Drawing of a game state onto a pygame surface."""

from __future__ import annotations

import math

import pygame

from dinorunner.assets import Assets
from dinorunner.game import (
    BIRD_HEIGHT,
    BIRD_WIDTH,
    DINO_CROUCH_HEIGHT,
    DINO_SIZE,
    DINO_X,
    GROUND_Y,
    OBSTACLE_HEIGHT,
    DinoGame,
    DinoPose,
)
from dinorunner.gui import Button, Buttons

BACKGROUND = (247, 247, 247)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
MENU_OVERLAY = (255, 255, 255, 200)
GROUND_LINE_HEIGHT = 5
GROUND_TEXTURE_Y = GROUND_Y - 10


def ground_positions(offset: float, texture_width: float, window_width: float) -> list[float]:
    """X positions at which the ground texture is tiled across the window."""
    if texture_width <= 0:
        raise ValueError("texture width must be positive")
    if texture_width < window_width:
        count = math.ceil(window_width / texture_width) + 1
    else:
        count = 1
    return [offset + texture_width * i for i in range(count + 1)]


def _scale(surface: pygame.Surface, width: float, height: float) -> pygame.Surface:
    return pygame.transform.scale(surface, (int(width), int(height)))


class Renderer:
    """Draws the game, its overlays and buttons onto a surface."""

    def __init__(self, surface: pygame.Surface, assets: Assets, buttons: Buttons) -> None:
        self.surface = surface
        self.assets = assets
        self.buttons = buttons
        self._score_font = assets.font(24)
        self._high_font = assets.font(18)
        self._game_over_font = assets.font(36)
        self._pause_font = assets.font(28)
        self._button_font = assets.font(16)
        self._run = tuple(_scale(s, DINO_SIZE, DINO_SIZE) for s in assets.dino_run)
        self._crouch = tuple(
            _scale(s, DINO_SIZE, DINO_CROUCH_HEIGHT) for s in assets.dino_crouch
        )
        self._dead = _scale(assets.dino_dead, DINO_SIZE, DINO_SIZE)
        self._birds = tuple(_scale(s, BIRD_WIDTH, BIRD_HEIGHT) for s in assets.birds)
        self._obstacles = {
            kind: _scale(image, kind.width, OBSTACLE_HEIGHT)
            for kind, image in assets.obstacles.items()
        }
        self._overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        self._overlay.fill(MENU_OVERLAY)

    def draw(self, game: DinoGame) -> None:
        """Draw one frame of ``game``; the caller presents the surface."""
        width, _ = self.surface.get_size()
        self.surface.fill(BACKGROUND)
        self._draw_ground(game, width)
        self.surface.blit(self._dino_image(game), (DINO_X, game.dino_y))
        for obstacle in game.obstacles:
            self.surface.blit(self._obstacles[obstacle.kind], (obstacle.x, obstacle.y))
        for bird in game.birds:
            self.surface.blit(self._birds[bird.frame], (bird.x, bird.y))

        if game.show_menu:
            self.surface.blit(self._overlay, (0, 0))
            self._draw_button(self.buttons.start)
            self._draw_button(self.buttons.exit)
        elif game.paused:
            self._draw_centered(self._pause_font, "PAUSED - Press P to Continue", BLUE)
        elif not game.running:
            self._draw_centered(self._game_over_font, "GAME OVER", RED)

        if not game.show_menu:
            score = self._score_font.render(f"Score: {game.score}", True, BLACK)
            high = self._high_font.render(f"High Score: {game.high_score}", True, BLACK)
            self.surface.blit(score, (width - 150, 20))
            self.surface.blit(high, (width - 150, 50))
            if game.running:
                self._draw_button(self.buttons.pause)
                self._draw_button(self.buttons.restart)

    def _dino_image(self, game: DinoGame) -> pygame.Surface:
        if game.dino_pose is DinoPose.DEAD:
            return self._dead
        if game.dino_pose is DinoPose.CROUCH:
            return self._crouch[game.dino_frame]
        return self._run[game.dino_frame]

    def _draw_ground(self, game: DinoGame, width: int) -> None:
        ground = self.assets.ground
        if ground is None:
            line = pygame.Rect(0, int(GROUND_Y), width, GROUND_LINE_HEIGHT)
            pygame.draw.rect(self.surface, BLACK, line)
            return
        for x in ground_positions(game.ground_offset, ground.get_width(), width):
            self.surface.blit(ground, (x, GROUND_TEXTURE_Y))

    def _draw_centered(self, font: pygame.font.Font, text: str, color) -> None:
        image = font.render(text, True, color)
        width, height = self.surface.get_size()
        self.surface.blit(
            image, ((width - image.get_width()) / 2, (height - image.get_height()) / 2)
        )

    def _draw_button(self, button: Button) -> None:
        rect = pygame.Rect(int(button.x), int(button.y), int(button.width), int(button.height))
        pygame.draw.rect(self.surface, button.fill, rect)
        pygame.draw.rect(self.surface, BLACK, rect, 2)
        label = self._button_font.render(button.label, True, BLACK)
        self.surface.blit(
            label,
            (
                button.x + (button.width - label.get_width()) / 2,
                button.y + (button.height - label.get_height()) / 2 - 5,
            ),
        )
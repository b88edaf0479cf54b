import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from dinorunner.assets import Assets
from dinorunner.game import DINO_X, GROUND_Y, DinoGame, Entity, EntityKind
from dinorunner.gui import NORMAL_FILL, create_buttons
from dinorunner.render import BACKGROUND, Renderer, ground_positions

RUN = (0, 200, 0)
CACTUS = (0, 0, 100)
GROUND = (90, 60, 30)


def _solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _assets(ground=None):
    run = _solid((44, 44), RUN)
    cactus = _solid((25, 50), CACTUS)
    bird = _solid((46, 40), (120, 120, 0))
    return Assets(
        dino_run=(run, run),
        dino_crouch=(run, run),
        dino_dead=_solid((44, 44), (255, 0, 0)),
        birds=(bird, bird),
        obstacles={kind: cactus for kind in EntityKind if kind is not EntityKind.BIRD},
        ground=ground,
    )


def _renderer(ground=None):
    surface = pygame.Surface((800, 600))
    return surface, Renderer(surface, _assets(ground), create_buttons(800, 600))


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_ground_positions_single_tile_pair():
    assert ground_positions(0.0, 800.0, 800.0) == [0.0, 800.0]


@pytest.mark.parametrize("offset", [0.0, -10.0, -150.0, -299.0])
def test_ground_positions_cover_window(offset):
    positions = ground_positions(offset, 300.0, 800.0)
    assert positions[0] == offset
    assert all(b - a == 300.0 for a, b in zip(positions, positions[1:]))
    assert positions[-1] + 300.0 >= 800.0


def test_ground_positions_rejects_zero_width():
    with pytest.raises(ValueError):
        ground_positions(0.0, 0.0, 800.0)


def test_running_frame_background_dino_and_ground_line():
    surface, renderer = _renderer()
    game = DinoGame()
    game.restart()
    renderer.draw(game)
    assert _rgb(surface, (5, 300)) == BACKGROUND
    assert _rgb(surface, (400, int(GROUND_Y) + 2)) == (0, 0, 0)
    assert _rgb(surface, (int(DINO_X) + 20, int(game.dino_y) + 20)) == RUN


def test_menu_shows_start_button():
    surface, renderer = _renderer()
    game = DinoGame()
    renderer.draw(game)
    start = renderer.buttons.start
    assert _rgb(surface, (int(start.x) + 5, int(start.y) + 5)) == NORMAL_FILL


def test_bar_buttons_only_while_running():
    surface, renderer = _renderer()
    game = DinoGame()
    game.restart()
    renderer.draw(game)
    assert _rgb(surface, (12, 12)) == NORMAL_FILL
    game.running = False
    renderer.draw(game)
    assert _rgb(surface, (12, 12)) == BACKGROUND


def test_obstacle_is_drawn_at_its_position():
    surface, renderer = _renderer()
    game = DinoGame()
    game.restart()
    game.obstacles.append(Entity(EntityKind.SMALL_CACTUS, 400.0, 300.0))
    renderer.draw(game)
    assert _rgb(surface, (410, 320)) == CACTUS


def test_ground_texture_tiled_across_window():
    surface, renderer = _renderer(ground=_solid((100, 12), GROUND))
    game = DinoGame(ground_width=100.0)
    game.restart()
    game.ground_offset = -30.0
    renderer.draw(game)
    y = int(GROUND_Y) - 5
    assert _rgb(surface, (500, y)) == GROUND
    assert _rgb(surface, (795, y)) == GROUND
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from dinorunner.assets import AssetError, MixerMusic, load_assets
from dinorunner.game import EntityKind, SilentMusic

REQUIRED = {
    "dino_run1.png": ((44, 44), (0, 200, 0)),
    "obstacle1.png": ((25, 50), (0, 0, 100)),
    "obstacle2.png": ((40, 50), (0, 0, 120)),
    "obstacle3.png": ((50, 50), (0, 0, 140)),
}
OPTIONAL = {
    "dino_run2.png": ((44, 44), (0, 150, 0)),
    "dino_dead.png": ((44, 44), (90, 0, 0)),
    "dino_crouch1.png": ((44, 32), (0, 100, 100)),
    "dino_crouch2.png": ((44, 32), (0, 120, 120)),
    "bird1.png": ((46, 40), (100, 100, 0)),
    "bird2.png": ((46, 40), (120, 120, 0)),
}


def _write(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


def _populate(directory, skip=()):
    for name, (size, color) in {**REQUIRED, **OPTIONAL}.items():
        if name not in skip:
            _write(directory / name, size, color)


def _rgb(surface, pos=(1, 1)):
    return tuple(surface.get_at(pos))[:3]


def test_loads_all_images(tmp_path):
    _populate(tmp_path)
    assets = load_assets(tmp_path)
    assert _rgb(assets.dino_run[0]) == REQUIRED["dino_run1.png"][1]
    assert _rgb(assets.dino_run[1]) == OPTIONAL["dino_run2.png"][1]
    assert _rgb(assets.birds[1]) == OPTIONAL["bird2.png"][1]
    assert _rgb(assets.obstacles[EntityKind.LARGE_CACTUS]) == REQUIRED["obstacle3.png"][1]
    assert assets.dino_crouch[0].get_size() == (44, 32)


def test_missing_second_run_frame_reuses_first(tmp_path):
    _populate(tmp_path, skip={"dino_run2.png"})
    assets = load_assets(tmp_path)
    assert assets.dino_run[1] is assets.dino_run[0]


def test_missing_crouch_frames_fall_back(tmp_path):
    _populate(tmp_path, skip={"dino_crouch1.png", "dino_crouch2.png"})
    assets = load_assets(tmp_path)
    assert assets.dino_crouch[0] is assets.dino_run[0]
    assert assets.dino_crouch[1] is assets.dino_crouch[0]


def test_missing_dead_frame_is_red_square(tmp_path):
    _populate(tmp_path, skip={"dino_dead.png"})
    assets = load_assets(tmp_path)
    assert assets.dino_dead.get_size() == (44, 44)
    assert _rgb(assets.dino_dead) == (255, 0, 0)


def test_missing_birds_are_blue_blocks(tmp_path):
    _populate(tmp_path, skip={"bird1.png", "bird2.png"})
    assets = load_assets(tmp_path)
    assert assets.birds[0].get_size() == (80, 70)
    assert _rgb(assets.birds[0]) == (0, 0, 255)
    assert assets.birds[1] is assets.birds[0]


@pytest.mark.parametrize("name", sorted(REQUIRED))
def test_missing_required_image_raises(tmp_path, name):
    _populate(tmp_path, skip={name})
    with pytest.raises(AssetError):
        load_assets(tmp_path)


def test_ground_is_optional(tmp_path):
    _populate(tmp_path)
    assert load_assets(tmp_path).ground is None
    _write(tmp_path / "ground.png", (120, 12), (80, 60, 40))
    assert load_assets(tmp_path).ground.get_width() == 120


def test_without_music_file_music_is_silent(tmp_path):
    _populate(tmp_path)
    music = load_assets(tmp_path).music
    assert isinstance(music, SilentMusic)
    music.play()
    assert music.playing is True
    music.stop()
    assert music.playing is False


def test_font_grows_with_size(tmp_path):
    _populate(tmp_path)
    assets = load_assets(tmp_path)
    assert assets.font_path is None
    assert assets.font(32).get_height() > assets.font(16).get_height()


def test_mixer_music_missing_file_raises(tmp_path):
    with pytest.raises(AssetError):
        MixerMusic(tmp_path / "nothing.ogg")
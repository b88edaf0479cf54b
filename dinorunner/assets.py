"""Loading of the images, font and music the game is drawn and played with."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

from dinorunner.game import EntityKind, SilentMusic

log = logging.getLogger(__name__)

MUSIC_FILE = "background_music.ogg"
GROUND_FILE = "ground.png"
FONT_FILE = "arial.ttf"
DEFAULT_VOLUME = 50.0


class AssetError(Exception):
    """A required game asset could not be loaded."""


class MixerMusic:
    """Looping background music played through the pygame mixer."""

    def __init__(self, path: Union[str, Path]) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(str(path))
        except (pygame.error, OSError, NotImplementedError) as exc:
            raise AssetError(f"cannot open music {path}: {exc}") from exc
        self.path = Path(path)
        self.playing = False
        self._paused = False
        self.volume = DEFAULT_VOLUME
        self.set_volume(DEFAULT_VOLUME)

    def play(self) -> None:
        """Start or resume the music unless it is already playing."""
        if self.playing:
            return
        if self._paused:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.play(loops=-1)
        self.playing = True
        self._paused = False

    def pause(self) -> None:
        if self.playing:
            pygame.mixer.music.pause()
            self.playing = False
            self._paused = True

    def stop(self) -> None:
        pygame.mixer.music.stop()
        self.playing = False
        self._paused = False

    def set_volume(self, volume: float) -> None:
        """Set the volume on a 0-100 scale, clamping values outside it."""
        self.volume = max(0.0, min(100.0, float(volume)))
        pygame.mixer.music.set_volume(self.volume / 100.0)


@dataclass
class Assets:
    """Every image the renderer needs, plus the font and the music player."""

    dino_run: tuple[pygame.Surface, pygame.Surface]
    dino_crouch: tuple[pygame.Surface, pygame.Surface]
    dino_dead: pygame.Surface
    birds: tuple[pygame.Surface, pygame.Surface]
    obstacles: dict[EntityKind, pygame.Surface]
    ground: Optional[pygame.Surface] = None
    font_path: Optional[Path] = None
    music: object = None

    def __post_init__(self) -> None:
        if self.music is None:
            self.music = SilentMusic()

    def font(self, size: int) -> pygame.font.Font:
        """Return the game font at ``size`` points, or the default font."""
        if not pygame.font.get_init():
            pygame.font.init()
        if self.font_path is not None:
            try:
                return pygame.font.Font(str(self.font_path), size)
            except (pygame.error, OSError):
                log.warning("Cannot load font %s, using default", self.font_path)
        return pygame.font.Font(None, size)


def _load(path: Path) -> Optional[pygame.Surface]:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


def _filled(width: int, height: int, color: tuple[int, int, int]) -> pygame.Surface:
    surface = pygame.Surface((width, height))
    surface.fill(color)
    return surface


def load_assets(directory: Union[str, Path] = ".") -> Assets:
    """Load the game assets from ``directory``, substituting what is optional."""
    base = Path(directory)

    def required(name: str) -> pygame.Surface:
        image = _load(base / name)
        if image is None:
            raise AssetError(f"cannot load {name}")
        return image

    def optional(name: str, fallback: pygame.Surface) -> pygame.Surface:
        image = _load(base / name)
        if image is None:
            log.warning("Cannot load %s", name)
            return fallback
        return image

    run1 = required("dino_run1.png")
    run2 = optional("dino_run2.png", run1)
    dead = optional("dino_dead.png", _filled(44, 44, (255, 0, 0)))
    crouch1 = optional("dino_crouch1.png", run1)
    crouch2 = optional("dino_crouch2.png", crouch1)
    bird1 = _load(base / "bird1.png")
    if bird1 is None:
        log.warning("Cannot load bird1.png")
        bird1 = _filled(80, 70, (0, 0, 255))
    bird2 = optional("bird2.png", bird1)
    obstacles = {
        EntityKind.SMALL_CACTUS: required("obstacle1.png"),
        EntityKind.MEDIUM_CACTUS: required("obstacle2.png"),
        EntityKind.LARGE_CACTUS: required("obstacle3.png"),
    }
    log.info("Textures loaded")

    ground = _load(base / GROUND_FILE)
    if ground is None:
        log.info("Ground texture not loaded")

    music: object = SilentMusic()
    music_path = base / MUSIC_FILE
    if music_path.is_file():
        try:
            music = MixerMusic(music_path)
        except AssetError as exc:
            log.info("Music not loaded: %s", exc)
    else:
        log.info("Music not loaded")

    font_path = base / FONT_FILE
    return Assets(
        dino_run=(run1, run2),
        dino_crouch=(crouch1, crouch2),
        dino_dead=dead,
        birds=(bird1, bird2),
        obstacles=obstacles,
        ground=ground,
        font_path=font_path if font_path.is_file() else None,
        music=music,
    )
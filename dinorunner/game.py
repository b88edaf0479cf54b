"""Game state and rules of the endless runner, independent of any display."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dinorunner.highscore import HighScoreStore

log = logging.getLogger(__name__)

GROUND_Y = 450.0
DINO_X = 50.0
DINO_SIZE = 44.0
DINO_CROUCH_HEIGHT = 32.0
OBSTACLE_WIDTH = 25.0
OBSTACLE_HEIGHT = 50.0
OBSTACLE2_WIDTH = 40.0
OBSTACLE3_WIDTH = 50.0
BIRD_WIDTH = 46.0
BIRD_HEIGHT = 40.0
JUMP_FORCE = -500.0
GRAVITY = 1200.0
INITIAL_SPEED = 200.0
SPEED_INCREASE = 5.0
BIRD_SPAWN_SCORE = 300
BASE_SPAWN_INTERVAL = 1
MIN_SPAWN_INTERVAL = 20

BIRD_MIN_Y = 350.0
BIRD_MAX_Y = 400.0
OFFSCREEN_X = -100.0
FRAME_TIME = 0.1
SCORE_TIME = 0.1


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )

    def shrink(self, amount: float) -> Rect:
        """Return the rectangle inset by ``amount`` on every side."""
        return Rect(
            self.left + amount,
            self.top + amount,
            self.width - 2 * amount,
            self.height - 2 * amount,
        )

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are outside."""
        return self.left <= x < self.right and self.top <= y < self.bottom


class EntityKind(Enum):
    """The things that scroll towards the dinosaur."""

    SMALL_CACTUS = "small_cactus"
    MEDIUM_CACTUS = "medium_cactus"
    LARGE_CACTUS = "large_cactus"
    BIRD = "bird"

    @property
    def width(self) -> float:
        return _SIZES[self][0]

    @property
    def height(self) -> float:
        return _SIZES[self][1]


_SIZES = {
    EntityKind.SMALL_CACTUS: (OBSTACLE_WIDTH, OBSTACLE_HEIGHT),
    EntityKind.MEDIUM_CACTUS: (OBSTACLE2_WIDTH, OBSTACLE_HEIGHT),
    EntityKind.LARGE_CACTUS: (OBSTACLE3_WIDTH, OBSTACLE_HEIGHT),
    EntityKind.BIRD: (BIRD_WIDTH, BIRD_HEIGHT),
}

OBSTACLE_KINDS = (
    EntityKind.SMALL_CACTUS,
    EntityKind.MEDIUM_CACTUS,
    EntityKind.LARGE_CACTUS,
)


@dataclass
class Entity:
    """An obstacle or bird at a position, with its current animation frame."""

    kind: EntityKind
    x: float
    y: float
    frame: int = 0

    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, self.kind.width, self.kind.height).shrink(2)


class DinoPose(Enum):
    RUN = "run"
    CROUCH = "crouch"
    DEAD = "dead"


class SilentMusic:
    """Music player that plays nothing but keeps track of its state."""

    def __init__(self) -> None:
        self.playing = False

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def stop(self) -> None:
        self.playing = False


def calculate_spawn_interval(score: int) -> int:
    """Score distance until the next spawn, never below the minimum."""
    return max(BASE_SPAWN_INTERVAL - score // 20, MIN_SPAWN_INTERVAL)


@dataclass
class DinoGame:
    """Complete state of one game session."""

    score_store: Optional[HighScoreStore] = None
    rng: random.Random = field(default_factory=random.Random)
    music: object = field(default_factory=SilentMusic)
    window_width: float = 800.0
    ground_width: Optional[float] = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()
        if self.music is None:
            self.music = SilentMusic()
        self.high_score = self.score_store.load() if self.score_store else 0
        self.score = 0
        self.score_timer = 0.0
        self.running = False
        self.paused = False
        self.show_menu = True
        self.jumping = False
        self.crouching = False
        self.dino_y = GROUND_Y - DINO_SIZE
        self.dino_velocity_y = 0.0
        self.game_speed = INITIAL_SPEED
        self.next_spawn_score = BASE_SPAWN_INTERVAL
        self.current_spawn_interval = BASE_SPAWN_INTERVAL
        self.animation_timer = 0.0
        self.dino_frame = 0
        self.bird_frame = 0
        self.dino_pose = DinoPose.RUN
        self.ground_offset = 0.0
        self.obstacles: list[Entity] = []
        self.birds: list[Entity] = []

    def restart(self) -> None:
        """Start a fresh run, leaving the menu and resuming music."""
        self.running = True
        self.jumping = False
        self.crouching = False
        self.score = 0
        self.score_timer = 0.0
        self.game_speed = INITIAL_SPEED
        self.next_spawn_score = BASE_SPAWN_INTERVAL
        self.current_spawn_interval = BASE_SPAWN_INTERVAL
        self.animation_timer = 0.0
        self.dino_frame = 0
        self.bird_frame = 0
        self.ground_offset = 0.0
        self.dino_y = GROUND_Y - DINO_SIZE
        self.dino_velocity_y = 0.0
        self.dino_pose = DinoPose.RUN
        self.obstacles.clear()
        self.birds.clear()
        self.paused = False
        self.show_menu = False
        self.music.play()

    def update(self, delta_time: float) -> None:
        """Advance the game by ``delta_time`` seconds."""
        if not self.running or self.paused or self.show_menu:
            return
        self.update_animations(delta_time)
        self.update_physics(delta_time)
        self.update_entities(delta_time)
        self.update_ground(delta_time)
        self.update_score(delta_time)
        self.check_collisions()

    def update_animations(self, delta_time: float) -> None:
        self.animation_timer += delta_time
        if self.animation_timer < FRAME_TIME:
            return
        if not self.running:
            self.dino_pose = DinoPose.DEAD
        elif not self.jumping:
            self.dino_frame = (self.dino_frame + 1) % 2
            self.dino_pose = DinoPose.CROUCH if self.crouching else DinoPose.RUN
        self.bird_frame = (self.bird_frame + 1) % 2
        for bird in self.birds:
            bird.frame = self.bird_frame
        self.animation_timer = 0.0

    def update_physics(self, delta_time: float) -> None:
        if self.jumping:
            self.dino_velocity_y += GRAVITY * delta_time
            self.dino_y += self.dino_velocity_y * delta_time
            ground_level = GROUND_Y - DINO_SIZE
            if self.dino_y >= ground_level:
                self.dino_y = ground_level
                self.dino_velocity_y = 0.0
                self.jumping = False
        elif self.crouching:
            self.dino_y = GROUND_Y - DINO_CROUCH_HEIGHT
        else:
            self.dino_y = GROUND_Y - DINO_SIZE

    def update_entities(self, delta_time: float) -> None:
        step = self.game_speed * delta_time
        for entity in (*self.obstacles, *self.birds):
            entity.x -= step
        self.obstacles = [e for e in self.obstacles if e.x >= OFFSCREEN_X]
        self.birds = [e for e in self.birds if e.x >= OFFSCREEN_X]
        self.check_for_spawn()
        self.game_speed += SPEED_INCREASE * delta_time

    def update_ground(self, delta_time: float) -> None:
        if not self.ground_width:
            return
        self.ground_offset -= self.game_speed * delta_time
        if self.ground_offset <= -self.ground_width:
            self.ground_offset = 0.0

    def update_score(self, delta_time: float) -> None:
        self.score_timer += delta_time
        if self.score_timer >= SCORE_TIME:
            self.score += 1
            self.score_timer = 0.0
            self.high_score = max(self.high_score, self.score)

    def check_for_spawn(self) -> None:
        if self.score < self.next_spawn_score:
            return
        self.spawn_random_entity()
        self.current_spawn_interval = calculate_spawn_interval(self.score)
        variation = self.rng.randint(-5, 5)
        self.next_spawn_score = self.score + self.current_spawn_interval + variation
        log.debug("Spawn at score: %d, next spawn: %d", self.score, self.next_spawn_score)

    def spawn_random_entity(self) -> None:
        if self.score < BIRD_SPAWN_SCORE or self.rng.randint(1, 100) <= 70:
            self.spawn_obstacle()
        else:
            self.spawn_bird()

    def spawn_obstacle(self) -> None:
        kind = OBSTACLE_KINDS[self.rng.randint(1, 3) - 1]
        self.obstacles.append(Entity(kind, self.window_width, GROUND_Y - OBSTACLE_HEIGHT))

    def spawn_bird(self) -> None:
        y = self.rng.uniform(BIRD_MIN_Y, BIRD_MAX_Y)
        self.birds.append(Entity(EntityKind.BIRD, self.window_width, y))

    def dino_hitbox(self) -> Rect:
        low = self.crouching and not self.jumping
        height = DINO_CROUCH_HEIGHT if low else DINO_SIZE
        return Rect(DINO_X, self.dino_y, DINO_SIZE, height).shrink(4)

    def check_collisions(self) -> None:
        dino = self.dino_hitbox()
        for group in (self.obstacles, self.birds):
            if any(dino.intersects(entity.hitbox()) for entity in group):
                self.running = False
                self.music.stop()
                self.save_high_score()

    def jump(self) -> None:
        if not self.jumping and not self.crouching and self.running:
            self.dino_velocity_y = JUMP_FORCE
            self.jumping = True

    def crouch(self, crouch: bool) -> None:
        if not self.running:
            return
        if not crouch:
            self.crouching = False
        elif not self.jumping and self.dino_y >= GROUND_Y - DINO_SIZE - 5:
            self.crouching = True

    def toggle_pause(self) -> None:
        if not self.running or self.show_menu:
            return
        self.paused = not self.paused
        if self.paused:
            self.music.pause()
        else:
            self.music.play()

    def show_start_menu(self) -> None:
        self.show_menu = True
        self.paused = False

    def hide_start_menu(self) -> None:
        self.show_menu = False

    def save_high_score(self) -> None:
        if self.score_store is not None:
            self.score_store.save(self.high_score)
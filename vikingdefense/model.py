"""Game state: units, sprites, scenes, timers and the rules of the shop."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

WIDTH = 1920
HEIGHT = 1080
NB_MAP = 2
MENUS = 14
BACK = 7
CHARA = 30
SPEED = 4
OBS = 4
UNIT = 4
TEXT = 9
MAX_LIFE = 100
TOWER_LIFE = 400
PLAYER_LIFE = 500
DAMAGE = 3
TILE = 60
WALL_WIDTH = 287
TOWER_PRICES = (50, 100, 150, 200)
TIMER_NAMES = ("game", "coin", "enemies", "tower", "howtoplay")

Size = tuple[int, int]
Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class Vec:
    """A 2D position or scale."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle (texture area or screen bounds)."""

    left: float = 0
    top: float = 0
    width: float = 0
    height: float = 0


@dataclass
class Sprite:
    """A textured quad: which part of the texture is shown, where, at what scale."""

    texture_size: Size
    rect: Rect | None = None
    pos: Vec = field(default_factory=Vec)
    scale: Vec = field(default_factory=lambda: Vec(1.0, 1.0))

    def __post_init__(self) -> None:
        if self.rect is None:
            width, height = self.texture_size
            self.rect = Rect(0, 0, width, height)

    def bounds(self) -> Rect:
        """Return the sprite's area on screen."""
        return Rect(
            self.pos.x,
            self.pos.y,
            abs(self.rect.width * self.scale.x),
            abs(self.rect.height * self.scale.y),
        )


class Timer:
    """Measures elapsed milliseconds against a clock that returns milliseconds."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._start = clock()

    def elapsed_ms(self) -> int:
        return int(self._clock() - self._start)

    def restart(self) -> None:
        self._start = self._clock()


@dataclass
class Unit:
    """An enemy or a tower."""

    sprite: Sprite
    life: int
    damage: float
    fight: Timer
    pop: bool = False
    attack: bool = False


@dataclass
class Scenes:
    """Which screens are active."""

    main: bool = True
    end: bool = False
    pause: bool = False
    game: bool = False
    howtoplay: bool = False
    synopsis: bool = False


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    scenes: Scenes
    map_sprites: list[Sprite]
    menus: list[Sprite]
    backgrounds: list[Sprite]
    enemies: list[Unit]
    towers: list[list[Unit]]
    timers: dict[str, Timer]
    rng: random.Random
    life: int = PLAYER_LIFE
    tower: int = OBS
    score: int = 0
    coin: int = 0
    clicked: bool = False
    escape: bool = False
    exit: bool = False
    land: str | None = None
    score_text_pos: Vec = field(default_factory=lambda: Vec(15, 10))
    score_text_size: int = 50

    def reset(self) -> None:
        """Send every enemy back to spawn, clear the towers and the coins."""
        for enemy in self.enemies:
            enemy.pop = False
            enemy.sprite.pos.x = -enemy.sprite.texture_size[0] / 10
            enemy.life = MAX_LIFE
            enemy.damage = DAMAGE
        for row in self.towers:
            for tower in row:
                tower.pop = False
                tower.life = TOWER_LIFE
        self.score_text_pos = Vec(15, 10)
        self.score_text_size = 50
        self.coin = 0

    def buy_tower(self, kind: int) -> bool:
        """Pay for a tower of ``kind`` if one is free and coins suffice."""
        if not 0 <= kind < OBS:
            return False
        if all(tower.pop for tower in self.towers[kind]):
            return False
        price = TOWER_PRICES[kind]
        if self.coin < price:
            return False
        self.coin -= price
        return True


def generate_land(rng: random.Random) -> str:
    """Return the ground layout: one 'A' (rare) or 'B' tile per grid cell."""
    total = (WIDTH // TILE) * (HEIGHT // TILE)
    return "".join("A" if rng.randrange(12) == 11 else "B" for _ in range(total))


def _sizes(sizes: Mapping[str, object], key: str, count: int) -> list[Size]:
    try:
        found = [tuple(size) for size in sizes[key]]
    except KeyError:
        raise ValueError(f"missing texture sizes for {key!r}") from None
    if len(found) != count:
        raise ValueError(f"expected {count} sizes for {key!r}, got {len(found)}")
    return found


def new_game(
    sizes: Mapping[str, object],
    clock: Clock | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """Build a fresh game state from texture sizes.

    ``sizes`` maps "map" (2 sizes), "menus" (14), "back" (7), "towers" (4)
    and "viking" (one size) to (width, height) pairs. ``clock`` returns
    milliseconds.
    """
    clock = clock or _monotonic_ms
    rng = rng or random.Random()
    map_sizes = _sizes(sizes, "map", NB_MAP)
    menu_sizes = _sizes(sizes, "menus", MENUS)
    back_sizes = _sizes(sizes, "back", BACK)
    tower_sizes = _sizes(sizes, "towers", OBS)
    try:
        viking_w, viking_h = sizes["viking"]
    except KeyError:
        raise ValueError("missing texture size for 'viking'") from None

    map_sprites = [Sprite(size) for size in map_sizes]
    map_sprites[0].rect = Rect(0, TILE, TILE, TILE)

    menus = []
    for index, (w, h) in enumerate(menu_sizes):
        rect = Rect(0, h // 3, w, h // 3) if index < MENUS - 1 else None
        menus.append(Sprite((w, h), rect))

    backgrounds = [Sprite(size) for size in back_sizes]

    enemies = []
    for _ in range(CHARA):
        frame_w = viking_w // 10
        rect = Rect(rng.randrange(10) * frame_w, viking_h // 2, frame_w, viking_h // 2)
        sprite = Sprite((viking_w, viking_h), rect, Vec(-viking_w / 10, 0))
        enemies.append(Unit(sprite, MAX_LIFE, DAMAGE, Timer(clock)))

    towers = []
    for kind, (w, h) in enumerate(tower_sizes):
        rows = 2 if kind < 2 else 3
        towers.append([
            Unit(
                Sprite((w, h), Rect(0, 0, w // 5, h // rows)),
                TOWER_LIFE,
                5 * (kind + 1),
                Timer(clock),
            )
            for _ in range(UNIT)
        ])

    return GameState(
        scenes=Scenes(),
        map_sprites=map_sprites,
        menus=menus,
        backgrounds=backgrounds,
        enemies=enemies,
        towers=towers,
        timers={name: Timer(clock) for name in TIMER_NAMES},
        rng=rng,
    )
"""Asset loading and drawing of every screen of the game."""

from __future__ import annotations

import math
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pygame

from .combat import draw_order
from .menus import (
    BOARD,
    LIFE_BAR,
    MENU,
    QUIT,
    RESUME,
    RETRY,
    TOWER_BUTTONS,
    info_text,
)
from .model import (
    HEIGHT,
    MAX_LIFE,
    PLAYER_LIFE,
    TILE,
    TOWER_LIFE,
    WIDTH,
    GameState,
    Rect,
    Sprite,
    Vec,
)

MAP_FILES = ("pictures/map/land.png", "pictures/map/wall.png")
MENU_FILES = tuple(
    f"pictures/menus/{name}.png"
    for name in (
        "play", "how", "quit", "tower1", "tower2", "tower3", "tower4",
        "back", "next", "resume", "menu", "life", "retry", "board",
    )
)
BACK_FILES = (
    "pictures/menus/main.png",
    "pictures/menus/pause.png",
    "pictures/menus/hud.png",
    "pictures/menus/empty_life.png",
    "pictures/menus/fill_life.png",
    "pictures/menus/base_life.png",
    "pictures/menus/score.jpg",
)
VIKING_FILE = "pictures/characters/viking.png"
TOWER_FILES = tuple(f"pictures/map/tower{n}.png" for n in range(1, 5))
FONT_FILE = "font/PRViking.ttf"

BAR_LENGTH = 110
BAR_HEIGHT = 7
GAUGE_SIZE = 210
TEXT_SIZE = 50
INFO_TEXT_SIZE = 35
BEST_TEXT_SIZE = 100
BEST_TEXT_POS = (110, 320)
STORY_TEXT_POS = (15, 10)
COIN_TEXT_POS = (15, HEIGHT - 210)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)


def health_bar_width(life: float, max_life: float) -> int:
    """Width in pixels of a unit's health bar."""
    return int(life / max_life * BAR_LENGTH)


def player_life_rect(life: float) -> Rect:
    """Part of the life gauge texture shown for the player's remaining life."""
    height = int(life / PLAYER_LIFE * GAUGE_SIZE)
    return Rect(0, GAUGE_SIZE - height, GAUGE_SIZE, height)


def land_tiles(land: str | None) -> Iterator[tuple[int, int, int]]:
    """Yield (x, y, texture top) for every ground tile, in drawing order.

    Tiles marked 'A' use the top of the texture; everything else, including
    tiles past the end of ``land``, uses the lower part.
    """
    x = y = 0
    index = 0
    while y < HEIGHT or x < WIDTH:
        marked = land is not None and index < len(land) and land[index] == "A"
        yield x, y, 0 if marked else TILE
        if x >= WIDTH:
            x = 0
            y += TILE
        else:
            x += TILE
        index += 1


@dataclass
class Assets:
    """Loaded textures and the location of the font."""

    map_textures: list[pygame.Surface]
    menus: list[pygame.Surface]
    back: list[pygame.Surface]
    viking: pygame.Surface
    towers: list[pygame.Surface]
    font: Path

    def texture_sizes(self) -> dict[str, object]:
        """Return the texture sizes in the form the game state is built from."""
        return {
            "map": [tex.get_size() for tex in self.map_textures],
            "menus": [tex.get_size() for tex in self.menus],
            "back": [tex.get_size() for tex in self.back],
            "towers": [tex.get_size() for tex in self.towers],
            "viking": self.viking.get_size(),
        }


def load_assets(root: str | os.PathLike[str]) -> Assets:
    """Load every texture below ``root``; raise FileNotFoundError if one is missing."""
    root = Path(root)

    def load(relative: str) -> pygame.Surface:
        path = root / relative
        if not path.is_file():
            raise FileNotFoundError(f"missing asset: {path}")
        return pygame.image.load(str(path))

    return Assets(
        map_textures=[load(name) for name in MAP_FILES],
        menus=[load(name) for name in MENU_FILES],
        back=[load(name) for name in BACK_FILES],
        viking=load(VIKING_FILE),
        towers=[load(name) for name in TOWER_FILES],
        font=root / FONT_FILE,
    )


class Renderer:
    """Draws the game state onto a surface."""

    def __init__(self, screen: pygame.Surface, assets: Assets) -> None:
        pygame.font.init()
        self.screen = screen
        self.assets = assets
        self.mouse: tuple[int, int] = (-1, -1)
        self.how_to_play_text = ""
        self.synopsis_text = ""
        self.best_text = ""
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            path = str(self.assets.font) if self.assets.font.is_file() else None
            font = pygame.font.Font(path, size)
            self._fonts[size] = font
        return font

    def _blit(
        self,
        texture: pygame.Surface,
        sprite: Sprite,
        rect: Rect | None = None,
        pos: Vec | None = None,
    ) -> None:
        rect = sprite.rect if rect is None else rect
        pos = sprite.pos if pos is None else pos
        area = pygame.Rect(
            int(rect.left), int(rect.top), int(rect.width), int(rect.height)
        ).clip(texture.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        image = texture.subsurface(area)
        sx, sy = abs(sprite.scale.x), abs(sprite.scale.y)
        if (sx, sy) != (1, 1):
            size = (round(area.width * sx), round(area.height * sy))
            if size[0] <= 0 or size[1] <= 0:
                return
            image = pygame.transform.scale(image, size)
        self.screen.blit(image, (math.floor(pos.x), math.floor(pos.y)))

    def _text(self, text: str, pos: tuple[float, float], size: int,
              color: tuple[int, int, int] = WHITE) -> None:
        if not text:
            return
        font = self._font(size)
        x, y = pos
        for line in text.split("\n"):
            if line:
                self.screen.blit(font.render(line, True, color), (int(x), int(y)))
            y += font.get_linesize()

    def _button(self, state: GameState, index: int) -> None:
        self._blit(self.assets.menus[index], state.menus[index])

    def draw(self, state: GameState) -> None:
        """Draw every active scene of ``state``."""
        self.screen.fill(BLACK)
        scenes = state.scenes
        if scenes.main:
            self._blit(self.assets.back[0], state.backgrounds[0])
            for index in range(3):
                self._button(state, index)
        if scenes.howtoplay:
            self._text(self.how_to_play_text, STORY_TEXT_POS, TEXT_SIZE)
            for index in (7, 8):
                self._button(state, index)
        if scenes.synopsis:
            self._text(self.synopsis_text, STORY_TEXT_POS, TEXT_SIZE)
            self._button(state, 8)
        if scenes.game:
            self._draw_game(state)
        if scenes.end:
            self._draw_end(state)
        self._draw_info(state)

    def _draw_land(self, state: GameState) -> None:
        sprite = state.map_sprites[0]
        texture = self.assets.map_textures[0]
        for x, y, top in land_tiles(state.land):
            rect = Rect(sprite.rect.left, top, sprite.rect.width, sprite.rect.height)
            self._blit(texture, sprite, rect, Vec(x, y))

    def _draw_bar(self, state: GameState, life: float, max_life: float, pos: Vec) -> None:
        width = health_bar_width(life, max_life)
        self._blit(
            self.assets.menus[LIFE_BAR],
            state.menus[LIFE_BAR],
            Rect(0, 0, width, BAR_HEIGHT),
            Vec(pos.x, pos.y),
        )

    def _draw_player_life(self, state: GameState) -> None:
        for index in (3, 4, 5):
            texture = self.assets.back[index]
            sprite = state.backgrounds[index]
            width = texture.get_width() * abs(sprite.scale.x)
            x = WIDTH // 2 - width / 2
            y = HEIGHT - (330 if index == 5 else 320)
            if index == 4:
                rect = player_life_rect(state.life)
                self._blit(texture, sprite, rect, Vec(x, y + rect.top))
            else:
                self._blit(texture, sprite, None, Vec(x, y))

    def _draw_game(self, state: GameState) -> None:
        self._draw_land(state)
        textures = {id(enemy): self.assets.viking for enemy in state.enemies}
        for kind, row in enumerate(state.towers):
            for tower in row:
                textures[id(tower)] = self.assets.towers[kind]
        for unit in draw_order(state):
            self._blit(textures[id(unit)], unit.sprite)
        self._blit(self.assets.map_textures[1], state.map_sprites[1])
        for enemy in state.enemies:
            self._draw_bar(state, enemy.life, MAX_LIFE, enemy.sprite.pos)
        for row in state.towers:
            for tower in row:
                if tower.pop:
                    self._draw_bar(state, tower.life, TOWER_LIFE, tower.sprite.pos)
        self._draw_player_life(state)
        self._blit(self.assets.back[2], state.backgrounds[2])
        self._text(str(state.coin), COIN_TEXT_POS, TEXT_SIZE)
        self._draw_score(state)
        if state.scenes.pause:
            self._blit(self.assets.back[1], state.backgrounds[1])
            for index in (QUIT, RESUME, MENU):
                self._button(state, index)
        else:
            for index in TOWER_BUTTONS:
                self._button(state, index)

    def _draw_score(self, state: GameState) -> None:
        pos = state.score_text_pos
        self._text(str(state.score), (pos.x, pos.y), state.score_text_size)

    def _draw_end(self, state: GameState) -> None:
        self._blit(self.assets.back[6], state.backgrounds[6])
        self._draw_score(state)
        self._text(self.best_text, BEST_TEXT_POS, BEST_TEXT_SIZE)
        for index in (MENU, RETRY, QUIT):
            self._button(state, index)

    def _draw_info(self, state: GameState) -> None:
        x, y = self.mouse
        for index in TOWER_BUTTONS:
            sprite = state.menus[index]
            bounds = sprite.bounds()
            if (
                sprite.pos.x <= x <= sprite.pos.x + bounds.width
                and sprite.pos.y <= y <= sprite.pos.y + bounds.height
            ):
                board = state.menus[BOARD]
                self._blit(self.assets.menus[BOARD], board)
                self._text(
                    info_text(index) or "",
                    (board.pos.x + 5, board.pos.y),
                    INFO_TEXT_SIZE,
                    RED,
                )
"""Unit behaviour during a match: movement, towers, fighting and draw order."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from .model import (
    HEIGHT,
    MAX_LIFE,
    SPEED,
    TOWER_LIFE,
    WALL_WIDTH,
    WIDTH,
    GameState,
    Unit,
)

ENEMY_STEP_MS = 100
TOWER_FRAME_MS = 150
HIT_INTERVAL_MS = 1000
SPAWN_BAND = HEIGHT - 250


class Sound(enum.Enum):
    """Sound effects triggered by the combat rules."""

    CLINK = "sound/hache.ogg"


def _iter_towers(state: GameState) -> Iterator[tuple[int, int, Unit]]:
    for kind, row in enumerate(state.towers):
        for slot, tower in enumerate(row):
            yield kind, slot, tower


def _spawn_x(enemy: Unit) -> float:
    return -enemy.sprite.texture_size[0] / 10


def advance_tower_frame(unit: Unit, kind: int) -> None:
    """Step the attack animation of a tower of the given kind."""
    width, height = unit.sprite.texture_size
    rect = unit.sprite.rect
    step = width // 5
    last = width - step
    if kind == 1:
        if rect.left < last:
            rect.left += step
        elif rect.top < height / 2:
            rect.top += height // 2
            rect.left = 0
        else:
            rect.top = 0
            rect.left = 0
    elif kind in (0, 2, 3):
        rows = 2 if kind == 0 else 3
        if rect.left >= step and rect.top >= height / rows:
            rect.top = 0
            rect.left = 0
        elif rect.left < last:
            rect.left += step
        else:
            rect.top += height // rows
            rect.left = 0


def place_tower(state: GameState, mouse: tuple[int, int], pressed: bool) -> bool:
    """Buy and drop the selected tower at the mouse position; True if placed."""
    x, y = mouse
    if not (
        pressed
        and not state.clicked
        and 0 <= x < WIDTH - WALL_WIDTH
        and 0 <= y < HEIGHT
        and state.tower < len(state.towers)
    ):
        return False
    kind = state.tower
    if not state.buy_tower(kind):
        return False
    for tower in state.towers[kind]:
        if not tower.pop:
            tower.sprite.pos.x = x
            tower.sprite.pos.y = y
            tower.pop = True
            return True
    return False


def _scatter_spawned(state: GameState) -> None:
    for enemy in state.enemies:
        if enemy.sprite.pos.x == _spawn_x(enemy):
            enemy.sprite.pos.y = state.rng.randrange(SPAWN_BAND)


def _move_enemy(state: GameState, enemy: Unit) -> bool:
    """Move one enemy a step; return True when its axe hits this frame."""
    _scatter_spawned(state)
    sprite = enemy.sprite
    width = sprite.texture_size[0]
    if not enemy.attack:
        sprite.pos.x += SPEED
    if enemy.life <= 0:
        sprite.pos.x = _spawn_x(enemy)
        enemy.life = MAX_LIFE
        enemy.attack = False
        enemy.damage *= 1.1
        state.score += 1
    clink = enemy.attack and sprite.rect.left == width - 5 * width // 10
    if sprite.rect.left < width - 2 * width // 10:
        sprite.rect.left += width // 10
    else:
        sprite.rect.left = 0
    return clink


def animate_enemies(
    state: GameState, mouse: tuple[int, int], pressed: bool
) -> list[Sound]:
    """Place a tower if asked, then walk and animate the enemies.

    Returns the sounds to play this frame.
    """
    timer = state.timers["enemies"]
    move = timer.elapsed_ms() >= ENEMY_STEP_MS
    if move:
        timer.restart()
    place_tower(state, mouse, pressed)
    sounds: list[Sound] = []
    if not state.scenes.game:
        return sounds
    for enemy in state.enemies:
        height = enemy.sprite.texture_size[1]
        enemy.sprite.rect.top = 0 if enemy.attack else height // 2
        if move or enemy.life <= 0:
            if _move_enemy(state, enemy):
                sounds.append(Sound.CLINK)
    return sounds


def _strike_ready(enemy: Unit) -> bool:
    if enemy.attack and enemy.fight.elapsed_ms() >= HIT_INTERVAL_MS:
        enemy.fight.restart()
        return True
    return False


def _hit_tower(enemy: Unit, tower: Unit) -> None:
    if _strike_ready(enemy) and tower.pop:
        if tower.life >= enemy.damage:
            tower.life = int(tower.life - enemy.damage)
        else:
            tower.pop = False
            tower.attack = False
            tower.life = TOWER_LIFE
    if not tower.pop:
        enemy.attack = False


def _hit_player(state: GameState, enemy: Unit) -> None:
    if _strike_ready(enemy):
        if state.life >= enemy.damage:
            state.life = int(state.life - enemy.damage)
        else:
            state.life = 0


def enemies_attack(state: GameState, kind: int, slot: int) -> None:
    """Let enemies blocked by one tower, or at the wall, strike."""
    tower = state.towers[kind][slot]
    for enemy in state.enemies:
        obs = tower.sprite.bounds()
        ene = enemy.sprite.bounds()
        right = ene.left + ene.width
        if (
            right <= obs.left
            and right + SPEED >= obs.left
            and ene.top >= obs.top
            and ene.top + ene.height <= obs.top + obs.height
        ):
            enemy.attack = True
            _hit_tower(enemy, tower)
        if right >= WIDTH - WALL_WIDTH:
            enemy.attack = True
            _hit_player(state, enemy)


def _in_range(tower: Unit, enemy: Unit) -> bool:
    obs = tower.sprite.bounds()
    ene = enemy.sprite.bounds()
    return (
        ene.left + ene.width > obs.left - 60
        and ene.left < obs.left + obs.width + 100
        and ene.top + ene.height > obs.top - 50
        and ene.top + 50 < obs.top + obs.height
    )


def _look_for_enemies(state: GameState, kind: int, tower: Unit) -> None:
    paused = state.scenes.pause
    found = False
    if not paused:
        for enemy in state.enemies:
            if _in_range(tower, enemy):
                advance_tower_frame(tower, kind)
                tower.attack = True
                found = True
                break
    if not found and not paused:
        tower.sprite.rect.top = 0
        tower.sprite.rect.left = 0


def _tower_strike(state: GameState, tower: Unit) -> None:
    fight = False
    if tower.fight.elapsed_ms() >= HIT_INTERVAL_MS and not state.scenes.pause:
        fight = True
        tower.fight.restart()
    if not (fight and tower.pop and tower.attack):
        return
    for enemy in state.enemies:
        if enemy.life > 0 and _in_range(tower, enemy):
            enemy.life = int(enemy.life - tower.damage)


def towers_attack(state: GameState) -> None:
    """Run one frame of fighting between towers and enemies."""
    timer = state.timers["tower"]
    animate = timer.elapsed_ms() >= TOWER_FRAME_MS
    if animate:
        timer.restart()
    for kind, slot, tower in _iter_towers(state):
        if tower.pop and animate:
            _look_for_enemies(state, kind, tower)
        _tower_strike(state, tower)
        if not state.scenes.pause:
            enemies_attack(state, kind, slot)


def _row(value: float) -> int | None:
    y = float(value)
    if not y.is_integer():
        return None
    row = int(y)
    return row if 0 <= row < HEIGHT else None


def _is_behind(enemy: Unit, tower: Unit) -> bool:
    obs = tower.sprite.bounds()
    ene = enemy.sprite.bounds()
    return (
        ene.top + ene.height < obs.top + obs.height
        and ene.left + ene.width >= obs.left
        and ene.left <= obs.left + obs.width
    )


def draw_order(state: GameState) -> list[Unit]:
    """Return the enemies and placed towers in the order they are drawn.

    Enemies hidden behind a tower come first; then towers and the remaining
    enemies follow row by row, top to bottom. Units whose row is not a whole
    number inside the screen are not drawn.
    """
    enemy_rows = [_row(enemy.sprite.pos.y) for enemy in state.enemies]
    placed = [tower for _, _, tower in _iter_towers(state) if tower.pop]
    tower_rows = [_row(tower.sprite.pos.y) for tower in placed]
    drawn: set[int] = set()
    order: list[Unit] = []

    for y in sorted({row for row in enemy_rows if row is not None}):
        for tower in placed:
            for index, enemy in enumerate(state.enemies):
                if index in drawn or enemy_rows[index] != y:
                    continue
                if _is_behind(enemy, tower):
                    order.append(enemy)
                    drawn.add(index)

    rows = {row for row in enemy_rows + tower_rows if row is not None}
    for y in sorted(rows):
        order.extend(
            tower for tower, row in zip(placed, tower_rows) if row == y
        )
        for index, enemy in enumerate(state.enemies):
            if index not in drawn and enemy_rows[index] == y:
                order.append(enemy)
                drawn.add(index)
    return order
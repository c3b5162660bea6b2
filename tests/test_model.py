import random

import pytest

from vikingdefense.model import (
    CHARA,
    DAMAGE,
    HEIGHT,
    MAX_LIFE,
    OBS,
    PLAYER_LIFE,
    TILE,
    TOWER_LIFE,
    UNIT,
    WIDTH,
    Rect,
    Scenes,
    Sprite,
    Timer,
    Vec,
    generate_land,
    new_game,
)

SIZES = {
    "map": [(60, 120), (287, 1080)],
    "menus": [(100, 300)] * 14,
    "back": [(1920, 1080)] * 7,
    "viking": (1000, 200),
    "towers": [(500, 200), (500, 200), (500, 300), (500, 300)],
}


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


@pytest.fixture
def state():
    return new_game(SIZES, FakeClock(), random.Random(1))


def test_counts_and_starting_values(state):
    assert len(state.enemies) == CHARA
    assert len(state.towers) == OBS
    assert all(len(row) == UNIT for row in state.towers)
    assert state.life == PLAYER_LIFE
    assert state.tower == OBS
    assert state.scenes == Scenes()
    assert state.scenes.main and not state.scenes.game


def test_enemy_frames(state):
    for enemy in state.enemies:
        rect = enemy.sprite.rect
        assert rect.width == 100
        assert rect.top == rect.height == 100
        assert rect.left % rect.width == 0 and 0 <= rect.left < 1000
        assert enemy.sprite.pos.x == -100.0
        assert enemy.life == MAX_LIFE and enemy.damage == DAMAGE


def test_tower_frames_and_damage(state):
    for kind, row in enumerate(state.towers):
        for tower in row:
            assert tower.sprite.rect == Rect(0, 0, 100, 100)
            assert tower.damage == 5 * (kind + 1)
            assert tower.life == TOWER_LIFE
            assert not tower.pop


def test_menu_rects_show_middle_third(state):
    for sprite in state.menus[:13]:
        assert sprite.rect.top == sprite.rect.height == 100
    assert state.map_sprites[0].rect == Rect(0, TILE, TILE, TILE)


def test_missing_sizes_rejected():
    with pytest.raises(ValueError):
        new_game({k: v for k, v in SIZES.items() if k != "back"}, FakeClock())
    with pytest.raises(ValueError):
        new_game({**SIZES, "menus": [(1, 1)]}, FakeClock())


def test_sprite_bounds_use_scale():
    sprite = Sprite((10, 20), pos=Vec(3, 4), scale=Vec(2, 2))
    assert sprite.bounds() == Rect(3, 4, 20, 40)


def test_timer():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 150.7
    assert timer.elapsed_ms() == 150
    timer.restart()
    assert timer.elapsed_ms() == 0


@pytest.mark.parametrize("kind, price", [(0, 50), (1, 100), (2, 150), (3, 200)])
def test_buy_tower_pays_price(state, kind, price):
    state.coin = price
    assert state.buy_tower(kind) is True
    assert state.coin == 0


@pytest.mark.parametrize("kind, price", [(0, 50), (3, 200)])
def test_buy_tower_needs_coins(state, kind, price):
    state.coin = price - 1
    assert state.buy_tower(kind) is False
    assert state.coin == price - 1


def test_buy_tower_needs_free_slot(state):
    for tower in state.towers[0]:
        tower.pop = True
    state.coin = 1000
    assert state.buy_tower(0) is False
    assert state.buy_tower(OBS) is False
    assert state.coin == 1000


def test_reset(state):
    state.coin = 70
    state.score_text_size = 100
    enemy = state.enemies[0]
    enemy.life, enemy.damage, enemy.pop = 0, 9.9, True
    enemy.sprite.pos.x = 500
    state.towers[2][1].pop = True
    state.towers[2][1].life = 3
    state.reset()
    assert state.coin == 0
    assert state.score_text_size == 50
    assert state.score_text_pos == Vec(15, 10)
    assert (enemy.life, enemy.damage, enemy.pop) == (MAX_LIFE, DAMAGE, False)
    assert enemy.sprite.pos.x == -100.0
    assert not state.towers[2][1].pop and state.towers[2][1].life == TOWER_LIFE


def test_generate_land():
    total = (WIDTH // TILE) * (HEIGHT // TILE)
    assert generate_land(FixedRng(11)) == "A" * total
    assert generate_land(FixedRng(0)) == "B" * total
    land = generate_land(random.Random(5))
    assert len(land) == total and set(land) <= {"A", "B"}
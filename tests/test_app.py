from pathlib import Path

import pygame
import pytest

from vikingdefense.app import Game, main, parse_args
from vikingdefense.menus import BATTLE_MUSIC, CLICK_SOUND, MAIN_MUSIC
from vikingdefense.render import (
    BACK_FILES,
    MAP_FILES,
    MENU_FILES,
    TOWER_FILES,
    VIKING_FILE,
)
from vikingdefense.typewriter import HOW_TO_PLAY_FILE, SYNOPSIS_FILE


def _save(path: Path, size) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill((50, 50, 50))
    pygame.image.save(surface, str(path))


def _make_tree(root: Path) -> None:
    _save(root / MAP_FILES[0], (60, 120))
    _save(root / MAP_FILES[1], (4, 4))
    for name in MENU_FILES:
        _save(root / name, (10, 9))
    for name in BACK_FILES:
        _save(root / name, (4, 4))
    _save(root / VIKING_FILE, (20, 4))
    for name in TOWER_FILES:
        _save(root / name, (10, 6))
    for name, text in ((HOW_TO_PLAY_FILE, "abc"), (SYNOPSIS_FILE, "xyz")):
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


@pytest.fixture
def game(tmp_path):
    _make_tree(tmp_path)
    return Game(tmp_path, False)


def _in_game(game):
    game.state.scenes.main = False
    game.state.scenes.game = True


def test_parse_args():
    assert parse_args(["-h"]) is True
    assert parse_args([]) is False
    assert parse_args(["-h", "-h"]) is False


def test_help_mode_opens_how_to_play(tmp_path):
    _make_tree(tmp_path)
    game = Game(tmp_path, True)
    assert game.state.scenes.howtoplay is True
    assert game.state.scenes.main is False


def test_click_play_starts_synopsis(game):
    button = game.state.menus[0]
    cues = game.step((int(button.pos.x) + 1, int(button.pos.y) + 1), True, False)
    assert game.state.scenes.synopsis is True
    assert game.state.scenes.main is False
    assert ("stop", MAIN_MUSIC) in cues
    assert ("play", CLICK_SOUND) in cues


def test_back_from_how_to_play(tmp_path):
    _make_tree(tmp_path)
    game = Game(tmp_path, True)
    button = game.state.menus[7]
    game.step((int(button.pos.x) + 1, int(button.pos.y) + 1), True, False)
    assert game.state.scenes.main is True
    assert game.state.scenes.howtoplay is False


def test_escape_toggles_pause_on_fresh_press(game):
    _in_game(game)
    game.step((900, 5), False, True)
    assert game.state.scenes.pause is True
    game.step((900, 5), False, True)
    assert game.state.scenes.pause is True
    game.step((900, 5), False, False)
    game.step((900, 5), False, True)
    assert game.state.scenes.pause is False


def test_game_over_records_best_score(game, tmp_path):
    _in_game(game)
    game.state.life = 0
    game.state.score = 7
    cues = game.step((900, 5), False, False)
    assert game.state.scenes.end is True
    assert game.state.scenes.game is False
    assert (tmp_path / "score").read_text(encoding="utf-8") == "7"
    assert game.best_text == "7"
    assert ("stop", BATTLE_MUSIC) in cues


def test_game_generates_land(game):
    _in_game(game)
    game.step((900, 5), False, False)
    assert set(game.state.land) <= {"A", "B"}
    assert len(game.state.land) == (1920 // 60) * (1080 // 60)


def test_main_without_assets_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 84


def test_missing_assets_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        Game(tmp_path, False)
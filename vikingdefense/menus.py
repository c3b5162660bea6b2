"""Menu buttons: layout, hovering, clicks, the pause key and the tower info board."""

from __future__ import annotations

from .model import HEIGHT, OBS, PLAYER_LIFE, WALL_WIDTH, WIDTH, GameState, Vec

PLAY = 0
HOW = 1
QUIT = 2
TOWER_BUTTONS = (3, 4, 5, 6)
BACK = 7
NEXT = 8
RESUME = 9
MENU = 10
LIFE_BAR = 11
RETRY = 12
BOARD = 13
HOVER_BUTTONS = 13

BUTTON_SCALE = 1.7
BOARD_SCALE = 0.5

MAIN_MUSIC = "sound/main.ogg"
BATTLE_MUSIC = "sound/battle.ogg"
CLICK_SOUND = "sound/clic.ogg"

Cue = tuple[str, str]

_INFO_TEXTS = {
    3: "name = Michou\nprize = 50\nType = Heavy\nshoot\nDamages = 5\neach seconds",
    4: "name = sniper\nprize = 100\nType = long\nshoot\nDamages = 10\neach seconds",
    5: "name = archer\nprize = 150\nType = High\nshoot\nDamages = 15\neach seconds",
    6: "name = Kyle\nprize = 200\nType = Strong\nshoot\nDamages = 20\neach seconds",
}

_INFO_ROWS = {3: HEIGHT - 700, 4: HEIGHT - 600, 5: HEIGHT - 500, 6: HEIGHT - 400}


def _button_scale() -> Vec:
    return Vec(BUTTON_SCALE, BUTTON_SCALE)


def layout_menus(state: GameState) -> None:
    """Place the main menu, tower shop and how-to-play buttons, and the wall."""
    for index, sprite in enumerate(state.menus[:3]):
        sprite.scale = _button_scale()
        sprite.pos = Vec(250, 250 + index * 200)
    state.map_sprites[1].pos = Vec(WIDTH - WALL_WIDTH, 0)
    for index, sprite in enumerate(state.menus[3:7], start=3):
        sprite.scale = _button_scale()
        sprite.pos = Vec(45 + 2 * 860, 200 + (index - 2) * 150)
    for index, sprite in enumerate(state.menus[7:9], start=7):
        sprite.scale = _button_scale()
        sprite.pos = Vec(400 + (index - 7) * 600, 45 + 2 * 400)


def layout_pause(state: GameState) -> None:
    """Centre the quit, resume and menu buttons of the pause screen."""
    for index in (QUIT, RESUME):
        sprite = state.menus[index]
        sprite.scale = _button_scale()
        width = sprite.bounds().width
        sprite.pos = Vec(WIDTH // 2 - width / 2, HEIGHT - index * 50 - 200)
    sprite = state.menus[MENU]
    sprite.scale = _button_scale()
    width = sprite.bounds().width
    sprite.pos = Vec(WIDTH // 2 - width / 2, HEIGHT - 5.5 * 50 - 200)


def layout_end(state: GameState) -> None:
    """Place the retry, menu and quit buttons of the game-over screen."""
    for index, factor in ((RETRY, 145), (MENU, 110), (QUIT, 75)):
        sprite = state.menus[index]
        sprite.scale = _button_scale()
        sprite.pos = Vec(WIDTH // 2 + 500, HEIGHT - 5.5 * factor + 10)


def _back_to_menu(state: GameState, cues: list[Cue]) -> None:
    state.scenes.main = True
    state.tower = OBS
    layout_menus(state)
    state.score = 0
    state.reset()
    state.life = PLAYER_LIFE
    cues.append(("stop", BATTLE_MUSIC))
    cues.append(("play", MAIN_MUSIC))


def _click_main(state: GameState, button: int, cues: list[Cue]) -> None:
    if state.clicked:
        return
    if button == PLAY:
        state.scenes.main = False
        state.scenes.synopsis = True
        cues.append(("stop", MAIN_MUSIC))
    if button == HOW:
        state.scenes.main = False
        state.scenes.howtoplay = True
    if button == QUIT:
        cues.append(("stop", MAIN_MUSIC))
        state.exit = True


def _click_how(state: GameState, button: int, cues: list[Cue]) -> None:
    if state.clicked:
        return
    if button == BACK:
        state.scenes.howtoplay = False
        state.scenes.main = True
    if button == NEXT:
        state.scenes.howtoplay = False
        state.clicked = True
        state.scenes.synopsis = True
        cues.append(("stop", MAIN_MUSIC))


def _click_synopsis(state: GameState, button: int, cues: list[Cue]) -> None:
    if state.clicked:
        return
    if button == NEXT:
        state.scenes.synopsis = False
        state.scenes.game = True
        state.clicked = True
        cues.append(("play", BATTLE_MUSIC))


def _click_pause(state: GameState, button: int, cues: list[Cue]) -> None:
    if state.clicked:
        return
    if button == RESUME:
        state.scenes.pause = False
    if button == MENU:
        state.scenes.pause = False
        state.scenes.game = False
        _back_to_menu(state, cues)
    if button == QUIT:
        cues.append(("stop", BATTLE_MUSIC))
        state.exit = True


def _click_tower(state: GameState, button: int) -> None:
    if state.clicked:
        return
    if button in TOWER_BUTTONS:
        state.tower = TOWER_BUTTONS.index(button)


def _click_end(state: GameState, button: int, cues: list[Cue]) -> None:
    if state.clicked:
        return
    if button == RETRY:
        state.scenes.end = False
        state.scenes.game = True
        state.clicked = True
        state.life = PLAYER_LIFE
        state.tower = OBS
        state.score = 0
        cues.append(("play", BATTLE_MUSIC))
        layout_menus(state)
        state.reset()
    if button == MENU:
        state.scenes.end = False
        _back_to_menu(state, cues)
    if button == QUIT:
        state.exit = True


def handle_click(state: GameState, button: int) -> list[Cue]:
    """Apply a left click on ``button`` to every active scene.

    Returns the sound cues, as ("play" | "stop", sound file) pairs.
    """
    cues: list[Cue] = []
    if not state.clicked:
        cues.append(("play", CLICK_SOUND))
    scenes = state.scenes
    if scenes.main:
        _click_main(state, button, cues)
    if scenes.howtoplay:
        _click_how(state, button, cues)
    if scenes.synopsis:
        _click_synopsis(state, button, cues)
    if scenes.pause:
        _click_pause(state, button, cues)
    if scenes.game:
        _click_tower(state, button)
    if scenes.end:
        _click_end(state, button, cues)
    sprite = state.menus[button]
    sprite.rect.top = sprite.texture_size[1] // 3 * 2
    return cues


def hover_buttons(
    state: GameState, mouse: tuple[int, int], pressed: bool
) -> list[Cue]:
    """Highlight the buttons under the mouse and click them when pressed."""
    x, y = mouse
    cues: list[Cue] = []
    for index, sprite in enumerate(state.menus[:HOVER_BUTTONS]):
        bounds = sprite.bounds()
        if (
            sprite.pos.x <= x <= sprite.pos.x + bounds.width
            and sprite.pos.y <= y <= sprite.pos.y + bounds.height
        ):
            info_board_position(state, index)
            sprite.rect.top = 0
            if pressed:
                cues.extend(handle_click(state, index))
        else:
            sprite.rect.top = sprite.texture_size[1] // 3
    state.clicked = pressed
    return cues


def toggle_pause(state: GameState, escape_pressed: bool) -> None:
    """Switch the pause screen on a fresh press of the escape key."""
    if escape_pressed and not state.escape:
        state.scenes.pause = not state.scenes.pause
    state.escape = escape_pressed


def info_text(button: int) -> str | None:
    """Return the description shown for a tower button, or None for others."""
    return _INFO_TEXTS.get(button)


def info_board_position(state: GameState, button: int) -> Vec | None:
    """Place the info board next to a hovered tower button and return its position."""
    row = _INFO_ROWS.get(button)
    if row is None:
        return None
    board = state.menus[BOARD]
    board.scale = Vec(BOARD_SCALE, BOARD_SCALE)
    width = board.bounds().width
    board.pos = Vec((WIDTH - 400) - width / 2, row)
    return Vec(board.pos.x, board.pos.y)
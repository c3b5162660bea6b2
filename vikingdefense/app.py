"""The game loop and the command that starts it."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame

from .combat import animate_enemies, towers_attack
from .menus import (
    BATTLE_MUSIC,
    CLICK_SOUND,
    MAIN_MUSIC,
    Cue,
    hover_buttons,
    layout_end,
    layout_menus,
    layout_pause,
    toggle_pause,
)
from .model import HEIGHT, WIDTH, Vec, generate_land, new_game
from .render import Renderer, load_assets
from .scores import BEST_SCORE_FILE, update_best
from .typewriter import (
    HOW_TO_PLAY_FILE,
    HOW_TO_PLAY_LIMIT,
    SYNOPSIS_FILE,
    SYNOPSIS_LIMIT,
    Typewriter,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 84
TITLE = "VIKING INTRUSION"
FRAMERATE = 60
COIN_INTERVAL_MS = 2000
COIN_GAIN = 10
COIN_CAP = 200
END_SCORE_POS = (650, 330)
END_SCORE_SIZE = 100


class _Mixer:
    """Plays sound cues; stays silent when audio is unavailable."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}
        try:
            pygame.mixer.init()
            self._enabled = True
        except pygame.error:
            self._enabled = False

    def _get(self, name: str) -> pygame.mixer.Sound | None:
        if not self._enabled:
            return None
        if name not in self._sounds:
            try:
                self._sounds[name] = pygame.mixer.Sound(str(self._root / name))
            except (pygame.error, FileNotFoundError):
                self._sounds[name] = None
        return self._sounds[name]

    def apply(self, cues: list[Cue]) -> None:
        for action, name in cues:
            sound = self._get(name)
            if sound is None:
                continue
            sound.stop()
            if action == "play":
                sound.play(loops=-1 if name == BATTLE_MUSIC else 0)


class Game:
    """One running game: state, story text and the rules of each frame."""

    def __init__(self, root: str | os.PathLike[str] = ".", help_mode: bool = False) -> None:
        self.root = Path(root)
        self.assets = load_assets(self.root)
        self.state = new_game(self.assets.texture_sizes())
        layout_menus(self.state)
        if help_mode:
            self.state.scenes.howtoplay = True
            self.state.scenes.main = False
        self.how_to_play = Typewriter(self.root / HOW_TO_PLAY_FILE, HOW_TO_PLAY_LIMIT)
        self.synopsis = Typewriter(self.root / SYNOPSIS_FILE, SYNOPSIS_LIMIT)
        self.best_text = ""

    def _type(self, writer: Typewriter) -> None:
        timer = self.state.timers["howtoplay"]
        if writer.update(timer.elapsed_ms()):
            timer.restart()

    def _tick_coins(self) -> None:
        state = self.state
        timer = state.timers["coin"]
        if (
            timer.elapsed_ms() >= COIN_INTERVAL_MS
            and not state.scenes.pause
            and state.coin < COIN_CAP
        ):
            timer.restart()
            state.coin += COIN_GAIN

    def _game_over(self, cues: list[Cue]) -> None:
        state = self.state
        state.scenes.game = False
        state.scenes.end = True
        try:
            self.best_text = update_best(self.root / BEST_SCORE_FILE, state.score)
        except OSError:
            pass
        state.score_text_pos = Vec(*END_SCORE_POS)
        state.score_text_size = END_SCORE_SIZE
        cues.append(("stop", BATTLE_MUSIC))

    def _play_frame(
        self, mouse: tuple[int, int], pressed: bool, escape_pressed: bool
    ) -> list[Cue]:
        state = self.state
        cues: list[Cue] = []
        toggle_pause(state, escape_pressed)
        if state.land is None:
            state.land = generate_land(state.rng)
        if not state.scenes.pause:
            cues.extend(
                ("play", sound.value) for sound in animate_enemies(state, mouse, pressed)
            )
        cues.extend(hover_buttons(state, mouse, pressed))
        self._tick_coins()
        if state.life <= 0:
            self._game_over(cues)
        if state.scenes.pause:
            layout_pause(state)
        return cues

    def step(
        self, mouse: tuple[int, int], pressed: bool, escape_pressed: bool
    ) -> list[Cue]:
        """Run one frame of every active scene; return the sound cues."""
        state = self.state
        scenes = state.scenes
        cues: list[Cue] = []
        if scenes.main:
            cues.extend(hover_buttons(state, mouse, pressed))
        if scenes.howtoplay:
            self._type(self.how_to_play)
            cues.extend(hover_buttons(state, mouse, pressed))
        if scenes.synopsis:
            self._type(self.synopsis)
            cues.extend(hover_buttons(state, mouse, pressed))
        if scenes.game:
            towers_attack(state)
            cues.extend(self._play_frame(mouse, pressed, escape_pressed))
        if scenes.end:
            layout_end(state)
            cues.extend(hover_buttons(state, mouse, pressed))
        return cues

    def run(self) -> None:
        """Open the window and play until it is closed or the player quits."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            renderer = Renderer(screen, self.assets)
            mixer = _Mixer(self.root)
            mixer.apply([("play", MAIN_MUSIC)])
            clock = pygame.time.Clock()
            running = True
            while running and not self.state.exit:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                mouse = pygame.mouse.get_pos()
                pressed = pygame.mouse.get_pressed()[0]
                escape = pygame.key.get_pressed()[pygame.K_ESCAPE]
                mixer.apply(self.step(mouse, pressed, escape))
                renderer.mouse = mouse
                renderer.how_to_play_text = self.how_to_play.text
                renderer.synopsis_text = self.synopsis.text
                renderer.best_text = self.best_text
                renderer.draw(self.state)
                pygame.display.flip()
                clock.tick(FRAMERATE)
        finally:
            pygame.quit()


def parse_args(argv: list[str]) -> bool:
    """Return True when the game should open on the how-to-play screen."""
    return len(argv) == 1 and argv[0] == "-h"


def main(argv: list[str] | None = None) -> int:
    """Start the game from the current directory; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    help_mode = parse_args(list(argv))
    try:
        Game(Path.cwd(), help_mode).run()
    except (OSError, pygame.error) as exc:
        print(f"vikingdefense: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_SUCCESS


__all__ = ["CLICK_SOUND", "Game", "main", "parse_args"]

if __name__ == "__main__":
    sys.exit(main())
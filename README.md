# vikingdefense

A real-time tower defense game. Vikings march across the field toward
your wall. Buy towers with the coins you earn over time, drop them in
their path, and keep the wall standing for as long as you can.

## Installing

```
pip install .
```

The game uses pygame for its window, images and sound.

## Playing

Start the game from a directory that holds its assets:

```
vikingdefense
```

Pass `-h` to open straight onto the "how to play" screen:

```
vikingdefense -h
```

The command exits with status 0 when the game ends normally and 84 when
it cannot start, for example because an image is missing.

### Assets

The game looks for these files below the working directory:

- `pictures/map/`, `pictures/menus/` and `pictures/characters/`: all
  images are required.
- `text/how_to_play.txt` and `text/synopsis.txt`: the story screens,
  revealed one character every 50 ms.
- `font/PRViking.ttf`: optional; pygame's default font is used without it.
- `sound/`: optional; the game stays silent when a sound cannot be loaded
  or audio is unavailable.

### Controls

- **Left click** a menu button to choose it.
- **Left click** a tower button on the right to pick a tower type, then
  left click on the field to place one, if you have enough coins.
  Hovering a tower button shows its description.
- **Escape** pauses and resumes the game.

### Towers

| Tower  | Price | Damage per second |
|--------|-------|-------------------|
| Michou | 50    | 5                 |
| Sniper | 100   | 10                |
| Archer | 150   | 15                |
| Kyle   | 200   | 20                |

You can have at most four towers of each type on the field at once.
Every two seconds you earn 10 coins, up to 200. Each viking you defeat
adds one point to your score and comes back from the left edge hitting
10% harder. Vikings that reach a tower attack it once a second, and
vikings that reach the wall wear down your life. The game ends when your
life reaches zero. The best score is kept in a file named `score` in the
working directory.

## Using the package

The game rules work without a window:

- `vikingdefense.model.new_game(sizes, clock, rng)` builds a `GameState`
  from texture sizes; `GameState.reset()` and `GameState.buy_tower(kind)`
  apply the shop rules.
- `vikingdefense.combat` moves the vikings (`animate_enemies`), places
  towers (`place_tower`), runs the fights (`towers_attack`,
  `enemies_attack`) and gives the drawing order (`draw_order`).
- `vikingdefense.menus` lays out the buttons and applies clicks and the
  pause key (`hover_buttons`, `handle_click`, `toggle_pause`).
- `vikingdefense.scores.update_best(path, score)` keeps the best score.
- `vikingdefense.app.Game(root, help_mode)` loads the assets;
  `Game.step(mouse, pressed, escape_pressed)` runs one frame and returns
  sound cues, and `Game.run()` opens the window and plays.

## Running the tests

```
pip install .[test]
pytest
```
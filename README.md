# dinorunner

An endless side-scrolling runner. A small dinosaur runs along the ground while
cacti, and later birds, come towards it. Jump over them or duck under them.
The game speeds up the longer you survive. Your best score is kept between
sessions.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and plays the music.

## Playing

```
dinorunner
```

Options:

- `--assets DIR` sets the directory that holds the images, font and music.
  The default is the current directory.
- `--highscore FILE` sets the file the high score is read from and written to.
  The default is `highscore.txt`.

The game opens an 800×600 window with a start menu. Click **START GAME** or
press Space to begin.

| Key           | Action                               |
|---------------|--------------------------------------|
| Space / Up    | Jump (or start / restart the game)   |
| Down (hold)   | Crouch                               |
| P             | Pause / continue                     |
| R             | Restart                              |

During a run, the **PAUSE** and **RESTART** buttons in the top left corner do
the same with the mouse. **EXIT** in the start menu closes the game.

How the game plays:

- The score goes up by one every tenth of a second.
- A new obstacle appears about every 20 points, give or take 5.
- The running speed rises steadily during a run.
- From a score of 300 on, three in ten of the new obstacles are birds. Birds
  fly at a random height.
- When the dinosaur hits something, the run ends and the high score is saved.
- The high score is also saved when the window closes.

## Assets

The game looks for these files in its asset directory:

- `dino_run1.png`, `obstacle1.png`, `obstacle2.png` and `obstacle3.png` are
  required.
- `dino_run2.png`, `dino_dead.png`, `dino_crouch1.png`, `dino_crouch2.png`,
  `bird1.png` and `bird2.png` are optional. A missing frame is replaced by
  another frame or by a plain coloured block.
- `ground.png` is optional. Without it, the ground is a plain black line.
- `background_music.ogg` is optional. It loops while you play. Without it, the
  game is silent.
- `arial.ttf` is optional. Without it, pygame's default font is used.

If a required image is missing, `dinorunner` reports the error, does not
start, and exits with status -1.

## Using it as a library

The rules of the game are in `dinorunner.game.DinoGame`, which needs no window:

```python
import random
from dinorunner.game import DinoGame
from dinorunner.highscore import HighScoreStore

game = DinoGame(HighScoreStore("highscore.txt"), random.Random(1), None, 800, 0)
game.restart()
game.jump()
game.update(0.016)
print(game.score, game.dino_y, game.running)
```

If `music` is `None`, the game uses a `SilentMusic` player. If `ground_width`
is `0` or `None`, the game does not scroll a ground texture.

The other modules:

- `dinorunner.highscore.HighScoreStore` reads the high score from a plain text
  file and writes it back. It returns 0 when the file is missing or unreadable.
- `dinorunner.game` also provides `Rect`, `Entity`, `EntityKind` and
  `calculate_spawn_interval`.
- `dinorunner.gui` provides `Button`, `Buttons` and `create_buttons`, which
  lay out the buttons and track mouse hover.
- `dinorunner.assets.load_assets` loads the files listed above. It raises
  `AssetError` when a required image is missing.
- `dinorunner.render.Renderer` draws a game onto a pygame surface.
  `ground_positions` computes where the ground texture is tiled.
- `dinorunner.app.GameApp` opens the window and connects keyboard and mouse
  input to the game. `dinorunner.app.run` drives its frame loop.

## Running the tests

```
pip install .[test]
pytest
```
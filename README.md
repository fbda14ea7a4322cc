# spaceshooter

A small arcade space shooter that runs in your terminal. You fly a jet along
the bottom of the playfield and shoot the two enemies drifting down towards
you. Each game starts with three lives, and your personal best and the overall
record are kept between games.

## Installing

```
pip install .
```

## Playing

```
spaceshooter
```

The command takes no options apart from `--help`. It hides the cursor and
reads keys one at a time until you quit.

### Logging in

You are first asked for a player name.

- For a name that is not registered yet, you set a password. The name and
  password are saved, and you are then asked to enter that password.
- For a registered name, the game shows "Player already exists!" and then asks
  for the password.

You get three attempts at the password. After three failures the game asks
whether to enter a name again (`y`). Any other answer ends the program.

### Menu

Once you are logged in, the menu offers:

1. Start Game
2. Restart (back to the name prompt)
3. Instructions
4. Quit

### Controls

| Key         | Action                    |
|-------------|---------------------------|
| Left arrow  | Move left                 |
| Right arrow | Move right                |
| Space       | Shoot a pair of bullets   |
| Escape      | Leave the game early      |

### Rules

- You start each game with 3 lives.
- Each enemy you hit adds 1 to your score.
- An enemy reaching your jet costs 1 life.
- The game ends when your lives run out. A game-over screen then shows your
  score, your best and the overall best.

The score is recorded whether the game ends by running out of lives or by
pressing Escape. Sounds use the terminal bell.

## Files

The game keeps its data as plain text in the directory it is run from:

- `game.txt` holds the registered players, one `name password` pair per line.
  Passwords are stored as typed, without hashing.
- `Player_Scores.txt` holds each player's best score as `name score`.
- `Overall_High_Score.txt` holds the line `Overall High Score: N`. The file is
  created with a score of 0 the first time a game starts.
- `Instructions.txt` holds a short summary of the controls. It is written each
  time a game starts.

## Using it from Python

The modules also work on their own:

- `spaceshooter.game.Game` holds the game state and rules and does no drawing.
  `tick()` returns a list of `Event` values (`COLLISION`, `GAME_OVER`, `HIT`,
  `NEW_BEST`) for the current frame.
- `spaceshooter.storage.ScoreStore` reads and writes the player and score files
  in a directory you choose.
- `spaceshooter.screen` draws the screens on a `Terminal`, which wraps a
  `blessed.Terminal`.
- `spaceshooter.cli.Session` runs the login, the menu and the game loop.

```python
import random
from spaceshooter.game import Game
from spaceshooter.storage import ScoreStore

game = Game(random.Random(1))
game.fire()
events = game.tick()

store = ScoreStore(".")
print(store.read_overall_high_score())
```

## Running the tests

```
pip install .[test]
pytest
```
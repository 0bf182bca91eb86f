# pongfire

A full-screen Pong game built on pygame. You can play alone against the CPU or
play against a friend on the same keyboard. Every match that ends or is
cancelled is saved to a CSV file, and the ranking screen lists past results.

## Installing

```
pip install .
```

To install the test suite's requirements as well and run it:

```
pip install ".[test]"
pytest
```

## Assets

The game loads its fonts, images, sounds and music from `src/assets` under the
**current working directory**, so start it from the folder that contains
`src/assets`. The package does not ship these files. It expects:

- fonts `HurmitNerdFont-Bold.otf` and `Blanka.otf`, plus the window icon
  `logo.webp`. These are required, and the game stops with a pygame error if
  one is missing.
- images `pasto.webp`, `tierra.webp`, `roca.webp`, `fuego.webp` and
  `basalto.webp`, sounds `short-fire-whoosh_1-317280.mp3`,
  `success-340660.mp3`, `radio-338296.mp3` and
  `8-bit-victory-sound-101319.mp3`, and the music
  `best-game-console-301284.mp3`. These are optional. If one is missing, a
  warning is logged and that element is not drawn or played.

Your pygame build must support extended image formats. Without them,
`pongfire` logs an error and exits with status 1.

## Playing

```
pongfire
```

The command accepts no options other than `--help`. The game opens full screen
on the main menu and hides the mouse cursor.

### Menu

| Key        | Action                      |
|------------|-----------------------------|
| Up / Down  | Move between the options    |
| Enter      | Choose the selected option  |

The options are:

- **Jugar Solo**: you play the left paddle and the CPU plays the right one.
- **Jugar 1v1**: two players share one keyboard.
- **Ranking**: shows the table of past matches.
- **Salir**: quits the game.

### In a match

| Key        | Action                                   |
|------------|------------------------------------------|
| W / S      | Move the left paddle up / down           |
| Up / Down  | Move the right paddle (1v1 only)         |
| Enter      | Serve the ball                           |
| Esc        | Pause                                    |

A match ends when a player reaches 7 points or when 120 seconds have passed.
The clock at the top keeps running while you wait to serve. Time spent paused
is not counted.

While the game is paused, press Enter to resume or Esc to cancel the match. A
cancelled match is still saved, but the game goes straight back to the menu.

### Results and ranking

When a match ends, a summary shows the outcome, both scores and the time
played. Press Enter or Esc to return to the menu.

A match is recorded as a CPU win (`Victoria CPU`) whenever the right-hand
player has more points. This applies in 1v1 matches too.

Results are appended to `src/assets/resultados.csv` under the working
directory. Each line holds four values:

- the outcome code: `0` draw, `1` player one, `2` player two, `3` cancelled, `4` CPU
- player one's score
- player two's score
- the time in seconds

For example: `1,7,3,42.5`.

## Using the pieces

The game logic lives in modules you can use on their own:

- `pongfire.results`: `Result`, `MatchOutcome`, `write_result`, `read_results`.
- `pongfire.ball`, `pongfire.paddle`, `pongfire.collision`, `pongfire.vec`: the court physics.
- `pongfire.keyboard`: `Keyboard` turns pygame key events into game commands.
- `pongfire.pong`: `PongMatch` runs one match on a pygame surface. It takes a millisecond clock that you can supply.
- `pongfire.game`: `Game` provides the screens. `ranking_row` and `outcome_label` format results.

Reading and writing results:

```python
from pathlib import Path
from pongfire.results import MatchOutcome, Result, read_results, write_result

path = Path("resultados.csv")
write_result(Result(MatchOutcome.PLAYER_1, 42.5, 7, 3), path)
for result in read_results(path):
    print(result.to_row())  # ['1', '7', '3', '42.5']
```

## What it does not do

- It does not include the fonts, images, sounds or music. You must provide them yourself, as described above.
- It has no settings. The asset folder, the window mode, the 7-point and 120-second limits, and the keys are all fixed.
- The ranking shows results in the order they were saved, with no sorting or limit on the number of rows.
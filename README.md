# gemesis

gemesis is a bot for a gem-trading card game with two to four players. You give
it the current position on standard input. It prints the move it chooses on
standard output.

By default it uses Monte Carlo tree search, with a time budget of about two
seconds. You can choose a minimax search instead. The minimax search deepens
one level at a time and uses alpha-beta pruning in two-player games.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Running the bot

```
gemesis < position.txt
```

Options:

| Option              | Effect                                                         |
|---------------------|----------------------------------------------------------------|
| `--minimax`         | use minimax search instead of Monte Carlo tree search          |
| `--time-limit SECS` | search budget in seconds (default 2.0 for either engine)       |
| `--max-steps N`     | upper bound on tree search iterations                          |
| `--depth N`         | with `--minimax`, search only this depth (at least 1)          |
| `--debug`           | print the parsed board and players to standard error           |

The Monte Carlo search always starts from the same fixed random seed. Given
the same position and the same number of iterations, it picks the same move.

### Input

The bot reads whitespace-separated integers in this order:

1. The number of players (1 to 4), the current player (counted from 1), and
   the round number. The round number is ignored.
2. The bank: six chip counts, one for each of the five gem colours, then gold.
3. The three card packs. Each pack gives its remaining size, which is ignored,
   and then its four visible card ids. An id of 0 marks an empty slot.
4. The number of nobles on the table, followed by their ids.
5. For each player:
   - six chip counts;
   - the number of cards they own, followed by the card ids;
   - the number of reserved cards, followed by the ids, with 0 for a card
     reserved face down;
   - the number of nobles they hold, followed by the noble ids.

Cards are numbered 1 to 90 and nobles 1 to 10. If a player already meets the
requirements of a noble that is still on the table, that noble is credited to
the player when the input is read.

If the input ends early or the player count is out of range, the bot writes a
message to standard error and exits with status 1.

### Output

The bot prints one line:

| Output            | Meaning                                            |
|-------------------|----------------------------------------------------|
| `1 n g1 g2 ...`   | take `n` chips of different colours `g1`, `g2`, …  |
| `1 0`             | take nothing                                       |
| `2 g`             | take two chips of colour `g`                       |
| `3 c`             | reserve card `c`                                   |
| `4 c`             | buy card `c`                                       |

Progress notes go to standard error. Lines meant for the game arbiter start
with `kibitz`.

## Library use

```python
import io
import random

from gemesis.protocol import read_game_state, format_final_move
from gemesis.mcts import MCTS
from gemesis.minimax import Minimax
from gemesis.moves import generate_moves, describe_move

game = read_game_state(io.StringIO(position_text))

for move in generate_moves(game):
    print(describe_move(move))

best = MCTS(random.Random(1), time_limit=1.0).best_move(game)
print(format_final_move(best), end="")

best = Minimax(time_limit=1.0, min_depth=2, max_depth=4).search(game)
```

### Modules

- `gemesis.constants`: the card and noble tables, the game limits and the
  search parameters. It also provides `card_cost`, `card_bonus` and
  `card_points`, and a process clock, `elapsed`.
- `gemesis.chips`: `ChipSet` (five gem counts plus gold, with a running
  total) and `FullChipSet`. `FullChipSet` adds card bonuses and handles buying
  and unbuying. This module also holds the `Action` enum and the `Move`
  record.
- `gemesis.game`: `PlayerState` and `GameState`. Each move can be played with
  `apply_move` and taken back with `unapply_move`.
- `gemesis.moves`: `generate_moves`, which lists every legal move for the
  current player, and `describe_move`.
- `gemesis.protocol`: `read_game_state`, `read_player_state`,
  `format_final_move` and `log_arbiter`.
- `gemesis.mcts`: `MCTS`, `Node`, the end-of-game scoring function `evaluate`,
  and `random_move`.
- `gemesis.minimax`: `Minimax`, which has `search`, `minimax` and
  `minimax_duo`. It also holds `Scores` and the static evaluation functions
  `evaluate`, `static_eval` and `static_eval_duo`.
- `gemesis.log`: coloured logging to standard error. `log_error` and a failed
  `log_assert` raise `GameError`.

## What it does not do

gemesis chooses a single move for a single position. It does not referee or
run a full game. It does not keep track of the card decks. When a Monte Carlo
playout needs a new card on the table, it draws a random card id.
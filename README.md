# duckpond

duckpond is a small arcade game. You play a green duck on a round platform that floats over the void. Six red rival ducks chase you and try to shove you off the edge.

The game logic runs without a window. The window uses pygame and draws the pond from above, in 2D.

## Installing

```
pip install duckpond
```

## Playing

To open the game window, run:

```
duckpond
```

Command options:

| Option | Meaning |
|--------|---------|
| `--width N`, `--height N` | Window size in pixels. The default is 1280 × 720. |
| `--fps N` | Frames per second. The default is 60. |
| `--seed N` | Random seed, so a game can be replayed. |
| `--frames N` | Stop after N frames. |
| `--headless` | Run without a window. This needs `--frames`. At the end it prints the final state, for example `state: main_menu`. |

Headless mode sends no key presses and no clicks. The game therefore stays on the main menu:

```
duckpond --headless --frames 600 --seed 1
```

The main menu has five buttons: **Play**, **Settings**, **Quit**, **Secret** and **Test Win**. Snow falls behind the menu. Menu text uses the font file `fonts/MouldyCheeseRegular-WyMWG.ttf` if it exists relative to the current directory. Otherwise it uses pygame's default font.

### Controls

| Key | Action |
|-----|--------|
| W A S D | Move. These keys do nothing while you are boosting. |
| Space | Boost. You need more than 10% energy to start. While you boost, your duck charges straight up the screen and uses energy. A boost ends when you release Space, when your energy runs out, or after one second. |
| Escape | In play, pause the game. In Settings, go back to the main menu. |

The pause menu has three buttons: **Resume**, **Main Menu** and **Quit Game**. Use **Resume** to go back into play.

### Rules

- You start with 3 points. Each fall off the platform costs one point, and you come back in the centre. The game is over when you reach 0 points.
- The game-over screen offers **Play Again** and **Main Menu**.
- Coins appear above the platform every few seconds. There are never more than two at a time, and each coin lasts ten seconds.
  - A gold coin makes you 1.5× bigger for six seconds.
  - A blue coin makes you half size for six seconds.
  - A rival who touches a coin uses it up, but the coin has no effect on the rival.
- The bar at the top right shows your boost energy. After two seconds without boosting, it starts to refill.
- The score list at the top left shows the rivals that are still above the void.

## What the game does not do

- A rival that falls off the platform keeps falling and never comes back. Because of this, the win screen cannot be reached by play. Only the **Test Win** button opens it, and its **Restart** button goes back to the main menu.
- The Settings screen has no settings. It only has a **Back** button.
- **Secret** opens an empty scene. The only way out of that scene is to close the window.
- If you pause once during a game and later press **Play Again**, the new round starts with an empty pond.
- There is no sound, and high scores are not saved.

## Using the pieces

You can drive the game from your own code or from tests.

`duckpond.game.Game` holds the whole state machine. The states are listed in `duckpond.states.GameState`.

- Call `Game.update(dt, keys, interactions)` once per frame. It returns the state after that frame.
- `keys` is a `duckpond.components.Input`. Use `press`, `release` and `clear_frame` to feed it key names such as `"w"` or `"space"`.
- `interactions` maps button labels to a `duckpond.ui.Interaction` value.
- `Game.set_state` switches state directly.
- `Game.transitions` records every change of state.

Example:

```python
import random

from duckpond.components import Input
from duckpond.game import Game
from duckpond.states import GameState
from duckpond.ui import Interaction

game = Game(rng=random.Random(1))
game.update(1 / 60, interactions={"Play": Interaction.PRESSED})
assert game.state is GameState.IN_GAME

keys = Input()
keys.press("d")
game.update(1 / 60, keys)
keys.clear_frame()
```

Other modules:

- `duckpond.world.World` holds the ducks and the coins, and steps their simple physics. `World.step_physics` returns `CollisionEvent`s.
- `duckpond.components` has the small value types that the systems share, such as `Vec3`, `Timer`, `Input` and `EnergyBoost`.

## Running the tests

```
pip install duckpond[test]
pytest
```
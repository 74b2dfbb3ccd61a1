"""The game-over, pause and win screens, and the checks that lead to them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from duckpond.components import (
    GameOverButtonAction,
    Input,
    PauseButtonAction,
    PauseState,
)
from duckpond.states import GameState
from duckpond.ui import Button, Color, Interaction, Screen
from duckpond.world import World

PAUSE_KEY = "escape"
DEFAULT_PLAYER_NAME = "Player"
SCORE_FONT_SIZE = 32.0
WIN_TITLE_FONT_SIZE = 80.0
WIN_BUTTON_FONT_SIZE = 40.0
WIN_BACKGROUND = Color(0.85, 0.85, 0.75, 1.0)
RESTART_BUTTON_COLOR = Color(0.56, 0.93, 0.56)
RESTART_BUTTON_HEIGHT = 65.0
RESTART_BUTTON_MARGIN = 20.0


@dataclass
class GameOverScreen(Screen):
    """The game-over screen, which also shows the player's final score."""

    final_score_text: str = ""


def _player_score(world: World) -> tuple[str, int]:
    for duck in world.ducks:
        score = duck.bear_score
        if score is not None and score.name == DEFAULT_PLAYER_NAME:
            return score.name, score.value
    return DEFAULT_PLAYER_NAME, 0


def spawn_game_over_screen(world: World) -> GameOverScreen:
    """The game-over screen showing the player's final score."""
    name, value = _player_score(world)
    return GameOverScreen(
        "Game Over",
        [
            Button("Play Again", GameOverButtonAction.RESTART),
            Button("Main Menu", GameOverButtonAction.MAIN_MENU),
        ],
        final_score_text=f"{name}'s Final Score: {value}",
    )


def handle_game_over_input(
    screen: Screen, interactions: Mapping[str, Interaction], world: World
) -> GameState | None:
    """Apply button interactions on the game-over screen.

    Going back to the main menu removes every duck that keeps a bear score.
    Returns the requested state, if any.
    """
    next_state: GameState | None = None
    for button in screen.buttons:
        interaction = interactions.get(button.label)
        if interaction is None:
            continue
        action = button.interact(interaction)
        if action is GameOverButtonAction.RESTART:
            next_state = GameState.IN_GAME
        elif action is GameOverButtonAction.MAIN_MENU:
            world.ducks[:] = [duck for duck in world.ducks if duck.bear_score is None]
            next_state = GameState.MAIN_MENU
    return next_state


def toggle_pause(keys: Input, current: GameState, pause_state: PauseState) -> GameState | None:
    """Switch between playing and paused when Escape is pressed."""
    if not keys.just_pressed(PAUSE_KEY):
        return None
    if current is GameState.IN_GAME:
        pause_state.transitioning_to_pause = True
        pause_state.was_paused = True
        return GameState.PAUSED
    if current is GameState.PAUSED:
        pause_state.transitioning_to_pause = False
        return GameState.IN_GAME
    return None


def spawn_pause_menu() -> Screen:
    return Screen(
        "Paused",
        [
            Button("Resume", PauseButtonAction.RESUME),
            Button("Main Menu", PauseButtonAction.MAIN_MENU),
            Button("Quit Game", PauseButtonAction.QUIT),
        ],
    )


def handle_pause_input(
    screen: Screen,
    interactions: Mapping[str, Interaction],
    pause_state: PauseState,
    world: World,
) -> GameState | None:
    """Apply button interactions on the pause menu.

    Quit Game sets ``screen.quit_requested``; Main Menu resets the pause
    flags and clears the world. Returns the requested state, if any.
    """
    next_state: GameState | None = None
    for button in screen.buttons:
        interaction = interactions.get(button.label)
        if interaction is None:
            continue
        action = button.interact(interaction)
        if action is PauseButtonAction.RESUME:
            pause_state.transitioning_to_pause = False
            next_state = GameState.IN_GAME
        elif action is PauseButtonAction.MAIN_MENU:
            pause_state.transitioning_to_pause = False
            pause_state.was_paused = False
            world.clear()
            next_state = GameState.MAIN_MENU
        elif action is PauseButtonAction.QUIT:
            screen.quit_requested = True
    return next_state


def check_win_condition(world: World) -> GameState | None:
    """WIN_SCREEN once every enemy is down (also when there are none)."""
    if all(duck.enemy.is_fallen for duck in world.enemies() if duck.enemy is not None):
        return GameState.WIN_SCREEN
    return None


def spawn_win_screen() -> Screen:
    return Screen(
        "You Win!",
        [
            Button(
                "Restart",
                GameOverButtonAction.RESTART,
                color=RESTART_BUTTON_COLOR,
                height=RESTART_BUTTON_HEIGHT,
            )
        ],
        background=WIN_BACKGROUND,
    )


def handle_win_screen_input(
    screen: Screen, interactions: Mapping[str, Interaction]
) -> GameState | None:
    """Return to the main menu when the restart button is pressed."""
    for button in screen.buttons:
        if interactions.get(button.label) is Interaction.PRESSED:
            return GameState.MAIN_MENU
    return None
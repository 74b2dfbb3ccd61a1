"""Top-level game states and the transitions between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    """Every screen the game can be on; the game starts in MAIN_MENU."""

    MAIN_MENU = "main_menu"
    IN_GAME = "in_game"
    SETTINGS = "settings"
    GAME_OVER = "game_over"
    WIN_SCREEN = "win_screen"
    PAUSED = "paused"
    SECRET_SCENE = "secret_scene"


INITIAL_STATE = GameState.MAIN_MENU


@dataclass(frozen=True)
class Transition:
    """A change of state: leaving ``source`` for ``target``.

    ``target`` is None when a state is left without a next state having been
    requested.
    """

    source: GameState
    target: GameState | None = None
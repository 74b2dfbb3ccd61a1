"""The game as a whole: which screen is up, what enters and leaves with it, and each frame."""

from __future__ import annotations

import random
from collections.abc import Mapping

from duckpond.background import WinterBackground, spawn_winter_background, update_snowflakes
from duckpond.boost import handle_ai_boost, handle_boost
from duckpond.camera import Camera, update_camera_position
from duckpond.components import GameSettings, Input, PauseState
from duckpond.enemy import enemy_behavior, handle_enemy_falls
from duckpond.hud import Hud, spawn_hud, update_boost_indicator, update_score_text
from duckpond.player import check_fall, player_movement, spawn_player
from duckpond.powerup import (
    CoinSpawner,
    apply_powerup_effects,
    collect_powerup_coin,
    remove_expired_powerup_coins,
    spawn_random_powerup_coin,
)
from duckpond.screens import (
    check_win_condition,
    handle_game_over_input,
    handle_pause_input,
    handle_win_screen_input,
    spawn_game_over_screen,
    spawn_pause_menu,
    spawn_win_screen,
    toggle_pause,
)
from duckpond.states import INITIAL_STATE, GameState, Transition
from duckpond.ui import Interaction, Screen, handle_menu_buttons, spawn_main_menu, spawn_settings_menu
from duckpond.world import CollisionEvent, World, spawn_enemies

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
SETTINGS_BACK_KEY = "escape"


def _last_request(requests: list[GameState | None]) -> GameState | None:
    chosen = None
    for request in requests:
        if request is not None:
            chosen = request
    return chosen


class Game:
    """Holds every part of a running game and moves it between states."""

    def __init__(
        self,
        rng: random.Random | None = None,
        window_size: tuple[float, float] = (WINDOW_WIDTH, WINDOW_HEIGHT),
    ) -> None:
        self.rng = rng or random.Random()
        self.window_width, self.window_height = window_size
        self.state = INITIAL_STATE
        self.world = World()
        self.pause_state = PauseState()
        self.settings = GameSettings()
        self.hud: Hud | None = None
        self.camera: Camera | None = None
        self.screen: Screen | None = None
        self.background: WinterBackground | None = None
        self.spawner = CoinSpawner()
        self.elapsed = 0.0
        self.quit_requested = False
        self.transitions: list[Transition] = []
        self._events: list[CollisionEvent] = []
        self._enter(self.state)

    def set_state(self, state: GameState) -> bool:
        """Leave the current state for ``state``; False if it is already current."""
        if state is self.state:
            return False
        transition = Transition(self.state, state)
        self._exit(transition)
        self.state = state
        self._enter(state)
        self.transitions.append(transition)
        return True

    def update(
        self,
        dt: float,
        keys: Input | None = None,
        interactions: Mapping[str, Interaction] | None = None,
    ) -> GameState:
        """Run one frame of ``dt`` seconds and return the state afterwards.

        ``interactions`` maps button labels to the pointer interactions that
        changed this frame.
        """
        if dt < 0:
            raise ValueError(f"cannot advance the game by a negative time: {dt}")
        keys = keys if keys is not None else Input()
        interactions = interactions or {}
        self.elapsed += dt

        if self.background is not None:
            update_snowflakes(
                self.background, dt, self.elapsed, self.window_width, self.window_height
            )

        requested = self._run_state(dt, keys, interactions)
        if requested is not None:
            self.set_state(requested)
        return self.state

    def _run_state(
        self, dt: float, keys: Input, interactions: Mapping[str, Interaction]
    ) -> GameState | None:
        state = self.state
        if state is GameState.IN_GAME:
            return self._play_frame(dt, keys)
        if state in (GameState.MAIN_MENU, GameState.SETTINGS) and self.screen is not None:
            request = handle_menu_buttons(self.screen, interactions)
            if self.screen.quit_requested:
                self.quit_requested = True
            if state is GameState.SETTINGS and keys.just_pressed(SETTINGS_BACK_KEY):
                request = GameState.MAIN_MENU
            return request
        if state is GameState.PAUSED and self.screen is not None:
            request = handle_pause_input(self.screen, interactions, self.pause_state, self.world)
            if self.screen.quit_requested:
                self.quit_requested = True
            return request
        if state is GameState.GAME_OVER and self.screen is not None:
            return handle_game_over_input(self.screen, interactions, self.world)
        if state is GameState.WIN_SCREEN and self.screen is not None:
            return handle_win_screen_input(self.screen, interactions)
        return None

    def _play_frame(self, dt: float, keys: Input) -> GameState | None:
        world = self.world
        requests: list[GameState | None] = []
        handle_boost(world, keys, dt)
        handle_ai_boost(world, dt, self.rng)
        if self.hud is not None:
            update_boost_indicator(self.hud, world)
        player_movement(world, keys, dt)
        enemy_behavior(world, dt, self.rng)
        requests.append(check_fall(world, dt))
        handle_enemy_falls(world, dt)
        if self.hud is not None:
            update_score_text(self.hud, world)
        update_camera_position(self.camera, world, dt)
        apply_powerup_effects(world, dt)
        spawn_random_powerup_coin(world, self.spawner, dt, self.rng)
        collect_powerup_coin(world, self._events)
        remove_expired_powerup_coins(world, dt)
        requests.append(toggle_pause(keys, self.state, self.pause_state))
        requests.append(check_win_condition(world))
        self._events = world.step_physics(dt)
        return _last_request(requests)

    def _setup_game(self) -> None:
        self.camera = Camera()
        spawn_player(self.world)
        self.hud = spawn_hud()
        spawn_enemies(self.world, self.rng)

    def _cleanup_game(self) -> None:
        self.world.clear()
        self.hud = None
        self.screen = None
        self.background = None
        self._events = []

    def _enter(self, state: GameState) -> None:
        if state is GameState.IN_GAME:
            if not self.pause_state.was_paused:
                self._setup_game()
        elif state is GameState.PAUSED:
            self.screen = spawn_pause_menu()
        elif state is GameState.GAME_OVER:
            self.screen = spawn_game_over_screen(self.world)
        elif state is GameState.WIN_SCREEN:
            self.camera = None
            self.screen = spawn_win_screen()
        elif state is GameState.MAIN_MENU:
            self.screen = spawn_main_menu()
            self.background = spawn_winter_background()
        elif state is GameState.SETTINGS:
            self.screen = spawn_settings_menu()
            self.background = spawn_winter_background()

    def _exit(self, transition: Transition) -> None:
        source = transition.source
        if source is GameState.IN_GAME:
            if (
                not self.pause_state.transitioning_to_pause
                and transition.target is not GameState.PAUSED
            ):
                self._cleanup_game()
        elif source in (GameState.PAUSED, GameState.GAME_OVER, GameState.WIN_SCREEN):
            self.screen = None
        elif source is GameState.MAIN_MENU:
            self.screen = None
            self.camera = None
            self.background = None
        elif source is GameState.SETTINGS:
            self.screen = None
            self.camera = None
import random

from duckpond.components import GameOverButtonAction, Input, PauseState
from duckpond.player import spawn_player
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
from duckpond.states import GameState
from duckpond.ui import (
    HOVERED_BUTTON_COLOR,
    NORMAL_BUTTON_COLOR,
    PRESSED_BUTTON_COLOR,
    Interaction,
)
from duckpond.world import World, spawn_enemies


def _escape() -> Input:
    keys = Input()
    keys.press("escape")
    return keys


def test_game_over_shows_player_score():
    world = World()
    duck = spawn_player(world)
    duck.bear_score.value = 2
    screen = spawn_game_over_screen(world)
    assert screen.title == "Game Over"
    assert screen.final_score_text == "Player's Final Score: 2"
    assert [b.label for b in screen.buttons] == ["Play Again", "Main Menu"]


def test_game_over_without_player_scores_zero():
    screen = spawn_game_over_screen(World())
    assert screen.final_score_text == "Player's Final Score: 0"


def test_game_over_restart():
    world = World()
    spawn_player(world)
    screen = spawn_game_over_screen(world)
    result = handle_game_over_input(screen, {"Play Again": Interaction.PRESSED}, world)
    assert result is GameState.IN_GAME
    assert screen.buttons[0].color == PRESSED_BUTTON_COLOR
    assert len(world.players()) == 1


def test_game_over_main_menu_removes_scored_ducks():
    world = World()
    spawn_player(world)
    spawn_enemies(world, random.Random(1))
    screen = spawn_game_over_screen(world)
    result = handle_game_over_input(screen, {"Main Menu": Interaction.PRESSED}, world)
    assert result is GameState.MAIN_MENU
    assert world.players() == []
    assert len(world.enemies()) == 6


def test_game_over_hover_only_recolours():
    world = World()
    screen = spawn_game_over_screen(world)
    result = handle_game_over_input(
        screen, {"Play Again": Interaction.HOVERED, "Main Menu": Interaction.NONE}, world
    )
    assert result is None
    assert screen.buttons[0].color == HOVERED_BUTTON_COLOR
    assert screen.buttons[1].color == NORMAL_BUTTON_COLOR


def test_toggle_pause_from_game():
    state = PauseState()
    assert toggle_pause(_escape(), GameState.IN_GAME, state) is GameState.PAUSED
    assert state.transitioning_to_pause is True
    assert state.was_paused is True


def test_toggle_pause_resume_keeps_was_paused():
    state = PauseState(transitioning_to_pause=True, was_paused=True)
    assert toggle_pause(_escape(), GameState.PAUSED, state) is GameState.IN_GAME
    assert state.transitioning_to_pause is False
    assert state.was_paused is True


def test_toggle_pause_ignored_without_key_or_elsewhere():
    state = PauseState()
    assert toggle_pause(Input(), GameState.IN_GAME, state) is None
    assert toggle_pause(_escape(), GameState.MAIN_MENU, state) is None
    assert state == PauseState()


def test_pause_menu_buttons():
    screen = spawn_pause_menu()
    assert screen.title == "Paused"
    assert [b.label for b in screen.buttons] == ["Resume", "Main Menu", "Quit Game"]


def test_pause_resume():
    state = PauseState(transitioning_to_pause=True, was_paused=True)
    world = World()
    spawn_player(world)
    screen = spawn_pause_menu()
    result = handle_pause_input(screen, {"Resume": Interaction.PRESSED}, state, world)
    assert result is GameState.IN_GAME
    assert state == PauseState(transitioning_to_pause=False, was_paused=True)
    assert len(world.ducks) == 1


def test_pause_main_menu_clears_world_and_flags():
    state = PauseState(transitioning_to_pause=True, was_paused=True)
    world = World()
    spawn_player(world)
    spawn_enemies(world, random.Random(2))
    screen = spawn_pause_menu()
    result = handle_pause_input(screen, {"Main Menu": Interaction.PRESSED}, state, world)
    assert result is GameState.MAIN_MENU
    assert state == PauseState()
    assert world.ducks == []


def test_pause_quit_requests_exit():
    screen = spawn_pause_menu()
    result = handle_pause_input(screen, {"Quit Game": Interaction.PRESSED}, PauseState(), World())
    assert result is None
    assert screen.quit_requested is True


def test_win_when_all_enemies_fallen():
    world = World()
    enemies = spawn_enemies(world, random.Random(3))
    assert check_win_condition(world) is None
    for duck in enemies:
        duck.enemy.is_fallen = True
    assert check_win_condition(world) is GameState.WIN_SCREEN


def test_win_with_no_enemies():
    assert check_win_condition(World()) is GameState.WIN_SCREEN


def test_win_screen_layout():
    screen = spawn_win_screen()
    assert screen.title == "You Win!"
    assert [b.label for b in screen.buttons] == ["Restart"]
    assert screen.buttons[0].action is GameOverButtonAction.RESTART


def test_win_screen_restart_goes_to_menu():
    screen = spawn_win_screen()
    original = screen.buttons[0].color
    assert handle_win_screen_input(screen, {"Restart": Interaction.HOVERED}) is None
    assert handle_win_screen_input(screen, {"Restart": Interaction.PRESSED}) is GameState.MAIN_MENU
    assert screen.buttons[0].color == original
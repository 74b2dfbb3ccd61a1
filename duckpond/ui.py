"""Menu styling, buttons and the main and settings menus."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from duckpond.components import MenuButtonAction
from duckpond.states import GameState

FONT_PATH = "fonts/MouldyCheeseRegular-WyMWG.ttf"
TITLE_FONT_SIZE = 64.0
BUTTON_FONT_SIZE = 32.0
BUTTON_WIDTH = 200.0
BUTTON_HEIGHT = 50.0
ROW_GAP = 20.0


class Interaction(Enum):
    """What the pointer is doing to a button."""

    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    NONE: ClassVar[Color]
    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]


Color.NONE = Color(0.0, 0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)

NORMAL_BUTTON_COLOR = Color(0.3, 0.5, 0.8)
HOVERED_BUTTON_COLOR = Color(0.4, 0.6, 0.9)
PRESSED_BUTTON_COLOR = Color(0.2, 0.3, 0.6)
TITLE_COLOR = Color(1.0, 0.9, 0.2)
BUTTON_TEXT_COLOR = Color.WHITE

_INTERACTION_COLORS = {
    Interaction.PRESSED: PRESSED_BUTTON_COLOR,
    Interaction.HOVERED: HOVERED_BUTTON_COLOR,
    Interaction.NONE: NORMAL_BUTTON_COLOR,
}


@dataclass(eq=False)
class Button:
    """A labelled button carrying the action it triggers."""

    label: str
    action: object
    color: Color = NORMAL_BUTTON_COLOR
    width: float = BUTTON_WIDTH
    height: float = BUTTON_HEIGHT

    def interact(self, interaction: Interaction) -> object | None:
        """Recolour for ``interaction``; return the action when pressed."""
        self.color = _INTERACTION_COLORS[interaction]
        return self.action if interaction is Interaction.PRESSED else None


@dataclass
class Screen:
    """A full-window column with a title above its buttons."""

    title: str
    buttons: list[Button] = field(default_factory=list)
    background: Color = Color.NONE
    quit_requested: bool = False

    def __post_init__(self) -> None:
        labels = [button.label for button in self.buttons]
        if len(labels) != len(set(labels)):
            raise ValueError(f"button labels must be unique on a screen: {labels}")


def spawn_main_menu() -> Screen:
    return Screen(
        "Bevy Demo",
        [
            Button("Play", MenuButtonAction.PLAY),
            Button("Settings", MenuButtonAction.SETTINGS),
            Button("Quit", MenuButtonAction.QUIT),
            Button("Secret", MenuButtonAction.SECRET),
            Button("Test Win", MenuButtonAction.TEST_WIN),
        ],
    )


def spawn_settings_menu() -> Screen:
    return Screen("Settings", [Button("Back", MenuButtonAction.BACK)])


_MENU_TARGETS = {
    MenuButtonAction.PLAY: GameState.IN_GAME,
    MenuButtonAction.SETTINGS: GameState.SETTINGS,
    MenuButtonAction.BACK: GameState.MAIN_MENU,
    MenuButtonAction.SECRET: GameState.SECRET_SCENE,
    MenuButtonAction.TEST_WIN: GameState.WIN_SCREEN,
}


def handle_menu_buttons(
    screen: Screen, interactions: Mapping[str, Interaction]
) -> GameState | None:
    """Apply changed interactions, keyed by button label, to a menu screen.

    Returns the state requested by the last pressed button, if any; the
    Quit button sets ``screen.quit_requested`` instead.
    """
    next_state: GameState | None = None
    for button in screen.buttons:
        interaction = interactions.get(button.label)
        if interaction is None:
            continue
        action = button.interact(interaction)
        if action is MenuButtonAction.QUIT:
            screen.quit_requested = True
        elif action in _MENU_TARGETS:
            next_state = _MENU_TARGETS[action]
    return next_state
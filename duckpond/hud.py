"""The in-game heads-up display: the score list and the boost bar."""

from __future__ import annotations

from dataclasses import dataclass

from duckpond.boost import boost_fill_percent
from duckpond.world import World

SCORE_HEADER = "Scores:"
BOOST_LABEL = "Boost:"
FALLEN_BELOW = -5.0

SCORE_FONT_SIZE = 24.0
BOOST_FONT_SIZE = 16.0
HUD_PADDING = 10.0
BOOST_PANEL_WIDTH = 250.0
BOOST_PANEL_HEIGHT = 20.0
BOOST_BAR_WIDTH = 200.0
BOOST_BAR_HEIGHT = 20.0
BOOST_PANEL_OFFSET = 10.0
BOOST_BACKGROUND_COLOR = (0.96, 0.96, 0.86)
BOOST_FILL_COLOR = (0.68, 0.85, 0.90)
TEXT_COLOR = (1.0, 1.0, 1.0)


@dataclass
class Hud:
    """Text shown on the left and the boost bar shown top right."""

    score_text: str = SCORE_HEADER
    boost_label: str = BOOST_LABEL
    boost_fill: float = 100.0


def spawn_hud() -> Hud:
    """A fresh HUD with an empty score list and a full boost bar."""
    return Hud()


def _format_scores(entries: list[tuple[str, int]]) -> str:
    lines = "\n".join(f"{name}: {value}" for name, value in entries)
    return f"{SCORE_HEADER}\n{lines}"


def update_score_text(hud: Hud, world: World) -> str:
    """List duck scores, highest first, leaving out ducks that fell off."""
    scored = [
        (duck.duck_score.name, duck.duck_score.value, duck.body.translation.y)
        for duck in world.ducks
        if duck.duck_score is not None
    ]
    scored.sort(key=lambda entry: entry[1], reverse=True)
    visible = [(name, value) for name, value, y in scored if y > FALLEN_BELOW]
    hud.score_text = _format_scores(visible)
    return hud.score_text


def bear_score_text(world: World) -> str:
    """The score list built from bear scores, highest first."""
    entries = [
        (duck.bear_score.name, duck.bear_score.value)
        for duck in world.ducks
        if duck.bear_score is not None
    ]
    entries.sort(key=lambda entry: entry[1], reverse=True)
    return _format_scores(entries)


def update_boost_indicator(hud: Hud, world: World) -> float:
    """Set the boost bar's fill from the player's energy; return the fill."""
    fill = boost_fill_percent(world)
    if fill is not None:
        hud.boost_fill = fill
    return hud.boost_fill
import pytest

from duckpond.app import _button_rects, _changed_interactions, main, parse_args
from duckpond.states import GameState
from duckpond.ui import Interaction, spawn_main_menu


def test_parse_args_defaults():
    args = parse_args([])
    assert args.headless is False
    assert args.frames is None
    assert args.seed is None


def test_parse_args_reads_values():
    args = parse_args(["--headless", "--frames", "4", "--seed", "9"])
    assert args.headless is True
    assert args.frames == 4
    assert args.seed == 9


@pytest.mark.parametrize("argv", [["--width", "0"], ["--fps", "-3"], ["--frames", "x"]])
def test_parse_args_rejects_bad_numbers(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_headless_needs_frames():
    with pytest.raises(SystemExit):
        parse_args(["--headless"])


def test_main_headless_runs_and_reports_state(capsys):
    assert main(["--headless", "--frames", "3", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out == f"state: {GameState.MAIN_MENU.value}\n"


def test_button_rects_form_centred_column():
    screen = spawn_main_menu()
    rects = _button_rects(screen, 800, 600)
    assert list(rects) == [button.label for button in screen.buttons]
    ordered = list(rects.values())
    for left, top, w, h in ordered:
        assert left + w / 2.0 == pytest.approx(400.0)
        assert top >= 0 and top + h <= 600
    for upper, lower in zip(ordered, ordered[1:]):
        assert upper[1] + upper[3] < lower[1]


def test_changed_interactions_only_reports_changes():
    rects = _button_rects(spawn_main_menu(), 800, 600)
    left, top, w, h = rects["Play"]
    inside = (left + 1, top + 1)
    previous = {}
    first = _changed_interactions(rects, inside, True, previous)
    assert first == {"Play": Interaction.PRESSED}
    second = _changed_interactions(rects, inside, True, previous)
    assert second == {}
    third = _changed_interactions(rects, inside, False, previous)
    assert third == {"Play": Interaction.HOVERED}
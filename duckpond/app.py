"""Command-line entry point: opens the game window or runs frames headless."""

from __future__ import annotations

import argparse
import random
from collections.abc import Mapping, Sequence

from duckpond.background import BACKGROUND_COLOR, SNOWFLAKE_COLOR
from duckpond.game import WINDOW_HEIGHT, WINDOW_WIDTH, Game
from duckpond.hud import (
    BOOST_BACKGROUND_COLOR,
    BOOST_BAR_HEIGHT,
    BOOST_BAR_WIDTH,
    BOOST_FILL_COLOR,
    BOOST_PANEL_OFFSET,
    HUD_PADDING,
)
from duckpond.screens import GameOverScreen
from duckpond.states import GameState
from duckpond.ui import (
    BUTTON_FONT_SIZE,
    FONT_PATH,
    ROW_GAP,
    TITLE_COLOR,
    TITLE_FONT_SIZE,
    Color,
    Interaction,
    Screen,
)
from duckpond.world import PLATFORM_COLOR, PLATFORM_RADIUS, RIM_COLOR, RIM_RADIUS

WINDOW_TITLE = "Bevy Demo - Spinning Cube"
DEFAULT_FPS = 60
TITLE_ROW_HEIGHT = 120.0
VIEW_MARGIN = 5.0

Rect = tuple[float, float, float, float]


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="duckpond", description="Push the other ducks off the pond.")
    parser.add_argument("--width", type=_positive_int, default=WINDOW_WIDTH, help="window width")
    parser.add_argument("--height", type=_positive_int, default=WINDOW_HEIGHT, help="window height")
    parser.add_argument("--fps", type=_positive_int, default=DEFAULT_FPS, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--frames", type=_positive_int, default=None, help="stop after this many frames")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    args = parser.parse_args(argv)
    if args.headless and args.frames is None:
        parser.error("--headless needs --frames")
    return args


def _button_rects(screen: Screen, width: float, height: float) -> dict[str, Rect]:
    """Where each button of ``screen`` sits: a centred column under the title."""
    total = TITLE_ROW_HEIGHT + sum(ROW_GAP + button.height for button in screen.buttons)
    top = (height - total) / 2.0 + TITLE_ROW_HEIGHT
    rects: dict[str, Rect] = {}
    for button in screen.buttons:
        top += ROW_GAP
        rects[button.label] = ((width - button.width) / 2.0, top, button.width, button.height)
        top += button.height
    return rects


def _interaction_at(rect: Rect, pos: tuple[float, float], clicked: bool) -> Interaction:
    left, top, w, h = rect
    inside = left <= pos[0] < left + w and top <= pos[1] < top + h
    if not inside:
        return Interaction.NONE
    return Interaction.PRESSED if clicked else Interaction.HOVERED


def _changed_interactions(
    rects: Mapping[str, Rect],
    pos: tuple[float, float],
    clicked: bool,
    previous: dict[str, Interaction],
) -> dict[str, Interaction]:
    changed = {}
    for label, rect in rects.items():
        current = _interaction_at(rect, pos, clicked)
        if previous.get(label, Interaction.NONE) is not current:
            changed[label] = current
        previous[label] = current
    return changed


def _rgb(color: Sequence[float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(c * 255))) for c in color[:3])  # type: ignore[return-value]


def _blend(top: Sequence[float], bottom: Sequence[float]) -> tuple[int, int, int]:
    alpha = top[3]
    return _rgb([t * alpha + b * (1.0 - alpha) for t, b in zip(top[:3], bottom)])


def _load_font(pygame, size: float):
    try:
        return pygame.font.Font(FONT_PATH, int(size))
    except (FileNotFoundError, OSError):
        return pygame.font.Font(None, int(size))


def _draw_text(pygame, surface, font, text: str, color, center) -> None:
    image = font.render(text, True, color)
    surface.blit(image, image.get_rect(center=center))


def _draw_background(pygame, surface, game: Game) -> None:
    background = game.background
    if background is None:
        return
    surface.fill(_rgb(background.color))
    flake_color = _blend(SNOWFLAKE_COLOR, BACKGROUND_COLOR)
    cx, cy = game.window_width / 2.0, game.window_height / 2.0
    for flake in background.snowflakes:
        center = (int(cx + flake.position.x), int(cy - flake.position.y))
        pygame.draw.circle(surface, flake_color, center, max(1, int(flake.size / 2.0)))


def _draw_world(pygame, surface, game: Game, font) -> None:
    width, height = game.window_width, game.window_height
    scale = min(width, height) / (2.0 * (PLATFORM_RADIUS + VIEW_MARGIN))
    cx, cy = width / 2.0, height / 2.0

    def project(x: float, z: float) -> tuple[int, int]:
        return int(cx + x * scale), int(cy + z * scale)

    pygame.draw.circle(surface, _rgb(RIM_COLOR), project(0.0, 0.0), int(RIM_RADIUS * scale))
    pygame.draw.circle(surface, _rgb(PLATFORM_COLOR), project(0.0, 0.0), int(PLATFORM_RADIUS * scale))
    for sensor in game.world.sensors:
        color = getattr(sensor, "color", (1.0, 1.0, 1.0))
        side = max(2, int(sensor.half_extent * 2.0 * scale))
        x, y = project(sensor.position.x, sensor.position.z)
        pygame.draw.rect(surface, _rgb(color), (x - side // 2, y - side // 2, side, side))
    for duck in game.world.ducks:
        pos = duck.body.translation
        radius = max(2, int(duck.body.radius * duck.body.scale.x * scale))
        pygame.draw.circle(surface, _rgb(duck.params.base_color), project(pos.x, pos.z), radius)

    hud = game.hud
    if hud is None:
        return
    top = HUD_PADDING
    for line in hud.score_text.splitlines():
        image = font.render(line, True, (255, 255, 255))
        surface.blit(image, (HUD_PADDING, top))
        top += image.get_height()
    bar_left = width - BOOST_PANEL_OFFSET - BOOST_BAR_WIDTH
    label = font.render(hud.boost_label, True, (255, 255, 255))
    surface.blit(label, (bar_left - label.get_width() - HUD_PADDING, BOOST_PANEL_OFFSET))
    pygame.draw.rect(
        surface,
        _rgb(BOOST_BACKGROUND_COLOR),
        (bar_left, BOOST_PANEL_OFFSET, BOOST_BAR_WIDTH, BOOST_BAR_HEIGHT),
    )
    fill = BOOST_BAR_WIDTH * max(0.0, min(hud.boost_fill, 100.0)) / 100.0
    pygame.draw.rect(
        surface, _rgb(BOOST_FILL_COLOR), (bar_left, BOOST_PANEL_OFFSET, fill, BOOST_BAR_HEIGHT)
    )


def _draw_screen(pygame, surface, game: Game, fonts, rects: Mapping[str, Rect]) -> None:
    screen = game.screen
    if screen is None:
        return
    title_font, button_font = fonts
    if screen.background.a > 0.0:
        surface.fill(_rgb((screen.background.r, screen.background.g, screen.background.b)))
    win = game.state is GameState.WIN_SCREEN
    text_color: Color = Color.BLACK if win else TITLE_COLOR
    first_top = min((rect[1] for rect in rects.values()), default=game.window_height / 2.0)
    title_center = (game.window_width / 2.0, first_top - ROW_GAP - TITLE_ROW_HEIGHT / 2.0)
    _draw_text(pygame, surface, title_font, screen.title, _rgb((text_color.r, text_color.g, text_color.b)), title_center)
    if isinstance(screen, GameOverScreen) and screen.final_score_text:
        center = (title_center[0], title_center[1] + TITLE_ROW_HEIGHT / 2.0)
        _draw_text(pygame, surface, button_font, screen.final_score_text, (255, 255, 255), center)
    label_color = (0, 0, 0) if win else (255, 255, 255)
    for button in screen.buttons:
        left, top, w, h = rects[button.label]
        pygame.draw.rect(surface, _rgb((button.color.r, button.color.g, button.color.b)), (left, top, w, h))
        _draw_text(pygame, surface, button_font, button.label, label_color, (left + w / 2.0, top + h / 2.0))


def _run_window(game: Game, args: argparse.Namespace) -> None:
    import pygame

    from duckpond.components import Input

    pygame.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts = (_load_font(pygame, TITLE_FONT_SIZE), _load_font(pygame, BUTTON_FONT_SIZE))
        hud_font = pygame.font.Font(None, 24)
        keys = Input()
        previous: dict[str, Interaction] = {}
        frames = 0
        while not game.quit_requested and (args.frames is None or frames < args.frames):
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    keys.press(pygame.key.name(event.key))
                elif event.type == pygame.KEYUP:
                    keys.release(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
            screen = game.screen
            rects = _button_rects(screen, args.width, args.height) if screen else {}
            if screen is None:
                previous.clear()
            interactions = _changed_interactions(rects, pygame.mouse.get_pos(), clicked, previous)
            dt = clock.tick(args.fps) / 1000.0
            game.update(dt, keys, interactions)
            keys.clear_frame()

            surface.fill((0, 0, 0))
            _draw_background(pygame, surface, game)
            if game.state in (GameState.IN_GAME, GameState.PAUSED):
                _draw_world(pygame, surface, game, hud_font)
            if game.screen is not None:
                _draw_screen(pygame, surface, game, fonts, _button_rects(game.screen, args.width, args.height))
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()


def _run_headless(game: Game, frames: int, fps: int) -> None:
    dt = 1.0 / fps
    for _ in range(frames):
        game.update(dt)
        if game.quit_requested:
            break
    print(f"state: {game.state.value}")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    game = Game(rng=random.Random(args.seed), window_size=(args.width, args.height))
    if args.headless:
        _run_headless(game, args.frames, args.fps)
    else:
        _run_window(game, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
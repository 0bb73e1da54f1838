"""Tests for translating pygame events into commands."""

import pytest

pygame = pytest.importorskip("pygame")

from snake_game.commands import Restart, SelectDifficulty, SetDirection  # noqa: E402
from snake_game.controls import InputTranslator  # noqa: E402
from snake_game.models import Difficulty, Direction, GameMode  # noqa: E402

BUTTONS = {
    Difficulty.SLUG: pygame.Rect(100, 340, 80, 40),
    Difficulty.WORM: pygame.Rect(240, 340, 90, 40),
    Difficulty.PYTHON: pygame.Rect(390, 340, 120, 40),
}


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(0, 0, 0))


@pytest.fixture
def controls():
    return InputTranslator(BUTTONS)


class TestWelcomeScreen:
    """Tests for input on the welcome screen."""

    @pytest.mark.parametrize("k,difficulty", [
        (pygame.K_s, Difficulty.SLUG),
        (pygame.K_w, Difficulty.WORM),
        (pygame.K_p, Difficulty.PYTHON),
    ])
    def test_level_keys(self, controls, k, difficulty):
        assert controls.translate(key(k), GameMode.WELCOME) == SelectDifficulty(difficulty)

    def test_arrows_do_nothing(self, controls):
        assert controls.translate(key(pygame.K_UP), GameMode.WELCOME) is None

    def test_click_on_button(self, controls):
        command = controls.translate(click((400, 350)), GameMode.WELCOME)
        assert command == SelectDifficulty(Difficulty.PYTHON)

    def test_click_outside_buttons(self, controls):
        assert controls.translate(click((10, 10)), GameMode.WELCOME) is None

    def test_right_click_ignored(self, controls):
        assert controls.translate(click((400, 350), button=3), GameMode.WELCOME) is None

    def test_hover_tracking(self, controls):
        controls.translate(motion((250, 350)), GameMode.WELCOME)
        assert controls.hovered is Difficulty.WORM
        controls.translate(motion((10, 10)), GameMode.WELCOME)
        assert controls.hovered is None


class TestPlaying:
    """Tests for input during play."""

    @pytest.mark.parametrize("k,direction", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_w, Direction.UP),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_d, Direction.RIGHT),
    ])
    def test_direction_keys(self, controls, k, direction):
        assert controls.translate(key(k), GameMode.PLAYING) == SetDirection(direction)

    def test_space_does_nothing(self, controls):
        assert controls.translate(key(pygame.K_SPACE), GameMode.PLAYING) is None

    def test_clicks_ignored(self, controls):
        assert controls.translate(click((400, 350)), GameMode.PLAYING) is None

    def test_hover_cleared(self, controls):
        controls.translate(motion((250, 350)), GameMode.WELCOME)
        controls.translate(motion((250, 350)), GameMode.PLAYING)
        assert controls.hovered is None


class TestGameOver:
    """Tests for input on the game over screen."""

    def test_space_restarts(self, controls):
        assert controls.translate(key(pygame.K_SPACE), GameMode.GAME_OVER) == Restart()

    def test_other_keys_ignored(self, controls):
        assert controls.translate(key(pygame.K_UP), GameMode.GAME_OVER) is None
        assert controls.translate(key(pygame.K_s), GameMode.GAME_OVER) is None

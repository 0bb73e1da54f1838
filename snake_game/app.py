#!/usr/bin/env python3
"""
Snake
A classic grid snake game with three difficulty levels

Features:
- Welcome screen with SLUG / WORM / PYTHON levels (keys S, W, P or mouse)
- Snake speeds up with every food eaten, up to the PYTHON rate
- Score bar with a per-session high score
- Game over screen, SPACE returns to the welcome screen

Run with: python -m snake_game
For headless testing: python -m snake_game --headless
"""

import argparse
import logging
import random
from typing import Optional, Sequence

import pygame

from . import config
from .commands import SelectDifficulty, SetDirection
from .controls import InputTranslator
from .food import FoodSpawner
from .geometry import GridGeometry
from .models import DEFAULT_DIFFICULTY, Direction, GameMode
from .render import Renderer
from .scheduler import TickScheduler
from .state import GameStateMachine, Snapshot

logger = logging.getLogger(__name__)


class Game:
    """Main game class: owns the window and wires adapters to the state machine"""

    def __init__(self, seed: Optional[int] = None):
        self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption(config.CAPTION)
        self.clock = pygame.time.Clock()

        self.geometry = GridGeometry(config.WINDOW_WIDTH, config.WINDOW_HEIGHT,
                                     config.CELL_SIZE, config.SCORE_BAR_ROWS)
        self.scheduler = TickScheduler(DEFAULT_DIFFICULTY.tick_rate, config.MAX_CATCH_UP_TICKS)
        self.state = GameStateMachine(
            self.geometry.board,
            FoodSpawner(random.Random(seed)),
            on_rate_change=self.scheduler.set_rate,
        )
        self.renderer = Renderer(self.geometry)
        self.controls = InputTranslator(self.renderer.buttons)
        self.hand_cursor = False

    def handle_input(self) -> bool:
        """Handle queued events, return False when the player quits"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            self.dispatch(event)
        return True

    def dispatch(self, event: pygame.event.Event):
        previous_mode = self.state.mode
        command = self.controls.translate(event, previous_mode)
        if command is not None:
            self.state.handle_command(command)
            if self.state.mode is GameMode.PLAYING and previous_mode is not GameMode.PLAYING:
                self.scheduler.reset()
        self.update_cursor()

    def update_cursor(self):
        wants_hand = self.controls.hovered is not None
        if wants_hand != self.hand_cursor:
            self.hand_cursor = wants_hand
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_HAND if wants_hand else pygame.SYSTEM_CURSOR_ARROW)

    def update(self, dt: float):
        """Run every game tick that fell due during this frame"""
        if self.state.mode is not GameMode.PLAYING:
            return
        for _ in range(self.scheduler.advance(dt)):
            self.state.tick()
            if self.state.mode is not GameMode.PLAYING:
                break

    def draw(self):
        self.renderer.draw(self.screen, self.state.snapshot(), self.controls.hovered)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        running = True
        while running:
            dt = self.clock.tick(config.FPS) / 1000.0

            running = self.handle_input()
            self.update(dt)
            self.draw()

        pygame.quit()


def autopilot(snapshot: Snapshot, current: Direction) -> Direction:
    """Greedy heading toward the food, never a reversal"""
    head_x, head_y = snapshot.snake[0]
    food_x, food_y = snapshot.food
    wanted = []
    if food_x != head_x:
        wanted.append(Direction.RIGHT if food_x > head_x else Direction.LEFT)
    if food_y != head_y:
        wanted.append(Direction.DOWN if food_y > head_y else Direction.UP)
    for direction in wanted:
        if direction is not current.opposite:
            return direction
    return current


def run_headless(game: Game, frames: int) -> int:
    """Play a scripted session frame by frame, return the final score"""
    dt = 1.0 / config.FPS
    for i in range(frames):
        game.handle_input()
        if game.state.mode is GameMode.WELCOME and i == 0:
            game.state.handle_command(SelectDifficulty(DEFAULT_DIFFICULTY))
            game.scheduler.reset()
        elif game.state.mode is GameMode.PLAYING:
            heading = autopilot(game.state.snapshot(), game.state.snake.direction)
            game.state.handle_command(SetDirection(heading))
        game.update(dt)
        game.draw()
    return game.state.score


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake_game", description="Classic snake game")
    parser.add_argument("--headless", action="store_true",
                        help="run a scripted session with the dummy SDL drivers")
    parser.add_argument("--frames", type=int, default=config.HEADLESS_FRAMES,
                        help="frames to run in headless mode")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    """Entry point"""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    headless = config.is_headless(args.headless)
    # SDL reads the driver choice at init time
    if headless:
        config.use_dummy_drivers()

    pygame.init()
    game = Game(seed=args.seed)

    if headless:
        print("Running in headless mode for testing...")
        score = run_headless(game, args.frames)
        print(f"Headless test complete. Score: {score}")
        pygame.quit()
    else:
        game.run()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
flappy_client.py

pygame front end: fixed-timestep scheduling, input handling and rendering.
All game rules live in physics_engine; this module only drives and draws it.
"""

import argparse
import math
import random
from typing import List, Optional

import pygame

from .constants import (
    RENDER_FPS, SCREEN_WIDTH, SCREEN_HEIGHT, MIN_PLAYFIELD_WIDTH,
    SKY_COLOR, PIPE_COLOR, BIRD_COLOR, TEXT_COLOR
)
from .data_models import StepReport
from .game_loop import FixedTimestep
from .physics_engine import GameEngine


class FlappyClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 seed: Optional[int] = None, debug: bool = False):
        pygame.init()

        # --- Game Logic ---
        self.engine = GameEngine(rng=random.Random(seed))

        self.width = max(width, MIN_PLAYFIELD_WIDTH)
        self.height = max(height, self._min_height())
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Birb")

        self.last_report: Optional[StepReport] = None
        self.show_debug = debug

        # Time Management
        self.clock = pygame.time.Clock()
        self.timestep = FixedTimestep()

        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 30)
        self.debug_font = pygame.font.Font(None, 24)

    def run(self):
        """The main client execution loop."""
        self.engine.reset(self.width, self.height)
        print(f"Game started on a {self.width}x{self.height} playfield.")

        running = True
        try:
            while running:
                frame_time = self.clock.tick(RENDER_FPS) / 1000.0

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_F3:
                        self.show_debug = not self.show_debug
                    elif event.type == pygame.VIDEORESIZE:
                        self._resize(event.w, event.h)
                    elif (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) \
                            or event.type == pygame.MOUSEBUTTONDOWN:
                        self._on_tap()

                # --- Simulation Loop (Fixed Timestep) ---
                for _ in range(self.timestep.advance(frame_time)):
                    self._tick()

                self._draw_game()
        finally:
            print(f"Quitting. Last score: {self.engine.state.score}")
            pygame.quit()

    def _on_tap(self):
        if self.engine.state.game_over:
            self.engine.reset(self.width, self.height)
            self.timestep.reset()
            self.last_report = None
            print("Game reset.")
        else:
            self.engine.jump()

    def _tick(self):
        report = self.engine.step(self.width, self.height)
        if report is None:
            return
        self.last_report = report
        if self.engine.state.game_over:
            print(f"Game over. Final score: {self.engine.state.score}")

    def _resize(self, width: int, height: int):
        """Tracks the new surface size; takes full effect on the next reset."""
        self.width = max(width, MIN_PLAYFIELD_WIDTH)
        self.height = max(height, self._min_height())
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)

    def _min_height(self) -> int:
        """Shortest window the engine accepts as a playfield."""
        return math.ceil(self.engine.min_playfield_height)

    def _blit_centered(self, surface: pygame.Surface, y: int):
        self.screen.blit(surface, (self.width // 2 - surface.get_width() // 2, y))

    def _draw_game(self):
        """Renders the game state. Read-only with respect to the engine."""
        screen = self.screen
        state = self.engine.state
        engine = self.engine
        screen.fill(SKY_COLOR)

        # Pipes
        top = engine.top_pipe_box(state)
        bottom = engine.bottom_pipe_box(state, self.height)
        pygame.draw.rect(screen, PIPE_COLOR, (top.x, top.y, top.width, top.height))
        pygame.draw.rect(screen, PIPE_COLOR, (bottom.x, bottom.y, bottom.width, bottom.height))

        # Bird
        pygame.draw.circle(
            screen, BIRD_COLOR, (int(state.bird_x), int(state.bird_y)), int(engine.bird_size // 2))

        # HUD
        score_text = self.large_font.render(f"Score: {state.score}", True, TEXT_COLOR)
        screen.blit(score_text, (100 - score_text.get_width() // 2, 50 - score_text.get_height() // 2))

        if state.game_over:
            title = self.large_font.render("Game Over!", True, TEXT_COLOR)
            hint = self.font.render("Tap anywhere to restart", True, TEXT_COLOR)
            self._blit_centered(title, self.height // 2 - title.get_height())
            self._blit_centered(hint, self.height // 2 + 5)

        if self.show_debug:
            self._draw_debug(engine.debug_lines(self.last_report))

        pygame.display.flip()

    def _draw_debug(self, lines: List[str]):
        y = 100
        for line in lines:
            surf = self.debug_font.render(line, True, TEXT_COLOR)
            self._blit_centered(surf, y)
            y += surf.get_height() + 2


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Birb.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Window height in pixels.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe placement.")
    parser.add_argument("--debug", action="store_true", help="Show the debug overlay (toggle with F3).")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    client = FlappyClient(args.width, args.height, seed=args.seed, debug=args.debug)
    client.run()


if __name__ == "__main__":
    main()

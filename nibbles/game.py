#!/usr/bin/env python3
"""
Nibbles host: window, input polling and drawing around the simulation.

The worm crawls one cell per tick across a wrap-around board, grows on
fruit, speeds up with every level, and starts over when it bites itself.

Run with: python -m nibbles
For headless testing: SDL_VIDEODRIVER=dummy python -m nibbles --headless
"""

import argparse
import logging
import math
import os
from typing import Any, Dict, Optional, Tuple

import pygame

from nibbles.config import Config
from nibbles.constants import LEFT, RIGHT, UP, WORM_HEAD_COLOR
from nibbles.controls import requested_direction
from nibbles.simulation import Simulation

logger = logging.getLogger(__name__)

# Colors
WHITE = (255, 255, 255)
DARK_BG = (10, 12, 20)
GRID_COLOR = (24, 30, 44)
SCORE_COLOR = (180, 180, 220)
TITLE_COLOR = (100, 200, 255)


def shade(color: Tuple[int, int, int], factor: float) -> Tuple[int, int, int]:
    """Scale a color towards black (factor < 1) or white (factor > 1)"""
    return tuple(max(0, min(255, int(c * factor))) for c in color)


class Game:
    """Lifecycle host: creates the simulation and drives it once per frame"""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        pygame.init()

        self.width = int(self.config.width)
        self.height = int(self.config.height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(f"Nibbles - {self.config.worm_name}")
        self.clock = pygame.time.Clock()

        try:
            self.font_large = pygame.font.Font(None, 72)
            self.font_small = pygame.font.Font(None, 32)
            self.font_tiny = pygame.font.Font(None, 24)
        except (pygame.error, OSError):
            self.font_large = pygame.font.SysFont('arial', 72)
            self.font_small = pygame.font.SysFont('arial', 32)
            self.font_tiny = pygame.font.SysFont('arial', 24)

        self.game_time = 0.0
        self.paused = False
        self.simulation = Simulation(self.config)

    def to_screen(self, position: Tuple[float, float]) -> Tuple[int, int]:
        """World coordinates (origin centered, y up) to pixel coordinates"""
        x, y = position
        return int(self.width / 2 + x), int(self.height / 2 - y)

    def cell_rect(self, position: Tuple[float, float], padding: int = 0) -> pygame.Rect:
        """Pixel rectangle of the cell centered on a world position"""
        size = int(self.config.cell_size)
        cx, cy = self.to_screen(position)
        rect = pygame.Rect(0, 0, size - padding * 2, size - padding * 2)
        rect.center = (cx, cy)
        return rect

    def handle_input(self) -> bool:
        """Process window events and poll direction keys, False means quit"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_p:
                    self.paused = not self.paused
                    logger.info("Paused" if self.paused else "Resumed")

        if not self.paused:
            self.simulation.steer(requested_direction(pygame.key.get_pressed()))
        return True

    def update(self, dt: float):
        """Feed the frame time to the simulation unless paused"""
        self.game_time += dt
        if self.paused:
            return
        self.simulation.update(dt)

    def draw(self):
        """Draw everything"""
        self.screen.fill(DARK_BG)
        self.draw_grid(self.screen)
        self.draw_fruit(self.screen)
        self.draw_worm(self.screen)
        self.draw_ui(self.screen)
        if self.paused:
            self.draw_paused(self.screen)
        pygame.display.flip()

    def draw_grid(self, surface: pygame.Surface):
        board = self.simulation.board
        half = board.cell_size / 2
        for column in range(board.columns + 1):
            x, _ = self.to_screen((board.min_x - half + column * board.cell_size, 0))
            pygame.draw.line(surface, GRID_COLOR, (x, 0), (x, self.height))
        for row in range(board.rows + 1):
            _, y = self.to_screen((0, board.min_y - half + row * board.cell_size))
            pygame.draw.line(surface, GRID_COLOR, (0, y), (self.width, y))

    def draw_fruit(self, surface: pygame.Surface):
        """Fruit square with a pulsing inner shine"""
        fruit = self.simulation.fruit
        rect = self.cell_rect(fruit.position, padding=2)
        pygame.draw.rect(surface, fruit.color, rect)

        pulse = 0.85 + 0.15 * math.sin(self.game_time * 5)
        shine = rect.inflate(-rect.width // 2, -rect.height // 2)
        pygame.draw.rect(surface, shade(fruit.color, 1.4 * pulse), shine)

    def draw_worm(self, surface: pygame.Surface):
        """Draw body from tail to head, darkening towards the tail"""
        worm = self.simulation.worm
        segments = worm.positions
        count = len(segments)

        for i in range(count - 1, -1, -1):
            t = i / max(1, count - 1)
            if i == 0:
                color = WORM_HEAD_COLOR
                rect = self.cell_rect(segments[i], padding=1)
            else:
                color = shade(worm.color, 1.0 - 0.4 * t)
                rect = self.cell_rect(segments[i], padding=2)
            pygame.draw.rect(surface, color, rect)

        if count:
            self.draw_eyes(surface, segments[0], worm.direction)

    def draw_eyes(self, surface: pygame.Surface, head: Tuple[float, float], direction: str):
        x, y = self.to_screen(head)
        eye_offset = 5
        if direction == RIGHT:
            eye_positions = [(x + 4, y - eye_offset), (x + 4, y + eye_offset)]
        elif direction == LEFT:
            eye_positions = [(x - 4, y - eye_offset), (x - 4, y + eye_offset)]
        elif direction == UP:
            eye_positions = [(x - eye_offset, y - 4), (x + eye_offset, y - 4)]
        else:
            eye_positions = [(x - eye_offset, y + 4), (x + eye_offset, y + 4)]

        for ex, ey in eye_positions:
            pygame.draw.circle(surface, (240, 240, 240), (ex, ey), 3)
            pygame.draw.circle(surface, (20, 20, 20), (ex, ey), 1)

    def draw_ui(self, surface: pygame.Surface):
        """Worm name, level and best level"""
        worm = self.simulation.worm

        level_text = f"{worm.name}  Level: {worm.level}"
        level_surface = self.font_small.render(level_text, True, SCORE_COLOR)
        surface.blit(level_surface, (10, 10))

        best_text = f"Best: {worm.max_level_reached}"
        best_surface = self.font_small.render(best_text, True, SCORE_COLOR)
        surface.blit(best_surface, (self.width - best_surface.get_width() - 10, 10))

        speed_text = f"{1.0 / worm.tick_interval:.1f} steps/s  Length: {len(worm.segments)}"
        speed_surface = self.font_tiny.render(speed_text, True, (150, 150, 180))
        surface.blit(speed_surface, (10, 45))

    def draw_paused(self, surface: pygame.Surface):
        """Draw pause overlay"""
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        surface.blit(overlay, (0, 0))

        pause_surface = self.font_large.render("PAUSED", True, TITLE_COLOR)
        surface.blit(pause_surface, pause_surface.get_rect(center=(self.width // 2, self.height // 2)))

        hint_surface = self.font_small.render("Press P to continue", True, SCORE_COLOR)
        surface.blit(hint_surface, hint_surface.get_rect(center=(self.width // 2, self.height // 2 + 50)))

    def run(self):
        """Main loop, runs until the window is closed or ESC is pressed"""
        running = True
        while running:
            dt = self.clock.tick(self.config.fps) / 1000.0

            running = self.handle_input()
            self.update(dt)
            self.draw()

        logger.info(f"Quit after {self.simulation.ticks} ticks, best level {self.simulation.worm.max_level_reached}")
        pygame.quit()

    def run_headless(self, frames: int) -> Dict[str, Any]:
        """Run a fixed number of frames at a fixed dt and return the final snapshot"""
        dt = 1.0 / self.config.fps
        for _ in range(frames):
            if not self.handle_input():
                break
            self.update(dt)
            self.draw()

        snapshot = self.simulation.snapshot()
        logger.info(
            f"Headless run complete: {snapshot['tick']} ticks, level {snapshot['level']}, "
            f"best {snapshot['max_level']}"
        )
        pygame.quit()
        return snapshot


def main(argv=None):
    """Entry point"""
    parser = argparse.ArgumentParser(description="Nibbles: a wrap-around worm simulation.")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a display for a fixed number of frames")
    parser.add_argument("--frames", type=int, default=600,
                        help="Frames to simulate in headless mode")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for fruit placement")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.log_level:
        config.log_level = args.log_level.upper()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    headless = args.headless or os.environ.get('SDL_VIDEODRIVER') == 'dummy'
    if headless:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        os.environ['SDL_AUDIODRIVER'] = 'dummy'

    game = Game(config)
    if headless:
        game.run_headless(args.frames)
    else:
        game.run()


if __name__ == "__main__":
    main()

"""Falling snow drawn pixel by pixel in a window."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass

WIDTH = 900
HEIGHT = 600
TITLE = "Snow"
FLAKE_COUNT = 200
FRAME_DELAY_MS = 15


def flake_pattern() -> list[tuple[int, int]]:
    """Offsets of the pixels of one 9x9 snowflake."""
    points: list[tuple[int, int]] = []
    for dy in range(9):
        if dy == 4:
            points.extend((dx, dy) for dx in range(9))
        else:
            edge = min(dy, 8 - dy)
            points.extend((dx, dy) for dx in (edge, 4, 8 - edge))
    return points


_PATTERN = tuple(flake_pattern())


def _sway(amplitude: int, degrees: int) -> int:
    return int(amplitude * math.sin(degrees * math.pi / 180))


@dataclass
class Snowflake:
    """One flake: its position, swing, shade of grey and falling speed."""

    x: int
    y: int
    degrees: int
    amplitude: int
    shade: int
    speed: int
    sway: int = 0

    @classmethod
    def spawn(cls, rng: random.Random, width: int, height: int) -> Snowflake:
        """A new flake somewhere in the band just above the screen."""
        degrees = rng.randrange(360)
        amplitude = rng.randrange(40) + 5
        return cls(
            x=rng.randrange(width),
            y=rng.randrange(height) - height,
            degrees=degrees,
            amplitude=amplitude,
            shade=rng.randrange(240) + 15,
            speed=rng.randrange(3),
            sway=_sway(amplitude, degrees),
        )

    def pixels(self) -> list[tuple[int, int]]:
        """Screen positions covered by the flake now."""
        left = self.x + self.sway
        return [(left + dx, self.y + dy) for dx, dy in _PATTERN]

    def step(self, rng: random.Random, width: int, height: int) -> list[tuple[int, int]]:
        """Move one frame and return the pixels drawn in it.

        A flake that falls past the bottom starts again at the top.
        """
        self.y += self.speed + 1
        self.sway = _sway(self.amplitude, self.degrees)
        drawn = self.pixels()
        self.degrees += 2
        if self.y >= height:
            self.y = 0
            self.x = rng.randrange(width)
            self.degrees = rng.randrange(360)
            self.amplitude = rng.randrange(40) + 20
            self.sway = _sway(self.amplitude, self.degrees)
            self.shade = rng.randrange(240) + 15
            self.speed = rng.randrange(3)
        return drawn


def main(argv: list[str] | None = None) -> int:
    """Open the window; key 2 starts the snow, Escape or closing the window quits."""
    parser = argparse.ArgumentParser(description="Falling snow.")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    import pygame

    rng = random.Random(args.seed)
    if pygame.init()[1] and not pygame.display.get_init():
        print("Unable to init video")
        return 1
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        flakes: list[Snowflake] = []
        snowing = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_2 and not snowing:
                        snowing = True
                        flakes = [Snowflake.spawn(rng, WIDTH, HEIGHT) for _ in range(FLAKE_COUNT)]
            if snowing:
                screen.fill((0, 0, 0))
                for flake in flakes:
                    colour = (flake.shade, flake.shade, flake.shade)
                    for px, py in flake.step(rng, WIDTH, HEIGHT):
                        if 0 <= px < WIDTH and 0 <= py < HEIGHT:
                            screen.set_at((px, py), colour)
                pygame.display.flip()
            pygame.time.wait(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    print("Exited cleanly")
    return 0
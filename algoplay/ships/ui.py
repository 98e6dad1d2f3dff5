"""Window for the two-player ships game: placing fleets and taking shots with the mouse."""

from __future__ import annotations

import argparse

from algoplay.ships.board import CELLS, COLUMNS, ROWS, Board, FleetBuilder, Game, ShotResult

CELL_WIDTH = 80
CELL_HEIGHT = 60
BOARD_WIDTH = CELL_WIDTH * COLUMNS
BOARD_HEIGHT = CELL_HEIGHT * ROWS
TOTAL_WIDTH = 1200
TITLE = "Ships"

_BACKGROUND = (0, 0, 0)
_SEA = (255, 0, 0)
_GRID = (255, 255, 0)
_HIT = (0, 150, 150)
_MISS = (0, 50, 50)


def cell_from_pixel(x: int, y: int) -> int:
    """Number of the board cell that holds the pixel, counted row by row from 0."""
    if not (0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT):
        raise ValueError(f"pixel ({x}, {y}) is outside the board")
    return (y // CELL_HEIGHT) * COLUMNS + x // CELL_WIDTH


def cell_origin(cell: int) -> tuple[int, int]:
    """Pixel position of the top-left corner of a cell."""
    if not 0 <= cell < CELLS:
        raise ValueError(f"cell {cell} outside the board 0..{CELLS - 1}")
    row, column = divmod(cell, COLUMNS)
    return column * CELL_WIDTH, row * CELL_HEIGHT


def _draw_grid(pygame, screen) -> None:
    for y in range(0, BOARD_HEIGHT, CELL_HEIGHT):
        pygame.draw.line(screen, _GRID, (0, y), (BOARD_WIDTH, y))
    for x in range(0, BOARD_WIDTH + 1, CELL_WIDTH):
        pygame.draw.line(screen, _GRID, (x, 0), (x, BOARD_HEIGHT))


def _fill(pygame, screen, rect: tuple[int, int, int, int], colour) -> None:
    screen.fill(colour, pygame.Rect(rect))
    _draw_grid(pygame, screen)
    pygame.display.flip()


def _fill_cell(pygame, screen, cell: int, colour) -> None:
    x, y = cell_origin(cell)
    _fill(pygame, screen, (x + 1, y + 1, CELL_WIDTH - 1, CELL_HEIGHT - 1), colour)


def _clear(pygame, screen) -> None:
    screen.fill(_BACKGROUND)
    _fill(pygame, screen, (0, 0, BOARD_WIDTH, BOARD_HEIGHT), _SEA)


def _show_shots(pygame, screen, board: Board) -> None:
    _fill(pygame, screen, (0, 0, BOARD_WIDTH, BOARD_HEIGHT), _SEA)
    for cell in sorted(board.shots):
        _fill_cell(pygame, screen, cell, _HIT if board.is_occupied(cell) else _MISS)


def _wait_click(pygame) -> int | None:
    """Block until a left click lands on the board; None when the window is closed."""
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            try:
                return cell_from_pixel(*event.pos)
            except ValueError:
                continue


def _wait_for_exit(pygame) -> None:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_a:
            return


def main(argv: list[str] | None = None) -> int:
    """Let both players place their fleets, then play until one fleet is sunk."""
    parser = argparse.ArgumentParser(description="Two-player ships game.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((TOTAL_WIDTH, BOARD_HEIGHT))
        pygame.display.set_caption(TITLE)

        boards = (Board(), Board())
        for board in boards:
            _clear(pygame, screen)
            builder = FleetBuilder(board)
            while not builder.done():
                cell = _wait_click(pygame)
                if cell is None:
                    return 0
                kind = builder.current_kind
                if builder.click(cell):
                    _fill_cell(pygame, screen, cell, kind.colour)

        game = Game(*boards)
        _clear(pygame, screen)
        while game.winner() is None:
            cell = _wait_click(pygame)
            if cell is None:
                return 0
            player = game.current
            print(f"Player {player}")
            print(cell)
            result = game.shoot(cell)
            if result is ShotResult.ALREADY_HIT:
                print("Target already hit")
            elif result is ShotResult.HIT:
                _fill_cell(pygame, screen, cell, _HIT)
            else:
                print(f"Player {player} missed")
                _show_shots(pygame, screen, game.target())

        print(f"Player {game.winner()} wins!")
        _wait_for_exit(pygame)
    finally:
        pygame.quit()
    return 0
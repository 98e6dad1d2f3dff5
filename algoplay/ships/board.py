"""Rules of the two-player ships game: fleet placement, shots and the winner."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum

COLUMNS = 10
ROWS = 10
CELLS = COLUMNS * ROWS


class ShipKind(Enum):
    """Kinds of ship with their length in cells and the colour they are drawn in."""

    DESTROYER = (2, (0, 100, 0))
    CRUISER = (3, (0, 200, 0))
    BATTLESHIP = (4, (0, 100, 100))
    CARRIER = (5, (0, 200, 100))

    def __init__(self, size: int, colour: tuple[int, int, int]) -> None:
        self.size = size
        self.colour = colour


FLEET: tuple[ShipKind, ...] = (
    ShipKind.DESTROYER,
    ShipKind.DESTROYER,
    ShipKind.DESTROYER,
    ShipKind.CRUISER,
    ShipKind.CRUISER,
    ShipKind.BATTLESHIP,
    ShipKind.CARRIER,
)
"""Ships each player places, in the order they are placed."""

FLEET_CELLS = sum(kind.size for kind in FLEET)
"""Hits needed to sink a whole fleet."""


class ShotResult(Enum):
    """Outcome of one shot."""

    HIT = "hit"
    MISS = "miss"
    ALREADY_HIT = "already hit"


@dataclass(frozen=True)
class Ship:
    """A placed ship and the cells it covers, in the order they were chosen."""

    kind: ShipKind
    cells: tuple[int, ...]


def _check_cell(cell: int) -> None:
    if not 0 <= cell < CELLS:
        raise ValueError(f"cell {cell} outside the board 0..{CELLS - 1}")


class Board:
    """One player's 10x10 sea: the cells ships take and the shots received."""

    def __init__(self) -> None:
        self._occupied: set[int] = set()
        self.shots: set[int] = set()
        self.ships: list[Ship] = []

    def is_occupied(self, cell: int) -> bool:
        """Whether a ship covers the cell."""
        _check_cell(cell)
        return cell in self._occupied

    def occupy(self, cell: int) -> None:
        """Mark the cell as covered by a ship."""
        _check_cell(cell)
        if cell in self._occupied:
            raise ValueError(f"cell {cell} is already occupied")
        self._occupied.add(cell)

    def release(self, cell: int) -> None:
        """Free a cell taken earlier."""
        _check_cell(cell)
        if cell not in self._occupied:
            raise ValueError(f"cell {cell} is not occupied")
        self._occupied.remove(cell)


class FleetBuilder:
    """Places the fleet on a board one clicked cell at a time.

    The first cell of a ship may be any free cell; the second must touch it
    across a side and fixes the ship's direction; every further cell must
    extend one end of the ship along that direction.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self._remaining = list(FLEET)
        self._cells: list[int] = []
        self._step: int | None = None

    @property
    def current_kind(self) -> ShipKind | None:
        """The ship being placed now, or None once the fleet is complete."""
        return self._remaining[0] if self._remaining else None

    def click(self, cell: int) -> bool:
        """Try to add the cell to the ship being placed; return whether it was taken."""
        if self.done():
            raise RuntimeError("the whole fleet is already placed")
        if self.board.is_occupied(cell):
            return False
        if not self._accepts(cell):
            return False

        self.board.occupy(cell)
        self._cells.append(cell)
        kind = self._remaining[0]
        if len(self._cells) == kind.size:
            self.board.ships.append(Ship(kind, tuple(self._cells)))
            self._remaining.pop(0)
            self._cells = []
            self._step = None
        return True

    def _accepts(self, cell: int) -> bool:
        if not self._cells:
            return True
        if len(self._cells) == 1:
            distance = abs(cell - self._cells[0])
            if distance in (1, COLUMNS):
                self._step = distance
                return True
            return False
        step = self._step
        assert step is not None
        return cell in (max(self._cells) + step, min(self._cells) - step)

    def done(self) -> bool:
        """Whether every ship of the fleet has been placed."""
        return not self._remaining


class Game:
    """Players take turns shooting at each other's board; a hit earns another shot."""

    def __init__(self, first: Board, second: Board) -> None:
        self._boards = (first, second)
        self._hits = Counter({1: 0, 2: 0})
        self.current = 1

    def target(self) -> Board:
        """The board the current player shoots at."""
        return self._boards[2 - self.current]

    def hits(self, player: int) -> int:
        """Ship cells the player has hit so far."""
        if player not in (1, 2):
            raise ValueError("player must be 1 or 2")
        return self._hits[player]

    def shoot(self, cell: int) -> ShotResult:
        """The current player fires at a cell of the opponent's board."""
        if self.winner() is not None:
            raise RuntimeError("the game is over")
        board = self.target()
        if board.is_occupied(cell):
            if cell in board.shots:
                return ShotResult.ALREADY_HIT
            board.shots.add(cell)
            self._hits[self.current] += 1
            return ShotResult.HIT
        board.shots.add(cell)
        self.current = 2 if self.current == 1 else 1
        return ShotResult.MISS

    def winner(self) -> int | None:
        """The player who has sunk the whole opposing fleet, or None."""
        for player in (1, 2):
            if self._hits[player] >= FLEET_CELLS:
                return player
        return None
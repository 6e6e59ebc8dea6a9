"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.engine.puzzle import Puzzle


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board(Puzzle[Direction]):
    """Represents the sliding puzzle board.

    Tiles are stored row-major as a flat tuple of ints. 0 represents the
    blank space.
    """

    size: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return cls(size=size, tiles=tuple(range(1, size * size)) + (0,))

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.tiles.index(0), self.size)

    @property
    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        return self.tiles[last] == 0 and all(
            v == i + 1 for i, v in enumerate(self.tiles[:last])
        )

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def is_solvable(self) -> bool:
        """Return True if the goal state is reachable (inversion parity)."""
        flat = [v for v in self.tiles if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if self.size % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = self.size - 1 - self.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0

    # -- successors -----------------------------------------------------------

    def next(self) -> list[tuple[Direction, Board]]:
        br, bc = self.blank_pos
        result: list[tuple[Direction, Board]] = []
        for direction, (dr, dc) in _OFFSETS.items():
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.size and 0 <= tc < self.size:
                result.append((direction, self._swap((tr, tc))))
        return result

    def _swap(self, target: tuple[int, int]) -> Board:
        br, bc = self.blank_pos
        tr, tc = target
        bi = br * self.size + bc
        ti = tr * self.size + tc
        tiles = list(self.tiles)
        tiles[bi], tiles[ti] = tiles[ti], tiles[bi]
        return Board(size=self.size, tiles=tuple(tiles))

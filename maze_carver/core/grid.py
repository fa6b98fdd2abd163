from typing import Iterator, List, Optional, Tuple

class Cell:
    __slots__ = ('row', 'col', 'walls', 'visited')

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        # [top, right, bottom, left], all present
        self.walls = [True, True, True, True]
        self.visited = False

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, walls={self.walls}, visited={self.visited})"

class Grid:
    # Wall indices
    TOP    = 0
    RIGHT  = 1
    BOTTOM = 2
    LEFT   = 3

    # Direction Helpers
    DROW = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    DCOL = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one row and one column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # Row-major, one Cell per position
        self.cells: List[Cell] = [Cell(r, c) for r in range(rows) for c in range(cols)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_index(self, row: int, col: int) -> int:
        if self.in_bounds(row, col):
            return row * self.cols + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[self.get_index(row, col)]

    def neighbor(self, row: int, col: int, direction: int) -> Optional[Cell]:
        """Adjacent cell in 'direction', or None when it falls outside the grid."""
        nrow = row + self.DROW[direction]
        ncol = col + self.DCOL[direction]
        if not self.in_bounds(nrow, ncol):
            return None
        return self.cells[nrow * self.cols + ncol]

    def remove_wall(self, row: int, col: int, direction: int):
        """
        Clears the wall on 'direction' side of (row, col).
        If a neighbor exists on that side its OPPOSITE wall goes too,
        so boundary walls (entrance/exit) can be opened with the same call.
        """
        self.cells[row * self.cols + col].walls[direction] = False

        other = self.neighbor(row, col, direction)
        if other is not None:
            other.walls[self.OPPOSITE[direction]] = False

    def carve_path(self, row: int, col: int, direction: int):
        """
        Removes the wall between (row, col) and the neighbor in 'direction'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        if self.neighbor(row, col, direction) is None:
            return # Cannot carve into void
        self.remove_wall(row, col, direction)

    def has_wall(self, row: int, col: int, direction: int) -> bool:
        return self.cells[row * self.cols + col].walls[direction]

    def walls(self, row: int, col: int) -> Tuple[bool, bool, bool, bool]:
        return tuple(self.cell(row, col).walls)

    def set_visited(self, row: int, col: int, visited: bool = True):
        self.cells[row * self.cols + col].visited = visited

    def is_visited(self, row: int, col: int) -> bool:
        return self.cells[row * self.cols + col].visited

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction_to_neighbor) for all valid grid neighbors,
        in the order up, right, down, left.
        Does NOT check walls (that's for traversal).
        """
        # Up
        if row > 0:
            yield (row - 1, col, self.TOP)
        # Right
        if col < self.cols - 1:
            yield (row, col + 1, self.RIGHT)
        # Down
        if row < self.rows - 1:
            yield (row + 1, col, self.BOTTOM)
        # Left
        if col > 0:
            yield (row, col - 1, self.LEFT)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for neighbors that are NOT blocked by a wall.
        """
        walls = self.cells[row * self.cols + col].walls
        for nrow, ncol, direction in self.get_neighbors(row, col):
            if not walls[direction]:
                yield (nrow, ncol)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

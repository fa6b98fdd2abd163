import logging
from typing import Iterator, List, Optional, Tuple
from maze_carver.core.grid import Grid
from maze_carver.algo.base import Generator, RandInt

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carving with an explicit stack.
    The stack always holds the current DFS path from (0,0) to the cell being extended.
    """

    def __init__(self, grid: Grid, seed: int = None, rand_int: Optional[RandInt] = None, yield_every: int = 100):
        super().__init__(grid, seed=seed, rand_int=rand_int)
        self.yield_every = yield_every
        self.stack: List[Tuple[int, int]] = []

    def run(self) -> Iterator[str]:
        grid = self.grid

        # Start at (0,0)
        grid.set_visited(0, 0)
        self.stack = [(0, 0)]
        stack = self.stack
        iterations = 0

        while stack:
            cr, cc = stack[-1]

            # Find unvisited neighbors (up, right, down, left)
            neighbors = []
            for nr, nc, direction in grid.get_neighbors(cr, cc):
                if not grid.is_visited(nr, nc):
                    neighbors.append((nr, nc, direction))

            if neighbors:
                nr, nc, direction = neighbors[self.rand_int(len(neighbors))]

                # Carve; current stays beneath the new cell for backtracking
                grid.carve_path(cr, cc, direction)
                grid.set_visited(nr, nc)

                stack.append((nr, nc))
                self.step_count += 1
                status = "Carving"
            else:
                # Backtrack
                stack.pop()
                status = "Backtracking"

            iterations += 1
            if iterations % self.yield_every == 0:
                yield f"{status}... Stack: {len(stack)}"

        # Entrance (left of top-left) and exit (right of bottom-right)
        grid.remove_wall(0, 0, Grid.LEFT)
        grid.remove_wall(grid.rows - 1, grid.cols - 1, Grid.RIGHT)

        logger.debug("Carved %dx%d maze: %d passages in %d iterations",
                     grid.rows, grid.cols, self.step_count, iterations)
        yield "Done"

def generate(rows: int, cols: int, rand_int: Optional[RandInt] = None, seed: int = None) -> Grid:
    """Builds a fresh rows x cols grid and carves a perfect maze into it."""
    grid = Grid(rows, cols)
    return RecursiveBacktracker(grid, seed=seed, rand_int=rand_int).run_all()

import random
from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional
from maze_carver.core.grid import Grid

# rand_int(n) -> uniform int in [0, n)
RandInt = Callable[[int], int]

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, rand_int: Optional[RandInt] = None):
        self.grid = grid
        self.seed = seed
        # Injected source wins over the seed (tests feed fixed sequences)
        self.rand_int = rand_int if rand_int is not None else random.Random(seed).randrange
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self) -> Grid:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid

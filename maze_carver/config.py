from dataclasses import dataclass

@dataclass(frozen=True)
class MazeConfig:
    """Fixed maze layout. Cell size is derived from the surface width."""
    rows: int = 20
    cols: int = 20
    width: int = 400   # Surface pixels
    height: int = 400

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Maze needs at least one row and one column, got {self.rows}x{self.cols}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Surface size must be positive, got {self.width}x{self.height}")
        if self.rows * self.cell_size > self.height:
            raise ValueError(
                f"{self.rows} rows of {self.cell_size:g}px do not fit in a surface {self.height}px high")

    @property
    def cell_size(self) -> float:
        return self.width / self.cols

DEFAULT_CONFIG = MazeConfig()

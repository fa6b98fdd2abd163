from collections import deque
from typing import Any, Dict
from maze_carver.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        # Only look right and down so each shared wall is counted once
        passages = 0
        for cell in grid:
            if cell.col < grid.cols - 1 and not cell.walls[Grid.RIGHT]:
                passages += 1
            if cell.row < grid.rows - 1 and not cell.walls[Grid.BOTTOM]:
                passages += 1
        return passages

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            row, col = queue.popleft()
            for nxt in grid.get_open_neighbors(row, col):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == grid.rows * grid.cols

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Spanning tree check: every cell reachable from (0,0)
        and exactly rows*cols - 1 passages (so no cycles).
        """
        return (MazeAnalyzer.count_passages(grid) == grid.rows * grid.cols - 1
                and MazeAnalyzer.is_connected(grid))

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        dead_ends = 0
        intersections = 0 # 3+ exits
        corridors = 0 # 2 exits

        for cell in grid:
            exits = sum(1 for _ in grid.get_open_neighbors(cell.row, cell.col))
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: intersections += 1

        total = grid.rows * grid.cols
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": MazeAnalyzer.count_passages(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

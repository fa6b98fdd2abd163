import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.core.complexity import MazeAnalyzer
from maze_carver.viz.renderer import render
from maze_carver.viz.surface import RecordingSurface

def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows*cols:,} cells) ---")

    # 1. Grid
    start_time = time.time()
    grid = Grid(rows, cols)
    print(f"Grid Init: {time.time() - start_time:.4f}s")

    # 2. Generation (DFS)
    algo = RecursiveBacktracker(grid, seed=42)
    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {(rows*cols)/gen_time:,.0f} cells/sec")

    # 3. Render to a headless surface
    surface = RecordingSurface(cols * 20, rows * 20)
    render_start = time.time()
    render(grid, surface, 20)
    print(f"Render Time: {time.time() - render_start:.4f}s ({len(surface.segments):,} segments)")

    print(f"Perfect: {MazeAnalyzer.is_perfect(grid)}")

def run_suite():
    sizes = [
        (20, 20),
        (100, 100),
        (500, 500),
        (1000, 1000),   # 1M - takes a while in pure Python
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)

if __name__ == "__main__":
    run_suite()

import argparse
import logging

from maze_carver.config import DEFAULT_CONFIG

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def main(argv=None):
    parser = argparse.ArgumentParser(description="Maze Carver: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Show Command
    show_parser = subparsers.add_parser("show", help="Open a window with a regenerate button")
    show_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze headlessly and report on it")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")
    config = DEFAULT_CONFIG

    if args.command == "show":
        from maze_carver.viz.renderer import Renderer
        logger.info("Opening window...")
        renderer = Renderer(config, seed=args.seed)
        renderer.init_window()
        renderer.run_loop()

    elif args.command == "generate":
        from maze_carver.algo.dfs import generate
        from maze_carver.core.complexity import MazeAnalyzer
        from maze_carver.viz.renderer import render
        from maze_carver.viz.surface import RecordingSurface

        logger.info(f"Generating {config.rows}x{config.cols} maze (seed={args.seed})...")
        grid = generate(config.rows, config.cols, seed=args.seed)

        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")
        if not MazeAnalyzer.is_perfect(grid):
            logger.error("Generated maze is not a spanning tree")

        surface = RecordingSurface(config.width, config.height)
        render(grid, surface, config.cell_size)
        logger.info(f"Rendered {len(surface.segments)} wall segments at cell size {config.cell_size:g}px")
        print("Done.")

if __name__ == "__main__":
    main()

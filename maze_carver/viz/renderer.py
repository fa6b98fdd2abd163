import logging
import random
import pygame
from maze_carver.config import MazeConfig, DEFAULT_CONFIG
from maze_carver.core.grid import Grid
from maze_carver.algo.dfs import generate
from maze_carver.viz.surface import DrawingSurface, PygameSurface

logger = logging.getLogger(__name__)

def render(grid: Grid, surface: DrawingSurface, cell_size: float):
    """
    Clears the surface and draws one line segment per wall still standing.
    Reads the grid only.
    """
    surface.clear_rect(0, 0, surface.width, surface.height)

    s = cell_size
    for cell in grid:
        x = cell.col * s
        y = cell.row * s
        top, right, bottom, left = cell.walls

        surface.begin_path()
        if top:
            surface.move_to(x, y)
            surface.line_to(x + s, y)
        if right:
            surface.move_to(x + s, y)
            surface.line_to(x + s, y + s)
        if bottom:
            surface.move_to(x, y + s)
            surface.line_to(x + s, y + s)
        if left:
            surface.move_to(x, y)
            surface.line_to(x, y + s)
        surface.stroke()

class Renderer:
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (0, 0, 0)
    COLOR_BAR = (230, 230, 230)
    COLOR_BUTTON = (60, 100, 160)
    COLOR_BUTTON_TEXT = (255, 255, 255)

    BAR_HEIGHT = 48
    BUTTON_SIZE = (160, 32)
    BUTTON_LABEL = "Generate Maze"

    def __init__(self, config: MazeConfig = DEFAULT_CONFIG, seed: int = None):
        self.config = config
        # One stream across clicks so every regeneration differs
        self.rng = random.Random(seed)
        self.grid = None
        self.generation = 0

        # Maze canvas; blitted into the window above the button bar
        self.canvas = PygameSurface(
            pygame.Surface((config.width, config.height)),
            wall_color=self.COLOR_WALL,
            bg_color=self.COLOR_BG,
        )

        bw, bh = self.BUTTON_SIZE
        self.button_rect = pygame.Rect(
            (config.width - bw) // 2,
            config.height + (self.BAR_HEIGHT - bh) // 2,
            bw, bh,
        )

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def regenerate(self) -> Grid:
        """Discards the current maze, carves a new one and redraws the canvas."""
        cfg = self.config
        self.grid = generate(cfg.rows, cfg.cols, rand_int=self.rng.randrange)
        render(self.grid, self.canvas, cfg.cell_size)
        self.generation += 1
        logger.info(f"Maze #{self.generation} ({cfg.rows}x{cfg.cols}) drawn")
        return self.grid

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze - {self.config.rows}x{self.config.cols}")
        self.surface = pygame.display.set_mode((self.config.width, self.config.height + self.BAR_HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial maze
        self.regenerate()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.regenerate()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.button_rect.collidepoint(event.pos):
                    self.regenerate()

    def draw_button(self):
        bar = pygame.Rect(0, self.config.height, self.config.width, self.BAR_HEIGHT)
        self.surface.fill(self.COLOR_BAR, bar)
        pygame.draw.rect(self.surface, self.COLOR_BUTTON, self.button_rect, border_radius=4)

        lbl = self.font.render(self.BUTTON_LABEL, True, self.COLOR_BUTTON_TEXT)
        self.surface.blit(lbl, lbl.get_rect(center=self.button_rect.center))

    def run_loop(self):
        while self.running:
            self.handle_input()

            self.surface.blit(self.canvas.surface, (0, 0))
            self.draw_button()
            pygame.display.flip()

            self.clock.tick(60)

        pygame.quit()

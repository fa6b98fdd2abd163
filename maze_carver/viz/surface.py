from abc import ABC, abstractmethod
from typing import List, Tuple
import pygame

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

class DrawingSurface(ABC):
    """
    Minimal 2D path API the maze renderer draws through.
    Supplied by the host; its lifecycle is not managed here.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @abstractmethod
    def clear_rect(self, x: float, y: float, w: float, h: float):
        pass

    @abstractmethod
    def begin_path(self):
        pass

    @abstractmethod
    def move_to(self, x: float, y: float):
        pass

    @abstractmethod
    def line_to(self, x: float, y: float):
        pass

    @abstractmethod
    def stroke(self):
        pass

class PathSurface(DrawingSurface):
    """Collects move_to/line_to into segments; subclasses decide what stroke() does."""

    def __init__(self):
        self._path: List[Segment] = []
        self._pen: Point = (0.0, 0.0)

    def begin_path(self):
        self._path = []

    def move_to(self, x: float, y: float):
        self._pen = (x, y)

    def line_to(self, x: float, y: float):
        self._path.append((self._pen, (x, y)))
        self._pen = (x, y)

class PygameSurface(PathSurface):
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (0, 0, 0)

    def __init__(self, surface: pygame.Surface, wall_color=COLOR_WALL, bg_color=COLOR_BG, line_width: int = 1):
        super().__init__()
        self.surface = surface
        self.wall_color = wall_color
        self.bg_color = bg_color
        self.line_width = line_width

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def clear_rect(self, x: float, y: float, w: float, h: float):
        self.surface.fill(self.bg_color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def stroke(self):
        # Outer right/bottom walls sit at x == width / y == height; pull them onto the last pixel
        max_x = self.width - 1
        max_y = self.height - 1
        for (x1, y1), (x2, y2) in self._path:
            start = (min(x1, max_x), min(y1, max_y))
            end = (min(x2, max_x), min(y2, max_y))
            pygame.draw.line(self.surface, self.wall_color, start, end, self.line_width)

class RecordingSurface(PathSurface):
    """
    Headless surface: keeps every stroked segment instead of drawing pixels.
    clear_rect drops segments lying entirely inside the cleared area,
    or every segment when the whole surface is cleared.
    """

    def __init__(self, width: int, height: int):
        super().__init__()
        self._width = width
        self._height = height
        self.segments: List[Segment] = []
        self.clear_count = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear_rect(self, x: float, y: float, w: float, h: float):
        if x <= 0 and y <= 0 and x + w >= self._width and y + h >= self._height:
            # Whole surface, including anything drawn past its edges
            self.segments = []
            self.clear_count += 1
            return

        def inside(p: Point) -> bool:
            return x <= p[0] <= x + w and y <= p[1] <= y + h

        self.segments = [s for s in self.segments if not (inside(s[0]) and inside(s[1]))]
        self.clear_count += 1

    def stroke(self):
        self.segments.extend(self._path)

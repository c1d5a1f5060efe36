"""Window showing the program, the memory cells used and the output."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Sequence, Union

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
SCREEN_FPS = 60
WINDOW_TITLE = "braintercourse  -  Brainfuck Interpreter Visualizer"

TITLE_FONT_SIZE = 20
INDEX_FONT_SIZE = 10
VALUE_FONT_SIZE = 30
SQUARE_SIZE = 75

Color = tuple[int, int, int, int]

GRAY_MATTER: Color = (180, 150, 140, 255)
WHITE_MATTER: Color = (220, 200, 190, 255)
DARKGRAY: Color = (80, 80, 80, 255)
BLACK: Color = (0, 0, 0, 255)
BLUE: Color = (0, 121, 241, 255)
RED: Color = (230, 41, 55, 255)

Measure = Callable[[str, int], float]


@dataclass(frozen=True)
class Rectangle:
    """A filled square cell with an outline."""

    x: int
    y: int
    width: int
    height: int
    fill: Color
    outline: Color


@dataclass(frozen=True)
class Label:
    """Text drawn with its top-left corner at (x, y)."""

    text: str
    x: int
    y: int
    font_size: int
    color: Color


@dataclass(frozen=True)
class Triangle:
    """A filled triangle used as a pointer marker."""

    points: tuple[tuple[float, float], tuple[float, float], tuple[float, float]]
    color: Color


Shape = Union[Rectangle, Label, Triangle]


def _title(text: str, y: int, measure: Measure) -> Label:
    x = int(SCREEN_WIDTH / 2 - measure(text, TITLE_FONT_SIZE) / 2)
    return Label(text, x, y, TITLE_FONT_SIZE, DARKGRAY)


def _pointer(y: float, color: Color) -> Triangle:
    left = SCREEN_WIDTH / 4.0
    return Triangle(
        ((left + 40.0, y), (left + 20.0, y + 30), (left + 60.0, y + 30)),
        color,
    )


def build_scene(
    program: str, memory: Sequence[int], output: str, measure: Measure
) -> list[Shape]:
    """Lay out every shape of one frame, in drawing order.

    ``measure`` returns the width of a text at a given font size.
    """
    left = SCREEN_WIDTH // 4
    shapes: list[Shape] = [_title("Input", SCREEN_HEIGHT // 10, measure)]

    row_y = SCREEN_HEIGHT // 6
    for i, char in enumerate(program):
        shapes.append(
            Rectangle(left + SQUARE_SIZE * i, row_y, SQUARE_SIZE, SQUARE_SIZE, GRAY_MATTER, BLACK)
        )
        shapes.append(
            Label(
                str(i),
                left + (SQUARE_SIZE + 1) // 2 + (SQUARE_SIZE + 1) * i,
                row_y + SQUARE_SIZE + 10,
                INDEX_FONT_SIZE,
                DARKGRAY,
            )
        )
        shapes.append(
            Label(
                char,
                left + 65 // 2 + (SQUARE_SIZE + 1) * i,
                row_y + SQUARE_SIZE - 50,
                VALUE_FONT_SIZE,
                BLACK,
            )
        )
    shapes.append(_pointer(SCREEN_WIDTH / 4.0, BLUE))

    shapes.append(_title("Memory array", SCREEN_HEIGHT // 3 + 60, measure))
    row_y = SCREEN_HEIGHT // 2
    for i, value in enumerate(memory):
        shapes.append(
            Rectangle(left + SQUARE_SIZE * i, row_y, SQUARE_SIZE, SQUARE_SIZE, GRAY_MATTER, BLACK)
        )
        shapes.append(
            Label(
                str(i),
                left + (SQUARE_SIZE + 1) // 2 + 76 * i,
                row_y + SQUARE_SIZE + 10,
                INDEX_FONT_SIZE,
                DARKGRAY,
            )
        )
        text = str(value)
        centre_x = left + SQUARE_SIZE * i + SQUARE_SIZE // 2
        shapes.append(
            Label(
                text,
                int(centre_x - measure(text, VALUE_FONT_SIZE) / 2),
                row_y + SQUARE_SIZE - 50,
                VALUE_FONT_SIZE,
                BLACK,
            )
        )
    shapes.append(_pointer(SCREEN_WIDTH / 2.0, RED))

    shapes.append(_title("Output", SCREEN_HEIGHT - 125, measure))
    shapes.append(
        Label(
            output,
            int(SCREEN_WIDTH / 2 - measure(output, VALUE_FONT_SIZE) / 2),
            SCREEN_HEIGHT - 85,
            VALUE_FONT_SIZE,
            BLACK,
        )
    )
    return shapes


def run_renderer(program: str, memory: Sequence[int], output: str) -> None:
    """Open a window and draw the scene until the window is closed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts: dict[int, pygame.font.Font] = {}

        def font(size: int) -> pygame.font.Font:
            if size not in fonts:
                fonts[size] = pygame.font.Font(None, size)
            return fonts[size]

        def measure(text: str, size: int) -> float:
            return font(size).size(text)[0]

        scene = build_scene(program, memory, output, measure)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            screen.fill(WHITE_MATTER)
            for shape in scene:
                if isinstance(shape, Rectangle):
                    rect = pygame.Rect(shape.x, shape.y, shape.width, shape.height)
                    pygame.draw.rect(screen, shape.fill, rect)
                    pygame.draw.rect(screen, shape.outline, rect, 1)
                elif isinstance(shape, Triangle):
                    pygame.draw.polygon(screen, shape.color, shape.points)
                elif shape.text:
                    surface = font(shape.font_size).render(shape.text, True, shape.color)
                    screen.blit(surface, (shape.x, shape.y))
            pygame.display.flip()
            clock.tick(SCREEN_FPS)
    finally:
        pygame.quit()
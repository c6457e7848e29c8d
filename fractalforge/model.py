"""Fractal parameter model: algorithms, colour palette, orbit trap and the full fractal description."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import IntEnum

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

MAX_PALETTE_COLORS = 16
"""The largest number of palette colours handed to the shader."""


class FractalAlgorithm(IntEnum):
    MANDELBROT = 0
    BURNING_SHIP = 1
    TRICORN = 2


class ColorAlgorithm(IntEnum):
    STEP = 0
    SMOOTH = 1
    DISTANCE_ESTIMATION = 2


class InteriorColorAlgorithm(IntEnum):
    BLACK = 0
    WHITE = 1
    CUSTOM_COLOR = 2


class OrbitTrapType(IntEnum):
    NONE = 0
    POINT = 1
    CIRCLE = 2
    LINE = 3
    BOX = 4
    CROSS = 5


@dataclass
class OrbitTrap:
    """Shape that orbits are measured against, and how its colour is blended in."""

    type: OrbitTrapType = OrbitTrapType.NONE
    # Point position, circle centre or line start.
    p1: Vec2 = (0.0, 0.0)
    # Circle radius (x) or line end.
    p2: Vec2 = (0.5, 0.5)
    color: Vec3 = (1.0, 1.0, 0.0)
    blend: float = 0.5


def _default_colors() -> list[Vec3]:
    return [
        (0.0, 0.0, 0.5),  # dark blue
        (0.0, 0.2, 1.0),  # bright blue
        (1.0, 1.0, 0.0),  # yellow
        (0.0, 0.0, 0.0),  # black
    ]


@dataclass
class Palette:
    """A gradient of colours plus the fixed-size arrays prepared for the shader."""

    colors: list[Vec3] = field(default_factory=_default_colors)
    color_data: tuple[Vec3, ...] = ()
    color_positions: tuple[float, ...] = ()
    color_count: int = 0

    def prepare_for_shader(self) -> None:
        """Truncate to the shader limit and spread the colours evenly over [0, 1]."""
        count = min(len(self.colors), MAX_PALETTE_COLORS)
        self.color_count = count
        self.color_data = tuple(tuple(c) for c in self.colors[:count])
        if count == 1:
            # A single stop has no span to divide: the position is undefined.
            self.color_positions = (float("nan"),)
        else:
            self.color_positions = tuple(i / (count - 1) for i in range(count))


@dataclass
class Mandelbrot:
    """Every parameter that describes one rendered fractal."""

    # Fractal parameters
    algorithm: FractalAlgorithm = FractalAlgorithm.MANDELBROT
    power: float = 2.0
    bailout: float = 16.0
    max_iterations: int = 256

    # View parameters
    zoom: float = 1.0
    position: Vec2 = (-0.5, 0.0)
    rotation: float = 0.0

    # Julia parameters
    julia_mode: bool = False
    julia_c: Vec2 = (-0.8, 0.156)

    # Colouring parameters
    exterior_coloring: ColorAlgorithm = ColorAlgorithm.SMOOTH
    interior_coloring: InteriorColorAlgorithm = InteriorColorAlgorithm.CUSTOM_COLOR
    interior_color: Vec3 = (0.0, 0.0, 0.0)
    color_frequency: float = 1.0
    color_offset: float = 0.0
    orbit_coloring: bool = False
    distance_scale: float = 50.0
    color_palette: Palette = field(default_factory=Palette)

    # Orbit trap
    trap: OrbitTrap = field(default_factory=OrbitTrap)

    def copy(self) -> Mandelbrot:
        """Return an independent deep copy."""
        return copy.deepcopy(self)
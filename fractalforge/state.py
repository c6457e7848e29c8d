"""Smoothly animated fractal state: the rendered values chase the target values."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import TypeVar, Union

from fractalforge.model import Mandelbrot

Number = Union[int, float]
T = TypeVar("T", float, tuple)


def lerp(a, b, t: float):
    """Linear interpolation of scalars or equal-length tuples."""
    if isinstance(a, tuple):
        return tuple(x * (1.0 - t) + y * t for x, y in zip(a, b, strict=True))
    return a * (1.0 - t) + b * t


@dataclass
class FractalState:
    """The state being rendered and the state that edits and file loads modify."""

    current: Mandelbrot = field(default_factory=Mandelbrot)
    target: Mandelbrot = field(default_factory=Mandelbrot)
    smoothing: float = 5.0
    movement_speed: float = 1.0
    rotation_speed: float = 1.0
    zoom_speed: float = 1.0

    def update(self, ts: float) -> None:
        """Move the current state towards the target over a time step in seconds."""
        # Exponential smoothing stays independent of the frame rate.
        alpha = 1.0 - math.exp(-self.smoothing * ts)
        cur, tgt = self.current, self.target

        cur.power = lerp(cur.power, tgt.power, alpha)
        cur.bailout = lerp(cur.bailout, tgt.bailout, alpha)
        cur.zoom = lerp(cur.zoom, tgt.zoom, alpha)
        cur.position = lerp(cur.position, tgt.position, alpha)
        cur.rotation = lerp(cur.rotation, tgt.rotation, alpha)
        cur.julia_c = lerp(cur.julia_c, tgt.julia_c, alpha)

        cur.color_frequency = lerp(cur.color_frequency, tgt.color_frequency, alpha)
        cur.color_offset = lerp(cur.color_offset, tgt.color_offset, alpha)
        cur.distance_scale = lerp(cur.distance_scale, tgt.distance_scale, alpha)
        cur.interior_color = lerp(cur.interior_color, tgt.interior_color, alpha)

        cur.trap.p1 = lerp(cur.trap.p1, tgt.trap.p1, alpha)
        cur.trap.p2 = lerp(cur.trap.p2, tgt.trap.p2, alpha)
        cur.trap.color = lerp(cur.trap.color, tgt.trap.color, alpha)
        cur.trap.blend = lerp(cur.trap.blend, tgt.trap.blend, alpha)

        # Discrete values switch at once to avoid odd in-between states.
        cur.algorithm = tgt.algorithm
        cur.orbit_coloring = tgt.orbit_coloring
        cur.julia_mode = tgt.julia_mode
        cur.max_iterations = tgt.max_iterations
        cur.exterior_coloring = tgt.exterior_coloring
        cur.interior_coloring = tgt.interior_coloring
        cur.color_palette = copy.deepcopy(tgt.color_palette)
        cur.trap.type = tgt.trap.type
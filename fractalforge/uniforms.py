"""The values the renderer hands to the fractal shader, and its fixed geometry."""

from __future__ import annotations

import math
from typing import Any

from fractalforge.model import Mandelbrot
from fractalforge.textures import (
    FramebufferSpecification,
    TextureFilter,
    TextureFormat,
    TextureSpecification,
    TextureWrap,
)

VERTEX_SHADER_PATH = "Internal/Shaders/Mandelbrot/Mandelbrot.vert"
FRAGMENT_SHADER_PATH = "Internal/Shaders/Mandelbrot/Mandelbrot.frag"


def shader_uniforms(mandelbrot: Mandelbrot, width: int, height: int) -> dict[str, Any]:
    """Return the shader uniforms for one frame, keyed by uniform name, in upload order.

    The palette arrays are taken as last prepared by ``Palette.prepare_for_shader``.
    """
    m = mandelbrot
    uniforms: dict[str, Any] = {
        # View and calculation
        "u_Resolution": (float(width), float(height)),
        "u_Zoom": m.zoom,
        "u_Position": tuple(m.position),
        "u_Rotation": math.radians(m.rotation),
        "u_MaxIterations": int(m.max_iterations),
        "u_Bailout": m.bailout,
        "u_Algorithm": int(m.algorithm),
        "u_Power": m.power,
        # Julia
        "u_JuliaMode": bool(m.julia_mode),
        "u_JuliaC": tuple(m.julia_c),
        # Colouring
        "u_ExteriorColoring": int(m.exterior_coloring),
        "u_InteriorColoring": int(m.interior_coloring),
        "u_InteriorColor": tuple(m.interior_color),
        "u_ColorFrequency": m.color_frequency,
        "u_ColorOffset": m.color_offset,
        "u_OrbitColoring": bool(m.orbit_coloring),
        "u_DistanceScale": m.distance_scale,
    }

    palette = m.color_palette
    count = palette.color_count
    uniforms["u_ColorCount"] = count
    stops = zip(palette.color_data[:count], palette.color_positions[:count])
    for i, (color, position) in enumerate(stops):
        uniforms[f"u_Colors[{i}]"] = tuple(color)
        uniforms[f"u_ColorPositions[{i}]"] = position

    trap = m.trap
    uniforms.update(
        {
            "u_TrapType": int(trap.type),
            "u_TrapP1": tuple(trap.p1),
            "u_TrapP2": tuple(trap.p2),
            "u_TrapColor": tuple(trap.color),
            "u_TrapBlend": trap.blend,
        }
    )
    return uniforms


def default_framebuffer_specification(width: int, height: int) -> FramebufferSpecification:
    """The off-screen target the fractal is drawn into: RGBA16F colour plus depth-stencil."""
    color = TextureSpecification(
        width=width,
        height=height,
        format=TextureFormat.RGBA16F,
        min_filter=TextureFilter.LINEAR,
        mag_filter=TextureFilter.LINEAR,
        wrap_s=TextureWrap.CLAMP_TO_EDGE,
        wrap_t=TextureWrap.CLAMP_TO_EDGE,
        generate_mips=False,
    )
    return FramebufferSpecification(
        width=width,
        height=height,
        color_attachment=color,
        depth_attachment=TextureSpecification(format=TextureFormat.DEPTH24_STENCIL8),
        has_depth_attachment=True,
    )


def quad_geometry() -> tuple[tuple[float, ...], tuple[int, ...], tuple[tuple[str, int], ...]]:
    """Return the full-screen quad as (vertices, indices, layout).

    Each vertex is a position (x, y, z) followed by a texture coordinate
    (u, v); the layout lists attribute names with their component counts.
    """
    vertices = (
        -1.0, -1.0, 0.0, 0.0, 0.0,
        1.0, -1.0, 0.0, 1.0, 0.0,
        1.0, 1.0, 0.0, 1.0, 1.0,
        -1.0, 1.0, 0.0, 0.0, 1.0,
    )
    indices = (0, 1, 2, 2, 3, 0)
    layout = (("a_Position", 3), ("a_TexCoord", 2))
    return vertices, indices, layout
"""Fractal parameter model, state interpolation, configuration files and shader uniforms."""

__version__ = "0.1.0"

__all__ = [
    "model",
    "state",
    "names",
    "serializer",
    "textures",
    "uniforms",
    "workspace",
]
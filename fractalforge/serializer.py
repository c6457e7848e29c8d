"""Reading and writing fractal configurations as YAML documents."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from fractalforge.model import Mandelbrot
from fractalforge.names import (
    color_algorithm_to_string,
    fractal_algorithm_to_string,
    interior_color_algorithm_to_string,
    orbit_trap_type_to_string,
    string_to_color_algorithm,
    string_to_fractal_algorithm,
    string_to_interior_color_algorithm,
    string_to_orbit_trap_type,
)

log = logging.getLogger(__name__)

ROOT_KEY = "Mandelbrot"


class ConfigurationError(Exception):
    """A configuration could not be read, parsed or written."""


def _vector(values) -> list[float]:
    return [float(v) for v in values]


def _document(m: Mandelbrot) -> dict[str, Any]:
    return {
        ROOT_KEY: {
            "FractalParameters": {
                "Algorithm": fractal_algorithm_to_string(m.algorithm),
                "Power": float(m.power),
                "Bailout": float(m.bailout),
                "MaxIterations": int(m.max_iterations),
            },
            "ViewParameters": {
                "Zoom": float(m.zoom),
                "Position": _vector(m.position),
                "Rotation": float(m.rotation),
            },
            "JuliaParameters": {
                "JuliaMode": bool(m.julia_mode),
                "JuliaC": _vector(m.julia_c),
            },
            "ColoringParameters": {
                "ExteriorColoring": color_algorithm_to_string(m.exterior_coloring),
                "InteriorColoring": interior_color_algorithm_to_string(m.interior_coloring),
                "InteriorColor": _vector(m.interior_color),
                "ColorFrequency": float(m.color_frequency),
                "ColorOffset": float(m.color_offset),
                "OrbitColoring": bool(m.orbit_coloring),
                "DistanceScale": float(m.distance_scale),
                "ColorPalette": {
                    "Colors": [_vector(c) for c in m.color_palette.colors],
                },
            },
            "OrbitTrap": {
                "Type": orbit_trap_type_to_string(m.trap.type),
                "P1": _vector(m.trap.p1),
                "P2": _vector(m.trap.p2),
                "Color": _vector(m.trap.color),
                "Blend": float(m.trap.blend),
            },
        }
    }


def to_yaml(mandelbrot: Mandelbrot) -> str:
    """Render a fractal description as a YAML document."""
    return yaml.safe_dump(_document(mandelbrot), sort_keys=False, default_flow_style=None)


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{key}: expected a number, got {value!r}")
    return float(value)


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key}: expected an integer, got {value!r}")
    return value


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{key}: expected a boolean, got {value!r}")
    return value


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, (dict, list)) or value is None:
        raise ConfigurationError(f"{key}: expected a scalar, got {value!r}")
    return str(value)


def _as_vec(size: int) -> Callable[[Any, str], tuple]:
    def convert(value: Any, key: str) -> tuple:
        if not isinstance(value, list) or len(value) != size:
            raise ConfigurationError(f"{key}: expected a sequence of {size} numbers, got {value!r}")
        return tuple(_as_float(v, key) for v in value)

    return convert


def _enum(parse: Callable[[str], Any]) -> Callable[[Any, str], Any]:
    return lambda value, key: parse(_as_str(value, key))


_vec2 = _as_vec(2)
_vec3 = _as_vec(3)

# (section, key, attribute path, converter)
_FIELDS: tuple[tuple[str, str, str, Callable[[Any, str], Any]], ...] = (
    ("FractalParameters", "Algorithm", "algorithm", _enum(string_to_fractal_algorithm)),
    ("FractalParameters", "Power", "power", _as_float),
    ("FractalParameters", "Bailout", "bailout", _as_float),
    ("FractalParameters", "MaxIterations", "max_iterations", _as_int),
    ("ViewParameters", "Zoom", "zoom", _as_float),
    ("ViewParameters", "Position", "position", _vec2),
    ("ViewParameters", "Rotation", "rotation", _as_float),
    ("JuliaParameters", "JuliaMode", "julia_mode", _as_bool),
    ("JuliaParameters", "JuliaC", "julia_c", _vec2),
    ("ColoringParameters", "ExteriorColoring", "exterior_coloring", _enum(string_to_color_algorithm)),
    (
        "ColoringParameters",
        "InteriorColoring",
        "interior_coloring",
        _enum(string_to_interior_color_algorithm),
    ),
    ("ColoringParameters", "InteriorColor", "interior_color", _vec3),
    ("ColoringParameters", "ColorFrequency", "color_frequency", _as_float),
    ("ColoringParameters", "ColorOffset", "color_offset", _as_float),
    ("ColoringParameters", "OrbitColoring", "orbit_coloring", _as_bool),
    ("ColoringParameters", "DistanceScale", "distance_scale", _as_float),
    ("OrbitTrap", "Type", "trap.type", _enum(string_to_orbit_trap_type)),
    ("OrbitTrap", "P1", "trap.p1", _vec2),
    ("OrbitTrap", "P2", "trap.p2", _vec2),
    ("OrbitTrap", "Color", "trap.color", _vec3),
    ("OrbitTrap", "Blend", "trap.blend", _as_float),
)


def _mapping(node: Any, key: str) -> dict:
    if node is None:
        return {}
    if not isinstance(node, dict):
        raise ConfigurationError(f"{key}: expected a mapping, got {node!r}")
    return node


def _assign(target: Mandelbrot, path: str, value: Any) -> None:
    *owners, name = path.split(".")
    obj: Any = target
    for owner in owners:
        obj = getattr(obj, owner)
    setattr(obj, name, value)


def from_yaml(text: str, mandelbrot: Mandelbrot) -> Mandelbrot:
    """Update ``mandelbrot`` from a YAML document and return it.

    Keys missing from the document leave the matching fields alone; the
    palette colours are replaced by those in the document. On error the
    description is left unchanged.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML: {exc}") from exc

    if not isinstance(data, dict) or ROOT_KEY not in data:
        raise ConfigurationError(f"document has no {ROOT_KEY!r} node")

    root = _mapping(data[ROOT_KEY], ROOT_KEY)
    work = mandelbrot.copy()
    work.color_palette.colors = []

    sections = {name: _mapping(root.get(name), name) for name, *_ in _FIELDS}
    for section, key, path, convert in _FIELDS:
        node = sections[section]
        if node.get(key) is not None:
            _assign(work, path, convert(node[key], key))

    palette = _mapping(sections["ColoringParameters"].get("ColorPalette"), "ColorPalette")
    colors = palette.get("Colors")
    if colors is not None:
        if not isinstance(colors, list):
            raise ConfigurationError(f"Colors: expected a sequence, got {colors!r}")
        work.color_palette.colors = [_vec3(c, "Colors") for c in colors]

    for f in dataclasses.fields(Mandelbrot):
        setattr(mandelbrot, f.name, getattr(work, f.name))
    return mandelbrot


def save(mandelbrot: Mandelbrot, filepath: str | Path) -> None:
    """Write a fractal description to a file."""
    path = Path(filepath)
    log.debug("Serializing fractal settings to %s", path)
    try:
        path.write_text(to_yaml(mandelbrot), encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"failed to open file for writing: {path}") from exc


def load(filepath: str | Path, mandelbrot: Mandelbrot) -> Mandelbrot:
    """Update ``mandelbrot`` from a configuration file and return it."""
    path = Path(filepath)
    log.debug("Deserializing fractal settings from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"failed to load file: {path}") from exc
    return from_yaml(text, mandelbrot)
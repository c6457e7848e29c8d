"""Conversions between enumerations and their display names."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TypeVar

from fractalforge.model import (
    ColorAlgorithm,
    FractalAlgorithm,
    InteriorColorAlgorithm,
    OrbitTrapType,
)

log = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class RenderingEngine(Enum):
    OPENGL = "OpenGL"
    DIRECTX = "DirectX"
    VULKAN = "Vulkan"


class EditorTheme(Enum):
    ADOBE_INSPIRED = "Adobe Inspired"
    AYU_DARK = "Ayu Dark"
    BESS_DARK = "Bess Dark"
    BLACK_DEVIL = "Black Devil"
    BOOTSTRAP_DARK = "Bootstrap Dark"
    CARBON = "Carbon"
    CHERNO = "Cherno"
    CHERRY = "Cherry"
    CLASSIC_STEAM = "Classic Steam"
    CLASSIC = "Classic"
    COMFORTABLE_DARK_CYAN = "Comfortable Dark Cyan"
    COMFORTABLE_LIGHT_ORANGE = "Comfortable Light Orange"
    COMFY = "Comfy"
    DARCULA = "Darcula"
    DARK_RED = "Dark Red"
    DARK_RUDA = "Dark Ruda"
    DARK = "Dark"
    DARKY = "Darky"
    DEEP_DARK = "Deep Dark"
    DISCORD_DARK = "Discord Dark"
    ENEMYMOUSE = "Enemymouse"
    EVERFOREST = "Everforest"
    EXCELLENCY = "Excellency"
    FUTURE_DARK = "Future Dark"
    GOLD = "Gold"
    GREEN_FONT = "Green Font"
    GREEN_LEAF = "Green Leaf"
    HAZY_DARK = "Hazy Dark"
    LED_SYNTHMASTER = "Led Synthmaster"
    LIGHT = "Light"
    MATERIAL_FLAT = "Material Flat"
    MICROSOFT = "Microsoft"
    MODERN = "Modern"
    PHOTOSHOP = "Photoshop"
    PURPLE_COMFY = "Purple Comfy"
    QUICK_MINIMAL_LOOK = "Quick Minimal Look"
    RED_FONT = "Red Font"
    RED_ONI = "Red Oni"
    REST = "Rest"
    ROUNDED_VISUAL_STUDIO = "Rounded Visual Studio"
    SOFT_CHERRY = "Soft Cherry"
    SONIC_RIDERS = "Sonic Riders"
    UNREAL = "Unreal"
    VISUAL_STUDIO = "Visual Studio"
    WINDARK = "Windark"


class Category(Enum):
    APPLICATION = "Application"
    EDITOR = "Editor"
    GRAPHICS = "Graphics"
    INPUT = "Input"
    LOCALIZATION = "Localization"
    QUALITY = "Quality"
    RENDERING = "Rendering"
    TIME = "Time"


class Direction(Enum):
    NONE = "None"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"


_COLOR_ALGORITHM_NAMES = {
    ColorAlgorithm.STEP: "Step",
    ColorAlgorithm.SMOOTH: "Smooth",
    ColorAlgorithm.DISTANCE_ESTIMATION: "Distance Estimation",
}

_INTERIOR_COLOR_ALGORITHM_NAMES = {
    InteriorColorAlgorithm.BLACK: "Black",
    InteriorColorAlgorithm.WHITE: "White",
    InteriorColorAlgorithm.CUSTOM_COLOR: "Custom Color",
}

_ORBIT_TRAP_TYPE_NAMES = {
    OrbitTrapType.NONE: "None",
    OrbitTrapType.POINT: "Point",
    OrbitTrapType.CIRCLE: "Circle",
    OrbitTrapType.LINE: "Line",
    OrbitTrapType.BOX: "Box",
    OrbitTrapType.CROSS: "Cross",
}

_FRACTAL_ALGORITHM_NAMES = {
    FractalAlgorithm.MANDELBROT: "Mandelbrot",
    FractalAlgorithm.BURNING_SHIP: "Burning Ship",
    FractalAlgorithm.TRICORN: "Tricorn",
}

E = TypeVar("E", bound=Enum)


def _value_name(enum_type: type[Enum], member) -> str:
    return member.value if isinstance(member, enum_type) else UNKNOWN


def _parse_value_name(enum_type: type[E], name: str, default: E, what: str) -> E:
    try:
        return enum_type(name)
    except ValueError:
        log.error("Unknown %s: %r", what, name)
        return default


def _table_name(table: dict, member) -> str:
    try:
        return table.get(member, UNKNOWN)
    except TypeError:
        return UNKNOWN


def _parse_table_name(table: dict, name: str, default, what: str):
    for member, label in table.items():
        if label == name:
            return member
    log.error("Unknown %s: %r", what, name)
    return default


def rendering_engine_to_string(engine) -> str:
    return _value_name(RenderingEngine, engine)


def string_to_rendering_engine(name: str) -> RenderingEngine:
    """Parse a rendering engine name; unknown names fall back to OpenGL."""
    return _parse_value_name(RenderingEngine, name, RenderingEngine.OPENGL, "rendering engine")


def editor_theme_to_string(theme) -> str:
    return _value_name(EditorTheme, theme)


def string_to_editor_theme(name: str) -> EditorTheme:
    """Parse an editor theme name; unknown names fall back to Excellency."""
    return _parse_value_name(EditorTheme, name, EditorTheme.EXCELLENCY, "editor theme")


def category_to_string(category) -> str:
    return _value_name(Category, category)


def string_to_category(name: str) -> Category:
    """Parse a settings category; unknown names fall back to Application."""
    return _parse_value_name(Category, name, Category.APPLICATION, "category")


def color_algorithm_to_string(algorithm) -> str:
    return _table_name(_COLOR_ALGORITHM_NAMES, algorithm)


def string_to_color_algorithm(name: str) -> ColorAlgorithm:
    """Parse an exterior colouring name; unknown names fall back to Step."""
    return _parse_table_name(_COLOR_ALGORITHM_NAMES, name, ColorAlgorithm.STEP, "color algorithm")


def interior_color_algorithm_to_string(algorithm) -> str:
    return _table_name(_INTERIOR_COLOR_ALGORITHM_NAMES, algorithm)


def string_to_interior_color_algorithm(name: str) -> InteriorColorAlgorithm:
    """Parse an interior colouring name; unknown names fall back to Black."""
    return _parse_table_name(
        _INTERIOR_COLOR_ALGORITHM_NAMES,
        name,
        InteriorColorAlgorithm.BLACK,
        "interior color algorithm",
    )


def orbit_trap_type_to_string(trap_type) -> str:
    return _table_name(_ORBIT_TRAP_TYPE_NAMES, trap_type)


def string_to_orbit_trap_type(name: str) -> OrbitTrapType:
    """Parse an orbit trap type; unknown names fall back to None."""
    return _parse_table_name(_ORBIT_TRAP_TYPE_NAMES, name, OrbitTrapType.NONE, "orbit trap type")


def fractal_algorithm_to_string(algorithm) -> str:
    return _table_name(_FRACTAL_ALGORITHM_NAMES, algorithm)


def string_to_fractal_algorithm(name: str) -> FractalAlgorithm:
    """Parse a fractal algorithm name; unknown names fall back to Mandelbrot."""
    return _parse_table_name(
        _FRACTAL_ALGORITHM_NAMES, name, FractalAlgorithm.MANDELBROT, "fractal algorithm"
    )


def direction_to_string(direction) -> str:
    return _value_name(Direction, direction)


def string_to_direction(name: str) -> Direction:
    """Parse a direction name; unknown names fall back to Left."""
    return _parse_value_name(Direction, name, Direction.LEFT, "direction")
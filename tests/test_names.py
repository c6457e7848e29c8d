import logging

import pytest

from fractalforge import names
from fractalforge.model import (
    ColorAlgorithm,
    FractalAlgorithm,
    InteriorColorAlgorithm,
    OrbitTrapType,
)
from fractalforge.names import Category, Direction, EditorTheme, RenderingEngine


def test_round_trip_every_member():
    for member in RenderingEngine:
        text = names.rendering_engine_to_string(member)
        assert text != "Unknown"
        assert names.string_to_rendering_engine(text) is member
    for member in EditorTheme:
        text = names.editor_theme_to_string(member)
        assert text != "Unknown"
        assert names.string_to_editor_theme(text) is member
    for member in Category:
        text = names.category_to_string(member)
        assert text != "Unknown"
        assert names.string_to_category(text) is member
    for member in ColorAlgorithm:
        text = names.color_algorithm_to_string(member)
        assert text != "Unknown"
        assert names.string_to_color_algorithm(text) is member
    for member in InteriorColorAlgorithm:
        text = names.interior_color_algorithm_to_string(member)
        assert text != "Unknown"
        assert names.string_to_interior_color_algorithm(text) is member
    for member in OrbitTrapType:
        text = names.orbit_trap_type_to_string(member)
        assert text != "Unknown"
        assert names.string_to_orbit_trap_type(text) is member
    for member in FractalAlgorithm:
        text = names.fractal_algorithm_to_string(member)
        assert text != "Unknown"
        assert names.string_to_fractal_algorithm(text) is member
    for member in Direction:
        text = names.direction_to_string(member)
        assert text != "Unknown"
        assert names.string_to_direction(text) is member


def test_names_are_unique():
    label_lists = [
        [names.rendering_engine_to_string(m) for m in RenderingEngine],
        [names.editor_theme_to_string(m) for m in EditorTheme],
        [names.category_to_string(m) for m in Category],
        [names.color_algorithm_to_string(m) for m in ColorAlgorithm],
        [names.interior_color_algorithm_to_string(m) for m in InteriorColorAlgorithm],
        [names.orbit_trap_type_to_string(m) for m in OrbitTrapType],
        [names.fractal_algorithm_to_string(m) for m in FractalAlgorithm],
        [names.direction_to_string(m) for m in Direction],
    ]
    for labels in label_lists:
        assert len(set(labels)) == len(labels)


@pytest.mark.parametrize(
    "member,expected",
    [
        (FractalAlgorithm.BURNING_SHIP, "Burning Ship"),
        (ColorAlgorithm.DISTANCE_ESTIMATION, "Distance Estimation"),
        (InteriorColorAlgorithm.CUSTOM_COLOR, "Custom Color"),
        (OrbitTrapType.NONE, "None"),
    ],
)
def test_model_enum_display_names(member, expected):
    converters = {
        FractalAlgorithm: names.fractal_algorithm_to_string,
        ColorAlgorithm: names.color_algorithm_to_string,
        InteriorColorAlgorithm: names.interior_color_algorithm_to_string,
        OrbitTrapType: names.orbit_trap_type_to_string,
    }
    assert converters[type(member)](member) == expected


def test_theme_and_engine_display_names():
    assert names.editor_theme_to_string(EditorTheme.COMFORTABLE_LIGHT_ORANGE) == "Comfortable Light Orange"
    assert names.rendering_engine_to_string(RenderingEngine.DIRECTX) == "DirectX"
    assert names.string_to_editor_theme("Rounded Visual Studio") is EditorTheme.ROUNDED_VISUAL_STUDIO


@pytest.mark.parametrize(
    "from_string,default",
    [
        (names.string_to_rendering_engine, RenderingEngine.OPENGL),
        (names.string_to_editor_theme, EditorTheme.EXCELLENCY),
        (names.string_to_category, Category.APPLICATION),
        (names.string_to_color_algorithm, ColorAlgorithm.STEP),
        (names.string_to_interior_color_algorithm, InteriorColorAlgorithm.BLACK),
        (names.string_to_orbit_trap_type, OrbitTrapType.NONE),
        (names.string_to_fractal_algorithm, FractalAlgorithm.MANDELBROT),
        (names.string_to_direction, Direction.LEFT),
    ],
)
def test_unknown_name_falls_back_and_logs(from_string, default, caplog):
    with caplog.at_level(logging.ERROR, logger="fractalforge.names"):
        assert from_string("no such thing") is default
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_names_are_case_sensitive():
    assert names.string_to_fractal_algorithm("burning ship") is FractalAlgorithm.MANDELBROT
    assert names.string_to_direction("up") is Direction.LEFT


@pytest.mark.parametrize(
    "to_string",
    [
        names.rendering_engine_to_string,
        names.editor_theme_to_string,
        names.category_to_string,
        names.color_algorithm_to_string,
        names.interior_color_algorithm_to_string,
        names.orbit_trap_type_to_string,
        names.fractal_algorithm_to_string,
        names.direction_to_string,
    ],
)
def test_non_member_is_unknown(to_string):
    assert to_string(99) == "Unknown"
    assert to_string([1]) == "Unknown"
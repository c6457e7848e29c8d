# fractalforge

A library for describing, animating and storing Mandelbrot-family fractal
views (Mandelbrot, Burning Ship and Tricorn, with Julia mode, colour
palettes and orbit traps), and for preparing the values a GPU renderer
hands to its fractal shader.

## Modules

- `fractalforge.model`: the fractal description. `Mandelbrot` holds every
  parameter (algorithm, power, bailout, iterations, view, Julia constant,
  colouring, palette and orbit trap); `Palette` holds the gradient colours,
  and `Palette.prepare_for_shader()` truncates them to
  `MAX_PALETTE_COLORS` (16) and spreads them evenly over `[0, 1]`;
  `OrbitTrap` describes the trap shape. Enumerations: `FractalAlgorithm`,
  `ColorAlgorithm`, `InteriorColorAlgorithm`, `OrbitTrapType`.
  `Mandelbrot.copy()` returns a deep copy.
- `fractalforge.state`: `FractalState` holds a `current` (rendered) and a
  `target` description. `update(ts)` eases the continuous values of
  `current` towards `target` with exponential smoothing
  (`alpha = 1 - exp(-smoothing * ts)`), so the motion does not depend on
  the frame rate; discrete values (algorithm, iterations, modes, palette,
  trap type) switch at once. `lerp(a, b, t)` interpolates numbers or
  equal-length tuples.
- `fractalforge.names`: conversions between enumerations and their display
  names, e.g. `fractal_algorithm_to_string` / `string_to_fractal_algorithm`.
  Also defines `RenderingEngine`, `EditorTheme`, `Category` and `Direction`.
  Unknown members give `"Unknown"`; unknown names are logged and fall back
  to a default (e.g. `FractalAlgorithm.MANDELBROT`, `OrbitTrapType.NONE`).
- `fractalforge.serializer`: YAML configuration files. `to_yaml` and
  `save` write a description; `from_yaml` and `load` update an existing
  `Mandelbrot` in place and return it. Keys missing from a document leave
  their fields unchanged, except that the palette colours are always
  replaced by those in the document (none if it lists none). Unreadable
  files, invalid YAML, a missing `Mandelbrot` node or values of the wrong
  shape raise `ConfigurationError`, and the description is then left as it
  was.
- `fractalforge.textures`: `TextureSpecification` and
  `FramebufferSpecification`, with `TextureFormat`, `TextureFilter`,
  `TextureWrap` and `DepthFunction`. `FramebufferSpecification.resize`
  ignores a zero width or height; `attachment_specifications()` returns
  the colour and depth attachments sized to the framebuffer.
- `fractalforge.uniforms`: `shader_uniforms(mandelbrot, width, height)`
  returns the shader uniforms for a frame as a dict keyed by uniform name
  (`u_Zoom`, `u_Colors[0]`, `u_TrapType`, ...), with the rotation converted
  to radians. `default_framebuffer_specification(width, height)` gives the
  RGBA16F colour plus depth-stencil target, and `quad_geometry()` the
  full-screen quad's vertices, indices and attribute layout.
- `fractalforge.workspace`: `Workspace` tracks the current configuration
  file, the window title and recently loaded files, loads and saves
  configurations, and carries out frame exports on request.
  `list_presets(directory)` returns the `.fractal` files of a directory as
  a sorted tree; `export_filename()` gives a time-stamped
  `Mandelbrot-YYYYmmdd-HHMMSS.png` name.

## Installation

```
pip install .
```

## Example

```python
from fractalforge.model import Mandelbrot, FractalAlgorithm
from fractalforge.state import FractalState
from fractalforge import serializer

state = FractalState()
state.target.algorithm = FractalAlgorithm.BURNING_SHIP
state.target.zoom = 4.0

# Called once per frame with the elapsed time in seconds.
state.update(1 / 60)

serializer.save(state.target, "view.fractal")

restored = Mandelbrot()
serializer.load("view.fractal", restored)
```

A saved configuration begins like this:

```yaml
Mandelbrot:
  FractalParameters:
    Algorithm: Burning Ship
    Power: 2.0
    Bailout: 16.0
    MaxIterations: 256
  ViewParameters:
    Zoom: 4.0
    Position: [-0.5, 0.0]
    Rotation: 0.0
  JuliaParameters:
    JuliaMode: false
    JuliaC: [-0.8, 0.156]
```

followed by `ColoringParameters` (including `ColorPalette` / `Colors`) and
`OrbitTrap`.

A workspace loads its startup configuration on `attach`:

```python
from fractalforge.workspace import Workspace

workspace = Workspace(default_configuration="view.fractal")
workspace.attach()
print(workspace.title, workspace.recent_configurations)
```

## What it does not do

The package draws nothing: it has no GPU renderer, no window or editor
interface and no command-line program. It does not encode images either;
an export only happens when `Workspace.frame_exporter` is set to a
callable, which is given the target path and writes the file itself.

## Tests

```
pip install .[test]
pytest
```
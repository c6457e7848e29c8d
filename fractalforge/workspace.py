"""Editing session around one fractal: configuration files, presets, recent files and exports."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Union

from fractalforge import serializer
from fractalforge.serializer import ConfigurationError
from fractalforge.state import FractalState

log = logging.getLogger(__name__)

PRESET_SUFFIX = ".fractal"
DEFAULT_CONFIGURATION = Path("Internal/Configurations/Default.fractal")
PRESETS_DIRECTORY = Path("Internal/Configurations/Presets/")
EXPORT_DIRECTORY = Path("Export")

PresetTree = list[tuple[str, Union[Path, "PresetTree"]]]


def list_presets(directory: str | Path) -> PresetTree:
    """Return the presets under ``directory`` as a tree of ``(name, entry)`` pairs.

    A file entry is the path of a ``.fractal`` file, named without its suffix;
    a directory entry is the list of what it holds, named after the directory.
    Entries are sorted by name.
    """
    tree: PresetTree = []
    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            tree.append((entry.name, list_presets(entry)))
        elif entry.name and entry.suffix == PRESET_SUFFIX:
            tree.append((entry.stem, entry))
    return tree


def export_filename(now: datetime | None = None) -> str:
    """Name of an exported image, stamped with the local time."""
    moment = now if now is not None else datetime.now()
    return f"Mandelbrot-{moment:%Y%m%d-%H%M%S}.png"


class Workspace:
    """Holds the fractal state and the configuration files it is loaded from and saved to.

    ``export_directory`` and ``frame_exporter`` are plain attributes; set
    ``frame_exporter`` to a callable taking the target path to enable exports.
    """

    def __init__(
        self,
        state: FractalState | None = None,
        default_configuration: str | Path = DEFAULT_CONFIGURATION,
        presets_directory: str | Path = PRESETS_DIRECTORY,
    ) -> None:
        self.state = state if state is not None else FractalState()
        self.default_configuration = Path(default_configuration)
        self.presets_directory = Path(presets_directory)
        self.export_directory: Path = EXPORT_DIRECTORY
        self.frame_exporter: Callable[[Path], None] | None = None
        self.current_configuration: Path | None = None
        self.title = ""
        self.export_requested = False
        self._recent: list[Path] = []

    @property
    def recent_configurations(self) -> list[Path]:
        """Loaded configuration files, least recent first."""
        return list(self._recent)

    def presets(self) -> PresetTree:
        """The preset tree of this workspace's presets directory."""
        return list_presets(self.presets_directory)

    def attach(self, startup_configuration: str | Path | None = None) -> bool:
        """Start the session: sync the rendered state and load the startup configuration."""
        self.state.current = self.state.target.copy()
        if not startup_configuration:
            return self.load_configuration(self.default_configuration)
        return self.load_configuration(startup_configuration)

    def request_export(self) -> None:
        """Ask for the next update to export the current frame."""
        self.export_requested = True

    def update(self, ts: float) -> Path | None:
        """Advance the state by ``ts`` seconds; carry out a pending export.

        Return the path of the exported image, if one was written.
        """
        self.state.update(ts)
        if not self.export_requested:
            return None
        self.export_requested = False
        return self._export_frame()

    def _export_frame(self) -> Path | None:
        if self.frame_exporter is None:
            log.warning("No frame exporter is set; export skipped")
            return None
        export_directory = Path(self.export_directory)
        export_directory.mkdir(parents=True, exist_ok=True)
        filepath = export_directory / export_filename()
        self.frame_exporter(filepath)
        log.info("Frame exported to %s", filepath)
        return filepath

    def new_configuration(self, name: str, filepath: str | Path) -> bool:
        """Start a new configuration titled ``name`` and save it to ``filepath``."""
        log.info("Creating new configuration")
        self.current_configuration = None
        self.title = name
        if self.save_configuration(filepath):
            log.info("New configuration has been created")
            return True
        log.warning("Couldn't create new configuration")
        return False

    def save_configuration(self, filepath: str | Path) -> bool:
        """Write the target state to ``filepath``; return whether it was written."""
        path = Path(filepath)
        log.info("Saving configuration to %s", path)
        try:
            serializer.save(self.state.target, path)
        except ConfigurationError as exc:
            log.warning("Couldn't save configuration: %s", exc)
            return False
        log.info("Configuration has been saved")
        return True

    def load_configuration(self, filepath: str | Path) -> bool:
        """Load ``filepath`` into the target state; return whether it was loaded.

        Loading the configuration that is already current does nothing.
        """
        path = Path(filepath)
        if self.current_configuration == path:
            log.warning("Configuration is already loaded: %s", path)
            return False

        self.current_configuration = path
        log.info("Loading configuration from %s", path)
        try:
            serializer.load(path, self.state.target)
        except ConfigurationError as exc:
            log.warning("Couldn't load configuration: %s", exc)
            return False

        log.info("Configuration has been loaded")
        self.title = path.stem
        if path in self._recent:
            self._recent.remove(path)
        self._recent.append(path)
        return True
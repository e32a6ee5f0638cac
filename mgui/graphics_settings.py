"""Window and rendering settings, stored in a small text file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import pygame

_FALLBACK_RESOLUTION = (800, 600)


def _desktop_resolution() -> Tuple[int, int]:
    if pygame.display.get_init():
        sizes = pygame.display.get_desktop_sizes()
        if sizes:
            width, height = sizes[0]
            return (int(width), int(height))
    return _FALLBACK_RESOLUTION


def _fullscreen_modes() -> List[Tuple[int, int]]:
    if pygame.display.get_init():
        modes = pygame.display.list_modes()
        if isinstance(modes, list):
            return [(int(w), int(h)) for w, h in modes]
    return []


def _parse_unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {token!r}")
    return value


def _parse_bool(token: str) -> bool:
    value = int(token)
    if value not in (0, 1):
        raise ValueError(f"expected 0 or 1, got {token!r}")
    return bool(value)


@dataclass
class GraphicsSettings:
    """Title, resolution and display options of the game window.

    The file format is the title on the first line, followed by the width,
    height, fullscreen flag, frame-rate limit, vertical-sync flag and
    anti-aliasing level, separated by whitespace.
    """

    title: str = "DEFAULT"
    resolution: Tuple[int, int] = field(default_factory=_desktop_resolution)
    fullscreen: bool = False
    vertical_sync: bool = False
    frame_rate_limit: int = 120
    antialiasing_level: int = 0
    video_modes: List[Tuple[int, int]] = field(default_factory=_fullscreen_modes)

    def save_to_file(self, path) -> None:
        width, height = self.resolution
        lines = [
            self.title,
            f"{width} {height}",
            str(int(self.fullscreen)),
            str(self.frame_rate_limit),
            str(int(self.vertical_sync)),
            str(self.antialiasing_level),
        ]
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load_from_file(self, path) -> None:
        """Read settings from ``path``; a missing file leaves them unchanged.

        Values are read in order until one is malformed; it and the ones
        after it keep their current values.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            return
        if not text:
            return

        title, _, rest = text.partition("\n")
        self.title = title

        fields = [
            ("width", _parse_unsigned),
            ("height", _parse_unsigned),
            ("fullscreen", _parse_bool),
            ("frame_rate_limit", _parse_unsigned),
            ("vertical_sync", _parse_bool),
            ("antialiasing_level", _parse_unsigned),
        ]
        values = {}
        for (name, parse), token in zip(fields, rest.split()):
            try:
                values[name] = parse(token)
            except ValueError:
                break

        width, height = self.resolution
        self.resolution = (values.get("width", width), values.get("height", height))
        self.fullscreen = values.get("fullscreen", self.fullscreen)
        self.frame_rate_limit = values.get("frame_rate_limit", self.frame_rate_limit)
        self.vertical_sync = values.get("vertical_sync", self.vertical_sync)
        self.antialiasing_level = values.get("antialiasing_level", self.antialiasing_level)
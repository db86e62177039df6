"""User preferences."""

from __future__ import annotations

from dataclasses import dataclass

from scrabble.dictionary import DictionaryType

DEFAULT_SOUND_VOLUME = 100
DEFAULT_RESOLUTION_WIDTH = 1280
DEFAULT_RESOLUTION_HEIGHT = 720


@dataclass
class Preferences:
    """Game settings with their defaults."""

    dictionary_type: DictionaryType = DictionaryType.CSW
    sound_volume: int = DEFAULT_SOUND_VOLUME
    resolution_width: int = DEFAULT_RESOLUTION_WIDTH
    resolution_height: int = DEFAULT_RESOLUTION_HEIGHT
    vsync_enabled: bool = True

    def set_resolution(self, width: int, height: int) -> None:
        self.resolution_width = width
        self.resolution_height = height
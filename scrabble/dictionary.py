"""Word lists used to validate plays."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Set, Union

logger = logging.getLogger(__name__)


class DictionaryType(Enum):
    TWL = 0
    CSW = 1


DICTIONARY_PATHS = {
    DictionaryType.CSW: Path("assets/dictionaries/csw6.dict"),
    DictionaryType.TWL: Path("assets/dictionaries/twl6.dict"),
}


class Dictionary:
    """A set of lower-case words loaded from a one-word-per-line file."""

    def __init__(
        self, source: Union[DictionaryType, str, os.PathLike] = DictionaryType.CSW
    ) -> None:
        self._words: Set[str] = set()
        if isinstance(source, DictionaryType):
            self.change(source)
        else:
            self.load(source)

    def load(self, path: Union[str, os.PathLike]) -> None:
        """Replace the word list with the words of the file at ``path``."""
        self._words.clear()
        try:
            handle = open(path, encoding="utf-8")
        except OSError:
            logger.error("[Dictionary] Cannot open dictionary file: %s", path)
            raise
        with handle:
            logger.info("[Dictionary] Loaded dictionary: %s", path)
            self._words.update(line.rstrip("\n").lower() for line in handle)
        logger.info("[Dictionary] Dictionary word count: %d", len(self._words))

    def change(self, kind: DictionaryType) -> None:
        """Load one of the bundled word lists."""
        self.load(DICTIONARY_PATHS[kind])

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)
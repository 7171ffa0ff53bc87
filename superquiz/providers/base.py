"""Speech backends that read a spelling word aloud."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class TTSProvider(ABC):
    """Turns a word prompt into an audio file.

    ``suffix`` names the cached file and ``media_type`` is what the word
    audio route serves it as.
    """

    suffix = ".mp3"
    media_type = "audio/mpeg"

    @abstractmethod
    async def synthesize(self, text: str, output_path: Path) -> Path:
        ...

    @abstractmethod
    def name(self) -> str:
        ...

    def cache_file(self, cache_dir: Path, key: str) -> Path:
        return cache_dir / f"{key}{self.suffix}"

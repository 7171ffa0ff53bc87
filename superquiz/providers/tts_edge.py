from __future__ import annotations

from pathlib import Path

from superquiz.providers.base import TTSProvider


class EdgeTTSProvider(TTSProvider):
    # Slowed down so young players can follow the spelling prompt
    def __init__(self, voice: str = "en-IN-NeerjaNeural", rate: str = "-30%"):
        self.voice = voice
        self.rate = rate

    async def synthesize(self, text: str, output_path: Path) -> Path:
        import edge_tts

        communicate = edge_tts.Communicate(text, self.voice, rate=self.rate)
        await communicate.save(str(output_path))
        return output_path

    def name(self) -> str:
        return f"edge-tts/{self.voice}"

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

MASTER_CONFIG_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQUv4zA167WG6griM00FRz-MTUm-v8o0687XWoWk_VbJ4PP-X5AyF-joKVu5gTVLu89rWJzvzvZnP55"
    "/pub?output=csv"
)

DEFAULTS = {
    "master_config_url": MASTER_CONFIG_URL,
    "fetch_timeout": None,
    "randomize": False,
    "settings_password": "Superdad",
    "tts_provider": "edge-tts",
    "tts_voice": "en-IN-NeerjaNeural",
    "tts_rate": "-30%",
    "audio_cache_dir": "audio_cache",
}


@dataclass
class Settings:
    master_config_url: str = DEFAULTS["master_config_url"]
    fetch_timeout: float | None = DEFAULTS["fetch_timeout"]  # None waits forever
    randomize: bool = DEFAULTS["randomize"]
    settings_password: str = DEFAULTS["settings_password"]
    tts_provider: str = DEFAULTS["tts_provider"]
    tts_voice: str = DEFAULTS["tts_voice"]
    tts_rate: str = DEFAULTS["tts_rate"]
    audio_cache_dir: str = DEFAULTS["audio_cache_dir"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def audio_cache_full_path(self) -> Path:
        return self.project_root / self.audio_cache_dir

    def to_dict(self) -> dict:
        return {
            "master_config_url": self.master_config_url,
            "fetch_timeout": self.fetch_timeout,
            "randomize": self.randomize,
            "settings_password": self.settings_password,
            "tts_provider": self.tts_provider,
            "tts_voice": self.tts_voice,
            "tts_rate": self.tts_rate,
            "audio_cache_dir": self.audio_cache_dir,
        }

    def public_dict(self) -> dict:
        """Settings as shown to the client, without the password."""
        d = self.to_dict()
        del d["settings_password"]
        return d


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")

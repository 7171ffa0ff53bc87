"""Spoken word prompts, cached on disk by text hash."""
from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from superquiz.providers.base import TTSProvider

log = logging.getLogger("superquiz.audio")


def sentence_hash(text: str) -> str:
    return hashlib.sha256(text.encode()).hexdigest()[:16]


async def get_or_create_audio(
    text: str,
    tts: TTSProvider,
    cache_dir: Path,
) -> Path | None:
    """Get cached audio or generate new TTS audio."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    output_path = tts.cache_file(cache_dir, sentence_hash(text))
    if output_path.exists():
        return output_path

    try:
        await tts.synthesize(text, output_path)
        return output_path
    except Exception as e:
        log.warning("TTS error (%s): %s", tts.name(), e)
        output_path.unlink(missing_ok=True)
        return None

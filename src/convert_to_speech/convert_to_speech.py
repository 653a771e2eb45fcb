"""Convert a text file to speech with the ElevenLabs API."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import requests

from common.config import SpeechConfig

logger = logging.getLogger(__name__)

ELEVENLABS_API_URL = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"
ELEVENLABS_ENV_KEY = "ELEVENLABS_API_KEY"
VOICE_ID_ENV_KEY = "ELEVENLABS_VOICE_ID"
AUDIO_SUFFIX = ".mp3"


def audio_path_for(text_path: str | Path) -> Path:
    """Sibling of text_path with the same stem and the audio suffix."""
    return Path(text_path).with_suffix(AUDIO_SUFFIX)


def synthesize(text: str, api_key: str, settings: SpeechConfig, voice_id: Optional[str] = None) -> bytes:
    """POST text to ElevenLabs and return the MP3 payload."""
    response = requests.post(
        ELEVENLABS_API_URL.format(voice_id=voice_id or settings.voice_id),
        headers={
            "xi-api-key": api_key,
            "Accept": "audio/mpeg",
            "Content-Type": "application/json",
        },
        json={
            "text": text,
            "model_id": settings.model_id,
            "voice_settings": {
                "stability": settings.stability,
                "similarity_boost": settings.similarity_boost,
            },
        },
        timeout=settings.timeout,
    )
    response.raise_for_status()
    return response.content


def convert_text_to_speech(
    text_path: str | Path,
    settings: Optional[SpeechConfig] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Optional[Path]:
    """
    Convert a text file into a sibling MP3 file.

    Returns None without touching the filesystem when ELEVENLABS_API_KEY is
    unset. Also returns None, with a log message, when the text is empty or
    the API call fails.

    Returns:
        Path to the written audio file, or None
    """
    settings = settings or SpeechConfig()
    env = os.environ if env is None else env

    api_key = env.get(ELEVENLABS_ENV_KEY)
    if not api_key:
        logger.info("%s not set, skipping text-to-speech", ELEVENLABS_ENV_KEY)
        return None

    text_path = Path(text_path)
    try:
        text = text_path.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.error("Could not read %s for text-to-speech: %s", text_path, e)
        return None

    if not text:
        logger.warning("Text file is empty, nothing to convert: %s", text_path)
        return None

    output_path = audio_path_for(text_path)
    logger.info("Converting %s to speech (%d characters)", text_path, len(text))
    try:
        audio = synthesize(text, api_key, settings, voice_id=env.get(VOICE_ID_ENV_KEY))
    except requests.exceptions.RequestException as e:
        logger.error("Text-to-speech failed for %s: %s", text_path, e)
        return None

    try:
        output_path.write_bytes(audio)
    except OSError as e:
        logger.error("Could not write audio to %s: %s", output_path, e)
        return None

    logger.info("Audio saved to: %s (%d bytes)", output_path, len(audio))
    return output_path

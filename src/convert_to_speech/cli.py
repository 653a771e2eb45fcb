"""CLI for converting a text report to speech."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.config import load_config
from convert_to_speech.convert_to_speech import convert_text_to_speech

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def parse_convert_to_speech_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for convert_to_speech."""

    parser = argparse.ArgumentParser(description="Convert a text file to an MP3 next to it")
    parser.add_argument("text_path", help="Path to the text file to read aloud")
    parser.add_argument("--config", default=None, help="Config name or path to YAML file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_convert_to_speech_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        logger.error("%s", e)
        sys.exit(1)

    # A disabled or failed conversion is not an error for the caller.
    audio_path = convert_text_to_speech(args.text_path, config.speech)
    if audio_path is None:
        logger.info("No audio produced for %s", args.text_path)


if __name__ == "__main__":
    main()

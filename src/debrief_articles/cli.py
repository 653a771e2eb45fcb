"""CLI for the daily article debriefing run."""

from __future__ import annotations

import csv
import logging
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from common.config import get_config, set_config, load_config
from convert_to_speech.convert_to_speech import convert_text_to_speech
from debrief_articles.debrief_articles import NoLinksError, run_pipeline
from debrief_articles.helpers import parse_debrief_articles_args, resolve_paths
from generate_debriefings.providers import MissingProviderError, select_provider

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_debrief_articles_args(argv)

    try:
        if args.config is not None:
            set_config(load_config(args.config))
        config = get_config()
        provider = select_provider(config.providers)
    except (FileNotFoundError, MissingProviderError) as e:
        logger.error("%s", e)
        sys.exit(1)

    materials_dir = args.materials_dir or config.pipeline.materials_dir
    csv_path, output_path = resolve_paths(materials_dir, args.date or date.today())
    if args.input:
        csv_path = Path(args.input).expanduser()
    if args.output:
        output_path = Path(args.output).expanduser()

    try:
        summary = run_pipeline(csv_path, output_path, provider, config)
    except (OSError, UnicodeDecodeError, csv.Error, NoLinksError) as e:
        logger.error("%s", e)
        sys.exit(1)

    if args.speech:
        convert_text_to_speech(summary.output_path, config.speech)


if __name__ == "__main__":
    main()

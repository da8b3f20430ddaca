"""CLI for collecting articles and refreshing the daily artwork."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from collect_articles.collect_articles import run_pipeline
from collect_articles.helpers import parse_collect_articles_args, parse_sources
from common.cli_helpers import setup_logging

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_collect_articles_args(argv)

    try:
        sources = parse_sources(args.sources)
        report = run_pipeline(
            sources,
            args.output_dir,
            max_per_source=args.max_per_source,
            max_articles=args.max_articles,
            delay_seconds=args.delay,
            timeout=args.timeout,
        )
    except Exception as e:
        logger.exception("Collection failed: %s", e)
        sys.exit(1)

    if report.total == 0:
        logger.warning("No articles collected")


if __name__ == "__main__":
    main()

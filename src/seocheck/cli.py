"""Command-line interface for the site checker."""

import argparse
import logging
import sys
from typing import List, Optional

from seocheck.analyzer import WebsiteAnalyzer
from seocheck.config import Config, LoadTimeThresholds
from seocheck.logging_config import setup_logging
from seocheck.report import FORMATTERS, render_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seocheck",
        description="Inspect a single URL for SEO and technical-health signals",
    )
    parser.add_argument(
        "url", help="URL to analyze, including scheme (e.g. https://example.com)"
    )
    parser.add_argument(
        "--output",
        "-o",
        choices=sorted(FORMATTERS),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="Per-request timeout in seconds (default: TIMEOUT or 30)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        help="Maximum concurrent link checks (default: MAX_CONCURRENT_REQUESTS or 10)",
    )
    parser.add_argument(
        "--thresholds-file",
        help="JSON file with load time thresholds (good_ms, moderate_ms)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging verbosity (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to stderr",
    )
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Environment configuration with command-line overrides applied."""
    config = Config.from_env()
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.max_workers is not None:
        config.max_link_workers = args.max_workers
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        0 on success, 1 when the target page could not be fetched
    """
    args = build_parser().parse_args(argv)
    config = build_config(args)

    setup_logging(level=config.log_level, log_file=args.log_file)

    if args.thresholds_file:
        thresholds = LoadTimeThresholds.from_file(args.thresholds_file)
    else:
        thresholds = LoadTimeThresholds.from_env()

    analyzer = WebsiteAnalyzer(config=config, thresholds=thresholds)
    try:
        report = analyzer.analyze(args.url)
    finally:
        analyzer.fetcher.close()

    output = render_report(report, args.output)
    if args.output_file:
        with open(args.output_file, "w") as f:
            f.write(output + "\n")
        logger.info(f"Results written to {args.output_file}")
    else:
        print(output)

    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())

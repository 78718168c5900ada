"""
Batch runner for duplex link reconstruction.

Loads a radioline CSV export, rebuilds the duplex links, validates the
result and writes one summary row per link.

Usage:
    python -m radiolinks.runner --input data/radiolines.csv --output data/links.csv

    # Evaluate permit expiry against a fixed date
    python -m radiolinks.runner --input data/radiolines.csv --output data/links.csv --as-of 2026-01-01

    # Custom settings and JSON logs
    python -m radiolinks.runner --input data/radiolines.csv --output data/links.csv \\
        --config config/default.yaml --json-logs
"""
import argparse
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from radiolinks.data.loaders import load_radiolines
from radiolinks.links.builder import build_duplex_links
from radiolinks.links.summary import links_to_dataframe
from radiolinks.utils.config import EngineConfig, get_default_config, load_config
from radiolinks.utils.exceptions import ProcessingError
from radiolinks.utils.logging_config import configure_from_params, configure_logging, get_logger
from radiolinks.validation.validators import DuplexLinkValidator

logger = get_logger(__name__)


def run(
    input_path: Path,
    output_path: Path,
    config: Optional[EngineConfig] = None,
    as_of: Optional[date] = None,
) -> int:
    """
    Run the full pipeline on one file.

    Args:
        input_path: Radioline CSV
        output_path: Destination CSV for link summaries
        config: Engine config (defaults if None)
        as_of: Reference date for permit expiry (defaults to today)

    Returns:
        Number of links written

    Raises:
        ProcessingError: If the built link set fails partition checks
    """
    config = config or get_default_config()
    as_of = as_of or date.today()

    logger.info("run_started", input=str(input_path), output=str(output_path), as_of=as_of.isoformat())

    records = load_radiolines(input_path)
    links = build_duplex_links(records, as_of=as_of, config=config)

    result = DuplexLinkValidator().validate(records, links)
    if not result.is_valid:
        raise ProcessingError(
            "Duplex link set failed validation",
            stage="validation",
            details={'critical_issues': result.critical_count},
        )

    df = links_to_dataframe(links, as_of=as_of, derating_factor=config.throughput.derating_factor)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    logger.info("run_complete", links=len(df), output=str(output_path))
    return len(df)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the runner."""
    parser = argparse.ArgumentParser(
        description='Rebuild duplex microwave links from unidirectional permit records',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m radiolinks.runner --input data/radiolines.csv --output data/links.csv
  python -m radiolinks.runner --input data/radiolines.csv --output data/links.csv --as-of 2026-01-01
        """
    )

    parser.add_argument(
        '--input',
        type=Path,
        required=True,
        help='Radioline CSV file (one row per direction)'
    )

    parser.add_argument(
        '--output',
        type=Path,
        required=True,
        help='Output CSV file for link summaries'
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML config file (default: built-in defaults)'
    )

    parser.add_argument(
        '--as-of',
        type=_parse_date,
        default=None,
        help='Reference date for permit expiry, YYYY-MM-DD (default: today)'
    )

    parser.add_argument(
        '--log-level',
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit JSON log lines'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except Exception as e:
        configure_logging()
        logger.error("Config load failed", error=str(e))
        return 1

    configure_from_params(config.logging, args.log_level, args.json_logs)

    try:
        run(args.input, args.output, config=config, as_of=args.as_of)
        return 0
    except Exception as e:
        logger.error("Execution failed", error=str(e), exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())

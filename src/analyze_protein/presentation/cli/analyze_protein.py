"""Command-line interface computing Cg, Rg and Dmax of PDB files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from tqdm import tqdm

from ...core.domain.exceptions import AnalysisError, MissingArgumentsError
from ...core.domain.models.geometry_statistics import GeometryStatistics
from ...core.metrics.max_distance import CANONICAL_SCAN, PAIR_SCANS
from ...core.services.atom_record_processor import AtomRecordProcessor
from ...core.utils.benchmarking import PerformanceStats
from ...infrastructure.writers.summary_writer import save_statistics_to_csv

USAGE = "Usage: analyze-protein <pdb1> <pdb2> ..."

logger = logging.getLogger("analyze_protein")


def positive_int(value: str) -> int:
    """Validate that an option value is a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError("Value must be at least 1")
    return number


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="analyze-protein",
        description="Compute center of gravity, radius of gyration and "
        "maximum atom distance of PDB files",
    )
    parser.add_argument("paths", nargs="*", help="PDB files to analyze, in order")
    parser.add_argument(
        "--pair-scan",
        choices=PAIR_SCANS,
        default=CANONICAL_SCAN,
        help="Atom pair enumeration used for Dmax (default: canonical)",
    )
    parser.add_argument(
        "--max-atoms",
        type=positive_int,
        default=None,
        help="Reject files with more atom records than this (default: no limit)",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report errors per file and continue with the remaining files",
    )
    parser.add_argument(
        "--csv", type=str, default=None, help="Also write a summary table to this CSV file"
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar on stderr"
    )
    parser.add_argument(
        "--timing", action="store_true", help="Report per-stage timings on stderr"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    return parser


def setup_logging(verbose_level: int = 0, log_file: Optional[str] = None) -> logging.Logger:
    """Set up logging configuration."""
    # Remove any existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    if verbose_level >= 2:
        logger.setLevel(logging.DEBUG)
    elif verbose_level == 1:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)
    logger.propagate = False

    return logger


def analyze_paths(
    paths: Sequence[str],
    processor: AtomRecordProcessor,
    keep_going: bool = False,
    progress: bool = False,
) -> Tuple[List[GeometryStatistics], List[AnalysisError]]:
    """
    Analyze files in order, printing each file's report to stdout.

    Args:
        paths: Input files
        processor: Processor computing the statistics
        keep_going: Continue with the next file after an error
        progress: Show a progress bar

    Returns:
        Statistics of the successful files and errors of the failed ones

    Raises:
        MissingArgumentsError: If no paths are given
        AnalysisError: On the first failing file unless ``keep_going``
    """
    if not paths:
        raise MissingArgumentsError(USAGE)

    results: List[GeometryStatistics] = []
    failures: List[AnalysisError] = []

    for path in tqdm(paths, desc="Analyzing", unit="file", disable=not progress):
        try:
            result = processor.analyze_file(path)
        except AnalysisError as e:
            if not keep_going:
                raise
            logger.error(e.describe())
            failures.append(e)
            continue

        for line in result.report_lines():
            tqdm.write(line, file=sys.stdout)
        results.append(result)

    return results, failures


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the analyze-protein CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    stats = PerformanceStats() if args.timing else None
    processor = AtomRecordProcessor(
        pair_scan=args.pair_scan, max_atoms=args.max_atoms, stats=stats
    )

    try:
        results, failures = analyze_paths(
            args.paths, processor, keep_going=args.keep_going, progress=args.progress
        )
    except AnalysisError as e:
        logger.error(e.describe())
        return 1
    finally:
        if stats is not None:
            print(stats.report(), file=sys.stderr)

    if args.csv:
        try:
            save_statistics_to_csv(results, args.csv)
        except OSError as e:
            logger.error(f"Error saving CSV file: {e}")
            return 1

    if failures:
        logger.warning(f"{len(failures)} of {len(args.paths)} files failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

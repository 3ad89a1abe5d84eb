"""Main entry point: square roots via Newton's method as an unfold."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import UnfoldConfig, get_config
from .solvers import newton_sqrt_step, unfold_sqrt

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", verbose: bool = False):
    """Configure logging.

    Args:
        level: Log level name used when not verbose
        verbose: Enable verbose logging
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger().setLevel(logging.DEBUG if verbose else level)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="unfold", description="Compute square roots with an unfold-based Newton iteration."
    )
    parser.add_argument("numbers", nargs="*", type=float, default=[100.0])
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def iterated_targets(targets: List[float]) -> List[float]:
    """Targets whose root is found by iterating; negatives, 0 and 1 are not."""
    return [n for n in targets if n > 0.0 and n != 1.0]


def export_iterates(targets: List[float], config: UnfoldConfig):
    """Write the Newton iterates of every iterated target to a Parquet file.

    Imports the ``parquet`` extra on demand so the CLI works without it.
    """
    from .frames import unfold_frames
    from .writers import ParquetWriter

    iterated = iterated_targets(targets)
    if not iterated:
        logger.warning(f"No target needs iterating; skipping export to {config.output_file}")
        return None

    def frames():
        for n in iterated:
            steps = unfold_frames(newton_sqrt_step(n), n, config.max_iterations, config.batch_size)
            for df in steps:
                df.insert(0, "target", n)
                yield df

    logger.info(f"Exporting Newton iterates to {config.output_file}")
    with ParquetWriter(config.output_file, config.compression) as writer:
        return writer.write(frames())


def print_summary(results: List[tuple]):
    """Print a table of targets and their roots."""
    print("\n" + "=" * 60)
    print("SQUARE ROOTS")
    print("=" * 60)
    for n, root in results:
        shown = "undefined" if root is None else f"{root:.10f}"
        print(f"  sqrt({n:g}) = {shown}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    try:
        args = parse_args(argv)
        config = get_config()
        setup_logging(config.log_level, args.verbose)

        logger.info(
            f"Solving {len(args.numbers)} target(s) with at most "
            f"{config.max_iterations} iterations, tolerance {config.tolerance}"
        )
        results = [
            (n, unfold_sqrt(n, config.max_iterations, config.tolerance)) for n in args.numbers
        ]
        print_summary(results)

        if config.output_file:
            stats = export_iterates(args.numbers, config)
            if stats is not None:
                logger.info(
                    f"Wrote {stats.total_rows} rows in {stats.total_batches} row groups "
                    f"({stats.file_size_bytes} bytes)"
                )

        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Main Analysis Pipeline
Purpose: Run the complete Titanic survival analysis from the command line
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib

from titanic_eda.config import AnalysisConfig, configure_logging
from titanic_eda.errors import AnalysisError

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="titanic-eda",
        description="Exploratory analysis of Titanic passenger survival records.",
    )
    parser.add_argument("data_path", nargs="?", default=str(AnalysisConfig.data_path),
                        help="CSV or TSV file with the passenger records (default: %(default)s)")
    parser.add_argument("--output-dir", default=str(AnalysisConfig.output_dir),
                        help="Directory for chart images (default: %(default)s)")
    parser.add_argument("--no-plots", action="store_true", help="Print the tables only")
    parser.add_argument("--show", action="store_true", help="Display charts on screen")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More log output (-v info, -vv debug)")
    return parser


def config_from_args(args) -> AnalysisConfig:
    log_level = {0: "WARNING", 1: "INFO"}.get(args.verbose, "DEBUG")
    return AnalysisConfig(
        data_path=Path(args.data_path),
        output_dir=Path(args.output_dir),
        show_plots=args.show,
        make_plots=not args.no_plots,
        log_level=log_level,
    )


def main(argv=None):
    """
    Main function to run the complete analysis pipeline
    Returns:
        int: 0 on success, 1 when the data could not be loaded or is invalid
    """
    config = config_from_args(build_parser().parse_args(argv))
    configure_logging(config.log_level)
    logger.info("Run settings: %s", config)
    if not config.show_plots:
        matplotlib.use("Agg")

    from titanic_eda.pipeline import load_and_analyze
    from titanic_eda.reporting import SurvivalReport

    print("Titanic Survival Analysis")
    print("=" * 60)
    print(f"Loading {config.data_path} ...")

    try:
        result = load_and_analyze(config.data_path)
    except AnalysisError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Loaded {result.overview.total} records with {len(result.overview.features)} features each.\n")

    report = SurvivalReport(output_dir=config.output_dir, show=config.show_plots, figsize=config.figsize)
    charts = report.render(result, plots=config.make_plots)
    if charts:
        print(f"\nSaved {len(charts)} chart(s) to {config.output_dir}")
    return 0


def main_cli():
    sys.exit(main())


if __name__ == "__main__":
    main_cli()

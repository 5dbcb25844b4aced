"""
CLI entrypoint for the labeling-ops seeding commands.

Example:
    python -m seeding.runner create-labelers
    python -m seeding.runner load-samples --csv "data/IMDB Dataset.csv"
    python -m seeding.runner simulate --seed 7 --export out/labels.csv
    python -m seeding.runner report --export out
    python -m seeding.runner demo --csv "data/IMDB Dataset.csv" --export
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from config import get_settings
from labelops.analytics import performance_totals
from labelops.errors import LabelOpsError
from labelops.simulation import make_random
from labelops.storage import InMemoryStore, LabelingRepository, LabelStore

from .client import SupabaseClient
from .config import RunnerConfig, SupabaseConfig
from .pipeline import DashboardReport, SeedingPipeline
from .storage import save_frame_csv, save_labels_csv

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--debug", action="store_true", help="Enable debug logging")
    common.add_argument("--settings", type=Path, default=None, help="Path to a settings YAML file")

    parser = argparse.ArgumentParser(description="Seed and inspect simulated labeling operations")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("create-labelers", parents=[common], help="Insert the default labeler roster")

    load = subparsers.add_parser("load-samples", parents=[common], help="Upload review texts from a CSV file")
    load.add_argument("--csv", dest="csv_path", type=Path, required=True, help="IMDB-style review CSV")
    load.add_argument("--limit", type=int, default=None, help="Number of leading rows to consider")

    simulate = subparsers.add_parser("simulate", parents=[common], help="Generate and upload simulated labels")
    simulate.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    simulate.add_argument("--dry-run", action="store_true", help="Generate labels without uploading")
    simulate.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=True,
        default=None,
        metavar="PATH",
        help="Write generated labels to CSV (default: output dir)",
    )

    report = subparsers.add_parser("report", parents=[common], help="Print dashboard metrics from stored labels")
    report.add_argument("--edge-cases", type=int, default=20, help="Number of edge cases to list")
    report.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=True,
        default=None,
        metavar="DIR",
        help="Write labeler performance CSV into DIR (default: output dir)",
    )

    demo = subparsers.add_parser("demo", parents=[common], help="Run every step against an in-memory store")
    demo.add_argument("--csv", dest="csv_path", type=Path, required=True, help="IMDB-style review CSV")
    demo.add_argument("--limit", type=int, default=None, help="Number of leading rows to consider")
    demo.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    demo.add_argument(
        "--export",
        type=Path,
        nargs="?",
        const=True,
        default=None,
        metavar="DIR",
        help="Write labels and labeler performance CSVs into DIR",
    )

    return parser.parse_args(argv)


ExportTarget = Union[Path, bool, None]


def export_dir(target: ExportTarget, runner_config: RunnerConfig) -> Path:
    return Path(runner_config.output_dir) if target is True else Path(target)


def labels_export_path(command: str, target: ExportTarget, runner_config: RunnerConfig) -> Path:
    """simulate takes a file path, demo a directory; a bare flag means the output dir."""

    if command == "simulate" and target is not True:
        return Path(target)
    return export_dir(target, runner_config) / runner_config.labels_file


def build_pipeline(store: LabelStore, args: argparse.Namespace) -> SeedingPipeline:
    settings = get_settings(args.settings)
    repository = LabelingRepository(store, settings.tables)
    seed = getattr(args, "seed", None)
    return SeedingPipeline(repository, settings, rng=make_random(seed))


def log_report(report: DashboardReport) -> None:
    summary = report.overview
    logger.info(
        "Overview: labels=%d samples=%d labelers=%d accuracy=%.1f%%",
        summary.total_labels,
        summary.total_samples,
        summary.total_labelers,
        summary.overall_accuracy,
    )
    logger.info("Labeler performance:\n%s", report.performance.to_string(index=False))
    totals = performance_totals(report.performance)
    logger.info(
        "Totals: labels=%d accuracy=%.1f%% avg_time=%ds labels_per_hour=%g avg_rate=$%.2f/hr cost=$%.2f",
        totals.total_labels,
        totals.accuracy,
        totals.avg_time_seconds,
        totals.labels_per_hour,
        totals.avg_hourly_rate,
        totals.total_cost,
    )
    for case in report.edge_cases:
        logger.info(
            "  sample %d: agreement=%.1f%% labels=%s truth=%s",
            case.sample_id,
            case.agreement_rate,
            case.label_counts,
            case.true_sentiment,
        )


def run_command(args: argparse.Namespace, store: LabelStore, runner_config: RunnerConfig) -> None:
    pipeline = build_pipeline(store, args)
    export = getattr(args, "export", None)

    if args.command in ("create-labelers", "demo"):
        pipeline.create_labelers()
    if args.command in ("load-samples", "demo"):
        pipeline.load_samples(args.csv_path, limit=args.limit)
    if args.command in ("simulate", "demo"):
        sim = pipeline.simulate(dry_run=getattr(args, "dry_run", False))
        if export is not None:
            target = labels_export_path(args.command, export, runner_config)
            path = save_labels_csv(str(target.parent), target.name, sim.result.labels)
            logger.info("Saved %d labels to %s", len(sim.result.labels), path)
    if args.command in ("report", "demo"):
        report = pipeline.report(edge_case_limit=getattr(args, "edge_cases", 20))
        log_report(report)
        if export is not None:
            target_dir = export_dir(export, runner_config)
            path = save_frame_csv(str(target_dir), runner_config.performance_file, report.performance)
            logger.info("Saved labeler performance to %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        if args.command == "demo":
            store: LabelStore = InMemoryStore()
        else:
            settings = get_settings(args.settings)
            store = SupabaseClient(SupabaseConfig(), settings.client)
        run_command(args, store, RunnerConfig())
    except (LabelOpsError, FileNotFoundError, ValidationError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1

    logger.info("%s finished", args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())

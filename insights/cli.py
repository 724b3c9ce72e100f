#!/usr/bin/env python3
"""
Canvas Insights CLI

Render board exports and scorecards from the board store.

Usage:
    canvas-insights export --board q3-planning [--format slides] [--save]
    canvas-insights scorecard [--board q3-planning]
"""

import sys
import logging
import argparse
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .common.config import load_config
from .common.schemas import BoardMetricsSnapshot, ExportConfig, ExportFormat, TemplateType
from .common.store import JsonBoardStore
from .extractor import classify
from .exporter import export_filename, render
from .scorecard import (
    aggregate_snapshots,
    compute_board_metrics,
    compute_trends,
    get_velocity_estimator,
    status_distribution,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canvas-insights",
        description="Stakeholder exports and execution scorecards for strategy canvases",
    )
    parser.add_argument("--store", type=str, default=None, help="Path to the board store JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    export = subparsers.add_parser("export", help="Render a board as an email, slides or newsletter")
    export.add_argument("--board", required=True, help="Board id")
    export.add_argument("--format", choices=[f.value for f in ExportFormat], default=None)
    export.add_argument("--template", choices=[t.value for t in TemplateType], default=None)
    export.add_argument("--no-metrics", action="store_true", help="Omit the metrics section")
    export.add_argument("--no-decisions", action="store_true", help="Omit the decisions section")
    export.add_argument("--no-actions", action="store_true", help="Omit the action items section")
    export.add_argument("--no-risks", action="store_true", help="Omit the risks section")
    destination = export.add_mutually_exclusive_group()
    destination.add_argument("--output", type=str, default=None, help="Write the artifact to this path")
    destination.add_argument("--save", action="store_true", help="Write to <board-name>-update.<ext>")

    scorecard = subparsers.add_parser("scorecard", help="Print execution metrics")
    scorecard.add_argument("--board", default=None, help="Board id (default: all boards combined)")

    return parser


def _export_config(args: argparse.Namespace, defaults: ExportConfig) -> ExportConfig:
    return defaults.model_copy(update={
        "format": ExportFormat(args.format) if args.format else defaults.format,
        "template": TemplateType(args.template) if args.template else defaults.template,
        "include_metrics": defaults.include_metrics and not args.no_metrics,
        "include_decisions": defaults.include_decisions and not args.no_decisions,
        "include_action_items": defaults.include_action_items and not args.no_actions,
        "include_risks": defaults.include_risks and not args.no_risks,
    })


def format_scorecard(snapshot: BoardMetricsSnapshot) -> str:
    """Plain-text scorecard"""
    trends = compute_trends(snapshot)
    lines = [
        f"Scorecard: {snapshot.board_name or snapshot.board_id}",
        f"  Completion:        {snapshot.completed_items}/{snapshot.total_items} ({trends.completion_pct}%)",
        f"  Decisions:         {snapshot.decisions_count} (avg velocity {snapshot.avg_decision_velocity_days:.1f} days)",
        f"  Goals:             {snapshot.goals_completed}/{snapshot.goals_tracked}",
        f"  Actions:           {snapshot.actions_completed}/{snapshot.action_items}",
        f"  Risks:             {snapshot.risk_items}",
        f"  This week:         {snapshot.weekly_created} created, {snapshot.weekly_completed} completed",
        f"  Last week:         {snapshot.last_week_created} created, {snapshot.last_week_completed} completed",
        f"  Weekly trend:      {trends.weekly_trend_pct:+d}%",
        f"  Completion trend:  {trends.completion_trend_pct:+d}%",
    ]

    distribution = status_distribution(snapshot)
    if distribution:
        lines.append("  Status:            " + ", ".join(f"{s.name} {s.value}" for s in distribution))

    if snapshot.nodes_by_type:
        lines.append("  Items by type:     " + ", ".join(
            f"{name} {count}" for name, count in sorted(snapshot.nodes_by_type.items())
        ))

    lines.append("  Last 7 days:")
    for day in snapshot.activity_timeline:
        lines.append(f"    {day.date}  created {day.created:>3}  completed {day.completed:>3}")

    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = load_config()
    store = JsonBoardStore(Path(args.store or config.store.path))

    if args.command == "export":
        try:
            board = store.get_board(args.board)
        except KeyError:
            print(f"[Canvas] ERROR: Board not found: {args.board}", file=sys.stderr)
            return 1

        export_config = _export_config(args, config.export.to_export_config())
        bundle = classify(store.list_items(board.id), title=board.name)
        artifact = render(bundle, export_config)

        target = args.output
        if args.save:
            target = export_filename(board.name, export_config.format)
        if target:
            Path(target).write_text(artifact, encoding="utf-8")
            print(f"[Canvas] Wrote {export_config.format.value} export to {target}")
        else:
            print(artifact)
        return 0

    now = datetime.now()
    estimator = get_velocity_estimator(config.scorecard)

    if args.board:
        try:
            board = store.get_board(args.board)
        except KeyError:
            print(f"[Canvas] ERROR: Board not found: {args.board}", file=sys.stderr)
            return 1
        snapshot = compute_board_metrics(board, now, estimator=estimator)
    else:
        snapshots = [compute_board_metrics(b, now, estimator=estimator) for b in store.list_boards()]
        snapshot = aggregate_snapshots(snapshots, now, estimator=estimator)

    print(format_scorecard(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())

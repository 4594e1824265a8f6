from __future__ import annotations

import argparse
import sys

from activity_sessions.config import AppConfig, dump_default_config, load_config
from activity_sessions.connectors.registry import build_sink, build_source
from activity_sessions.runner import SessionRunner
from activity_sessions.utils.display.terminal import (
    print_banner,
    print_run_events,
    print_run_summary,
    print_run_summary_json,
    print_sessions,
)
from activity_sessions.utils.logging import setup_logging


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute user sessions from activity records")
    parser.add_argument("--config", default="config.yaml", help="Path to YAML config")
    parser.add_argument("--init-config", action="store_true", help="Write default config and exit")
    parser.add_argument("--input", help="Read activities from a JSON file instead of the API")
    parser.add_argument("--output", help="Write sessions to a JSON file instead of the API")
    parser.add_argument("--dry-run", action="store_true", help="Compute sessions but submit nothing")
    parser.add_argument("--gap-seconds", type=float, help="Override the session gap threshold")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on activities answered before they were first seen",
    )
    parser.add_argument("--log-level", help="Override log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--json-summary", action="store_true", help="Print run summary as JSON")
    parser.add_argument("--show-sessions", action="store_true", help="Print computed sessions")
    parser.add_argument("--events-limit", type=int, default=0, help="Print recent run events")
    return parser.parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.input:
        config.io.input_path = args.input
    if args.output:
        config.io.output_path = args.output
    if args.gap_seconds is not None:
        if args.gap_seconds < 0:
            raise SystemExit("--gap-seconds must be non-negative")
        config.sessions.gap_seconds = args.gap_seconds
    if args.strict:
        config.sessions.reject_reversed = True
    return config


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.init_config:
        dump_default_config(args.config)
        print(f"Wrote default config to {args.config}")
        return 0

    config = apply_overrides(load_config(args.config), args)
    setup_logging(level=args.log_level or config.logging.level)
    if not args.json_summary:
        print_banner()

    try:
        source = build_source(config)
        sink = None if args.dry_run else build_sink(config)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    runner = SessionRunner(
        source,
        sink,
        gap_seconds=config.sessions.gap_seconds,
        reject_reversed=config.sessions.reject_reversed,
    )
    result = runner.run(dry_run=args.dry_run)

    if args.json_summary:
        print_run_summary_json(result)
    else:
        print_run_summary(result)
        if args.show_sessions and result.sessions is not None:
            print_sessions(result.sessions)
    if args.events_limit > 0:
        print_run_events(runner.recent_events(args.events_limit))

    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

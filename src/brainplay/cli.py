# Area: Shared
"""
brainplay.cli — Command-line interface
=======================================

Inspect the catalog, the daily schedule and generated content, or watch
a scripted player finish a game.

Usage:
    brainplay games
    brainplay daily --date 2026-03-14
    brainplay daily --days 7
    brainplay seed math-sprint --date 2026-03-14
    brainplay preview card-flip --seed 7 --level 4
    brainplay demo pattern-echo --seed 42 --accuracy 0.8

Settings can be supplied via:
    1. CLI flag: --config settings.json
    2. Environment variables (a ``.env`` file is loaded):
       BRAINPLAY_LOG_LEVEL, BRAINPLAY_LOG_FILE, BRAINPLAY_BASE_DIFFICULTY

Exit codes: 0 success, 1 config or runtime error, 2 usage error.
"""

import argparse
import datetime as dt
import json
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ._config import load_settings
from ._core.rng import get_daily_seed, get_game_seed
from ._core.scheduler import ManualScheduler
from ._shared.logging_config import log_config_error, setup_logging
from .daily import get_daily_challenge, get_upcoming_challenges
from .demo_player import DEFAULT_ACCURACY, DemoPlayer
from .errors import BrainPlayError
from .registry import DEFAULT_REGISTRY

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def _iso_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def _difficulty(value: str) -> int:
    number = int(value)
    if not 1 <= number <= 10:
        raise argparse.ArgumentTypeError(f"difficulty must be within 1-10, got {number}")
    return number


def _accuracy(value: str) -> float:
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"accuracy must be within 0-1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="brainplay",
        description="BrainPlay engine - inspect games, seeds and daily challenges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  brainplay games
  brainplay daily --days 7
  brainplay preview math-sprint --seed 42
  brainplay demo card-flip --seed 7 --accuracy 0.75
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON settings file")
    parser.add_argument("--log-level", type=str, help="Override log level (e.g. DEBUG)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("games", help="List registered games")

    daily = sub.add_parser("daily", help="Show the daily challenge")
    daily.add_argument("--date", type=_iso_date, help="UTC date, defaults to today")
    daily.add_argument("--days", type=int, default=1, help="Number of consecutive days")

    seed = sub.add_parser("seed", help="Show the daily seed for one game")
    seed.add_argument("game_id")
    seed.add_argument("--date", type=_iso_date, help="UTC date, defaults to today")

    preview = sub.add_parser("preview", help="Print the content of one level")
    preview.add_argument("game_id")
    preview.add_argument("--seed", type=int, default=0)
    preview.add_argument("--difficulty", type=_difficulty, default=None)
    preview.add_argument("--level", type=int, default=None)

    demo = sub.add_parser("demo", help="Let the scripted player finish a game")
    demo.add_argument("game_id")
    demo.add_argument("--seed", type=int, default=0)
    demo.add_argument("--difficulty", type=_difficulty, default=None)
    demo.add_argument("--accuracy", type=_accuracy, default=DEFAULT_ACCURACY)

    return parser


def _emit(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_games(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    _emit([info.to_dict() for info in DEFAULT_REGISTRY.list_games()])
    return EXIT_OK


def cmd_daily(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    base = settings["base_difficulty"]
    if args.days < 1:
        print("Error: --days must be at least 1", file=sys.stderr)
        return EXIT_USAGE
    if args.days == 1:
        _emit(get_daily_challenge(args.date, base_difficulty=base).to_dict())
    else:
        challenges = get_upcoming_challenges(args.days, args.date, base_difficulty=base)
        _emit([c.to_dict() for c in challenges])
    return EXIT_OK


def cmd_seed(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    _emit({
        "game_id": args.game_id,
        "daily_seed": get_daily_seed(args.date),
        "game_seed": get_game_seed(args.game_id, args.date),
    })
    return EXIT_OK


def _session_config(args: argparse.Namespace, settings: Dict[str, Any]) -> Dict[str, Any]:
    config: Dict[str, Any] = {
        "game_id": args.game_id,
        "seed": args.seed,
        "difficulty": args.difficulty or settings["base_difficulty"],
    }
    if getattr(args, "level", None) is not None:
        config["level"] = args.level
    return config


def cmd_preview(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    scheduler = ManualScheduler()
    engine = DEFAULT_REGISTRY.create_engine(
        _session_config(args, settings),
        clock=lambda: scheduler.now_ms,
        scheduler=scheduler,
    )
    with engine:
        engine.init()
        engine.start()
        _emit({
            "game_id": engine.game_id,
            "seed": engine.seed,
            "difficulty": engine.difficulty,
            "level": engine.level,
            "time_limit": engine.rules.time_limit,
            "progress": engine.progress(),
            "content": engine.content(),
        })
    return EXIT_OK


def cmd_demo(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    player = DemoPlayer.for_config(_session_config(args, settings), accuracy=args.accuracy)
    with player.engine:
        result = player.play()
    _emit(result.to_dict())
    return EXIT_OK


COMMANDS = {
    "games": cmd_games,
    "daily": cmd_daily,
    "seed": cmd_seed,
    "preview": cmd_preview,
    "demo": cmd_demo,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    load_dotenv()
    try:
        settings = load_settings(args.config)
        if args.log_level:
            settings["log_level"] = args.log_level.upper()
        setup_logging(settings["log_file"], settings["log_level"])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        return COMMANDS[args.command](args, settings)
    except BrainPlayError as e:
        log_config_error(e)
        return EXIT_ERROR
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

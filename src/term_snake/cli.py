"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from term_snake.config import BACKENDS, STYLES, GameConfig

logger = logging.getLogger(__name__)

EXIT_CONSOLE_ERROR = 2
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play Snake in the terminal.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--length", type=int, default=None, help="Initial snake length.",
    )
    parser.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between moves.",
    )
    parser.add_argument("--style", type=str, default=None, choices=STYLES)
    parser.add_argument("--backend", type=str, default=None, choices=BACKENDS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--high-score-file", type=str, default=None,
        help="Where the best score is kept.",
    )
    parser.add_argument(
        "--no-high-score", action="store_true",
        help="Do not read or write a high score file.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write INFO-level logs here instead of WARNING-level to stderr.",
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path before playing.",
    )
    return parser


def _configure_logging(log_file: str | None) -> None:
    logging.basicConfig(
        level=logging.INFO if log_file else logging.WARNING,
        filename=log_file,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _resolve_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser,
) -> GameConfig:
    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        config = config.with_overrides(
            grid_width=args.width,
            grid_height=args.height,
            initial_length=args.length,
            tick_ms=args.tick_ms,
            style=args.style,
            backend=args.backend,
            seed=args.seed,
            high_score_path=args.high_score_file,
        )
        if args.no_high_score:
            config = dataclasses.replace(config, high_score_path=None)
    except (OSError, TypeError, ValueError) as exc:
        parser.error(str(exc))
    return config


def _play(config: GameConfig) -> tuple[int, int]:
    """Run a session; returns ``(exit_code, final_score)``."""
    from term_snake.console import ConsoleError, make_console
    from term_snake.engine import GameEngine
    from term_snake.highscore import HighScoreStore, NullHighScoreStore
    from term_snake.loop import GameLoop
    from term_snake.render import get_style, required_size

    store = (
        HighScoreStore(config.high_score_path)
        if config.high_score_path else NullHighScoreStore()
    )
    engine = GameEngine(
        width=config.grid_width,
        height=config.grid_height,
        initial_length=config.initial_length,
        food_reward=config.food_reward,
        seed=config.seed,
        high_scores=store,
    )
    style = get_style(config.style)

    try:
        console = make_console(config.backend)
        with console:
            console.require_size(
                *required_size(config.grid_width, config.grid_height, style),
            )
            loop = GameLoop(
                engine, console, style=style,
                tick_ms=config.tick_ms, idle_ms=config.idle_ms,
            )
            code = loop.run()
    except ConsoleError as exc:
        logger.error("Console unavailable: %s", exc)
        print(f"term-snake: {exc}", file=sys.stderr)  # noqa: T201
        return EXIT_CONSOLE_ERROR, engine.score
    except KeyboardInterrupt:
        logger.info("Interrupted at tick %d.", engine.tick)
        return EXIT_INTERRUPTED, engine.score
    return code, engine.score


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_file)

    config = _resolve_config(args, parser)
    if args.save_config:
        config.save(args.save_config)

    code, score = _play(config)
    if code == 0:
        print(f"Thanks for playing! Final score: {score}")  # noqa: T201
    return code


if __name__ == "__main__":
    sys.exit(main())

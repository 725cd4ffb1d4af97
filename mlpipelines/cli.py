"""
Command line entry points for the machine learning demos.

Usage:
    # Train, evaluate, save and reload the GitHub issue classifier
    python main.py issues train

    # Train on the Korean issue dataset
    python main.py issues train --profile ko

    # Predict with a previously saved issue classifier
    python main.py issues predict --title "EF crashes" --description "On connect"

    # Sentiment analysis with an 80/20 split of one file
    python main.py sentiment

    # Sentiment analysis with a separate test file and the L-BFGS trainer
    python main.py sentiment --separate-test

    # Taxi fare regression
    python main.py taxi
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .config import Settings, get_settings
from .exceptions import PipelineError
from .logger import setup_logging

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def run_issues(args: argparse.Namespace, settings: Settings) -> int:
    """Run the GitHub issue classification demo."""

    from .demos import issues

    if args.action == "train":
        issues.run_training(settings, profile=args.profile)
        return 0

    dataset = settings.issues.profile(args.profile)
    title = args.title if args.title is not None else dataset.sample_title
    description = args.description if args.description is not None else dataset.sample_description
    model_path = args.model or dataset.model_path
    issues.predict_issue(model_path, title, description)
    return 0


def run_sentiment(args: argparse.Namespace, settings: Settings) -> int:
    """Run the sentiment analysis demo."""

    from .demos import sentiment

    sentiment.run(settings, separate_test=args.separate_test)
    return 0


def run_taxi(args: argparse.Namespace, settings: Settings) -> int:  # noqa: ARG001
    """Run the taxi fare regression demo."""

    from .demos import taxi

    taxi.run(settings)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mlpipelines",
        description="Supervised learning console demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured logging level.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available demos")

    # Issues subcommand
    issues_parser = subparsers.add_parser("issues", help="GitHub issue area classification")
    issues_parser.add_argument("action", choices=["train", "predict"])
    issues_parser.add_argument(
        "--profile",
        choices=["en", "ko"],
        default="en",
        help="Dataset profile: English GitHub issues or the Korean dataset",
    )
    issues_parser.add_argument("--title", default=None, help="Issue title to predict")
    issues_parser.add_argument("--description", default=None, help="Issue description to predict")
    issues_parser.add_argument("--model", default=None, help="Path of a saved issue model")
    issues_parser.set_defaults(handler=run_issues)

    # Sentiment subcommand
    sentiment_parser = subparsers.add_parser("sentiment", help="Short text sentiment analysis")
    sentiment_parser.add_argument(
        "--separate-test",
        action="store_true",
        help="Evaluate on the separate test file instead of splitting the training file",
    )
    sentiment_parser.set_defaults(handler=run_sentiment)

    # Taxi subcommand
    taxi_parser = subparsers.add_parser("taxi", help="Taxi fare regression")
    taxi_parser.set_defaults(handler=run_taxi)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point with subcommand routing."""

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    setup_logging(settings, level=args.log_level)

    try:
        return args.handler(args, settings)
    except (PipelineError, FileNotFoundError) as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        return 1


__all__ = ["build_parser", "main"]

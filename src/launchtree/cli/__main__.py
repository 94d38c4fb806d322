from __future__ import annotations

import argparse

from launchtree.cli import evaluate_once
from launchtree.config.settings import load_settings
from launchtree.models.params import LaunchParams


def _track_path(args: argparse.Namespace):
    # None leaves the config value in place
    return False if args.no_track_path else None


def _cmd_run(args: argparse.Namespace) -> None:
    evaluate_once.run(
        config_path=args.config,
        seed=args.seed,
        track_path=_track_path(args),
        send_notification=args.notify,
    )


def _cmd_evaluate(args: argparse.Namespace) -> None:
    settings = load_settings(args.config)
    if args.no_track_path:
        settings = settings.model_copy(update={"track_path": False})

    params = LaunchParams(
        uses_market_testing=args.market_testing,
        has_positive_rating=args.positive_rating,
        successful_launch=args.successful,
        modest_launch=args.modest,
        failed_launch=args.failed,
    )
    evaluate_once.evaluate(params, settings, send_notification=args.notify)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="YAML settings file")
    p.add_argument("--no-track-path", action="store_true", help="Don't print the travel path")
    p.add_argument("--notify", action="store_true", help="Post the result to SLACK_WEBHOOK_URL")


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="launchtree")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Evaluate the launch tree for random inputs")
    p_run.add_argument("--seed", type=int, default=None)
    _add_common(p_run)
    p_run.set_defaults(func=_cmd_run)

    p_eval = sub.add_parser("evaluate", help="Evaluate the launch tree for the given inputs")
    p_eval.add_argument("--market-testing", action="store_true")
    p_eval.add_argument("--positive-rating", action="store_true")
    p_eval.add_argument("--successful", action="store_true")
    p_eval.add_argument("--modest", action="store_true")
    p_eval.add_argument("--failed", action="store_true")
    _add_common(p_eval)
    p_eval.set_defaults(func=_cmd_evaluate)

    args = p.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Callable, Optional, Union

from launchtree.config.settings import LaunchSettings, load_settings
from launchtree.models.params import LaunchParams
from launchtree.notify.slack import launch_message, notify
from launchtree.params.random_params import generate_random_params
from launchtree.report import format_report
from launchtree.tree.builder import create_tree
from launchtree.tree.evaluator import get_result


def seeded_rng(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        env_seed = os.getenv("LAUNCHTREE_SEED")
        if env_seed:
            seed = int(env_seed)
    return random.Random(seed)


def evaluate(
    params: LaunchParams,
    settings: Optional[LaunchSettings] = None,
    send_notification: bool = False,
    echo: Callable[[str], None] = print,
) -> str:
    """Build the tree for `params`, walk it, print the report and return it."""
    settings = settings or LaunchSettings()

    root = create_tree(params)
    result = get_result(root, track_path=settings.track_path, echo=echo)

    report = format_report(result)
    echo(report)

    if send_notification:
        if notify(launch_message(params, report)):
            echo("notification sent")
        else:
            echo("notification skipped (SLACK_WEBHOOK_URL not set)")

    return report


def run(
    config_path: Optional[Union[str, Path]] = None,
    seed: Optional[int] = None,
    track_path: Optional[bool] = None,
    send_notification: bool = False,
) -> str:
    settings = load_settings(config_path)
    if track_path is not None:
        settings = settings.model_copy(update={"track_path": track_path})

    params = generate_random_params(seeded_rng(seed))
    return evaluate(params, settings, send_notification=send_notification)

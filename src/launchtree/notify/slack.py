import os
import json
import requests

from launchtree.models.params import LaunchParams

def launch_message(params: LaunchParams, report: str) -> str:
    return (
        f"{report} | "
        f"testing={int(params.uses_market_testing)} "
        f"positive={int(params.has_positive_rating)} "
        f"successful={int(params.successful_launch)} "
        f"modest={int(params.modest_launch)} "
        f"failed={int(params.failed_launch)}"
    )

def notify(text: str) -> bool:
    url = os.getenv("SLACK_WEBHOOK_URL")
    if not url:
        return False

    resp = requests.post(
        url,
        data=json.dumps({"text": text}),
        headers={"Content-Type": "application/json"},
        timeout=10,
    )
    resp.raise_for_status()
    return True

from __future__ import annotations

import random
from typing import Optional

from launchtree.models.params import LaunchParams


def _coin(rng: random.Random) -> bool:
    return rng.randint(0, 1) != 0


def generate_random_params(rng: Optional[random.Random] = None) -> LaunchParams:
    rng = rng or random.Random()

    uses_market_testing = _coin(rng)
    # A rating only exists when the product went through market testing.
    has_positive_rating = _coin(rng) if uses_market_testing else False

    return LaunchParams(
        uses_market_testing=uses_market_testing,
        has_positive_rating=has_positive_rating,
        successful_launch=_coin(rng),
        modest_launch=_coin(rng),
        failed_launch=_coin(rng),
    )

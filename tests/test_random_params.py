import random

from launchtree.params.random_params import generate_random_params

def test_rating_forced_false_without_testing():
    rng = random.Random(0)
    for _ in range(500):
        p = generate_random_params(rng)
        if not p.uses_market_testing:
            assert p.has_positive_rating is False

def test_seeded_generation_is_reproducible():
    a = [generate_random_params(random.Random(42)) for _ in range(3)]
    b = [generate_random_params(random.Random(42)) for _ in range(3)]
    assert a == b

def test_all_branches_reachable():
    rng = random.Random(7)
    seen = {(p.uses_market_testing, p.has_positive_rating) for p in (generate_random_params(rng) for _ in range(500))}
    assert seen == {(False, False), (True, False), (True, True)}

def test_default_rng():
    assert generate_random_params() is not None

import random

import pytest

from conftest import FixedOrder
from utils.helpers import generate_player_pairs


def test_example_rotation():
    pairs = generate_player_pairs([0, 1, 2], FixedOrder([2, 0, 1]))
    # 0's question goes to 1, 1's to 2, 2's to 0
    assert pairs == {0: 1, 1: 2, 2: 0}


@pytest.mark.parametrize("size", [2, 3, 4, 7, 12])
def test_pairing_is_derangement(size):
    rng = random.Random(size)
    ids = list(range(size))
    for _ in range(50):
        pairs = generate_player_pairs(ids, rng)
        assert sorted(pairs.keys()) == ids
        assert sorted(pairs.values()) == ids
        assert all(asker != responder for asker, responder in pairs.items())


def test_pairing_accepts_sparse_ids():
    pairs = generate_player_pairs({3, 8, 11}, random.Random(1))
    assert set(pairs) == {3, 8, 11}
    assert set(pairs.values()) == {3, 8, 11}
    assert all(a != r for a, r in pairs.items())


def test_pairing_forms_single_cycle():
    pairs = generate_player_pairs(range(6), random.Random(42))
    seen = [0]
    while pairs[seen[-1]] != 0:
        seen.append(pairs[seen[-1]])
    assert len(seen) == 6


def test_single_player_pairs_with_self():
    assert generate_player_pairs([0], random.Random()) == {0: 0}


def test_empty_roster():
    assert generate_player_pairs([], random.Random()) == {}

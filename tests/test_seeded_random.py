"""Tests for the MINSTD seeded stream."""

import pytest

from morphcore.util.rng import (
    DEFAULT_SEED,
    LCG_MODULUS,
    MissingRNGError,
    SeededRandom,
    normalize_seed,
    require_rng_param,
)


def test_known_sequence_for_default_seed():
    rng = SeededRandom()
    assert rng.seed == DEFAULT_SEED == 12345

    assert rng.next() == 595905495 / LCG_MODULUS
    assert rng.current == 595905495
    assert rng.next() == 1558181227 / LCG_MODULUS
    assert rng.next() == 1498755989 / LCG_MODULUS


def test_seed_one_first_draw():
    rng = SeededRandom(1)
    assert rng.next() == 48271 / LCG_MODULUS


def test_reset_replays_sequence():
    rng = SeededRandom(987)
    first = [rng.next() for _ in range(20)]
    rng.reset()
    assert [rng.next() for _ in range(20)] == first


def test_set_seed_rewinds_to_new_seed():
    rng = SeededRandom(5)
    rng.next()
    rng.set_seed(12345)
    assert rng.seed == 12345
    assert rng.current == 12345
    assert rng.next() == 595905495 / LCG_MODULUS


def test_same_seed_same_stream():
    a = SeededRandom(2024)
    b = SeededRandom(2024)
    assert [a.int(0, 100) for _ in range(50)] == [b.int(0, 100) for _ in range(50)]


@pytest.mark.parametrize("seed", [0, LCG_MODULUS, 2 * LCG_MODULUS])
def test_degenerate_seeds_rejected(seed):
    with pytest.raises(ValueError):
        SeededRandom(seed)


def test_next_stays_in_unit_interval():
    rng = SeededRandom(77)
    for _ in range(5000):
        value = rng.next()
        assert 0.0 < value < 1.0


def test_float_bounds():
    rng = SeededRandom(3)
    for _ in range(2000):
        value = rng.float(-85, 85)
        assert -85 <= value < 85


def test_int_is_inclusive_on_both_ends():
    rng = SeededRandom(11)
    draws = {rng.int(8, 12) for _ in range(2000)}
    assert draws == {8, 9, 10, 11, 12}


def test_int_degenerate_range():
    rng = SeededRandom(11)
    assert all(rng.int(4, 4) == 4 for _ in range(100))


def test_bool_extremes():
    rng = SeededRandom(19)
    assert not any(rng.bool(0.0) for _ in range(500))
    assert all(rng.bool(1.0) for _ in range(500))


def test_bool_consumes_one_draw():
    a = SeededRandom(8)
    b = SeededRandom(8)
    a.bool(0.3)
    b.next()
    assert a.current == b.current


def test_pick_returns_member():
    rng = SeededRandom(23)
    items = ["western", "eastern", "southern"]
    picks = {rng.pick(items) for _ in range(300)}
    assert picks == set(items)


def test_pick_empty_raises():
    with pytest.raises(IndexError):
        SeededRandom(1).pick([])


def test_shuffle_returns_new_permutation():
    rng = SeededRandom(31)
    items = list(range(20))
    shuffled = rng.shuffle(items)

    assert items == list(range(20))
    assert sorted(shuffled) == items
    assert shuffled is not items


def test_shuffle_is_deterministic():
    items = ["a", "b", "c", "d", "e", "f"]
    assert SeededRandom(9).shuffle(items) == SeededRandom(9).shuffle(items)


def test_require_rng_param():
    rng = SeededRandom(1)
    assert require_rng_param(rng, "test") is rng
    with pytest.raises(MissingRNGError, match="breed"):
        require_rng_param(None, "breed")


@pytest.mark.parametrize(
    "seed, expected",
    [(0, 1), (LCG_MODULUS, 1), (-LCG_MODULUS, 1), (7, 7), (LCG_MODULUS + 3, LCG_MODULUS + 3)],
)
def test_normalize_seed(seed, expected):
    assert normalize_seed(seed) == expected
    SeededRandom(normalize_seed(seed))

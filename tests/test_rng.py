import pytest

from antcolony import rng


def test_generator_is_shared():
    rng.seed(9)
    first = rng.generator().random()
    second = rng.generator().random()
    rng.seed(9)
    gen = rng.generator()
    assert [gen.random(), gen.random()] == [first, second]


def test_seed_makes_draws_reproducible():
    rng.seed(1234)
    first = [rng.rand_upto(99) for _ in range(20)]
    rng.seed(1234)
    second = [rng.rand_upto(99) for _ in range(20)]
    assert first == second


def test_seed_affects_generator_object():
    rng.seed(7)
    a = rng.generator().random()
    rng.seed(7)
    assert rng.generator().random() == a


def test_rand_upto_is_inclusive_range():
    rng.seed(42)
    draws = {rng.rand_upto(7) for _ in range(2000)}
    assert draws == set(range(8))


def test_rand_upto_zero_returns_zero():
    assert all(rng.rand_upto(0) == 0 for _ in range(50))


def test_rand_upto_negative_raises():
    with pytest.raises(ValueError):
        rng.rand_upto(-1)


def test_uniform_stays_in_half_open_range():
    rng.seed(3)
    values = [rng.uniform(2.0, 5.0) for _ in range(1000)]
    assert all(2.0 <= v < 5.0 for v in values)


def test_uniform_degenerate_range():
    assert rng.uniform(1.5, 1.5) == 1.5


def test_uniform_reversed_bounds_raise():
    with pytest.raises(ValueError):
        rng.uniform(3.0, 1.0)
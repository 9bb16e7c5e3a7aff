import pytest

from kitforge.core.rng import RNG, derive_seed


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.choice(range(1, 101)) for _ in range(5)]
    ints_b = [rng_b.choice(range(1, 101)) for _ in range(5)]
    choices_a = [rng_a.choice(["a", "b", "c"]) for _ in range(5)]
    choices_b = [rng_b.choice(["a", "b", "c"]) for _ in range(5)]

    assert ints_a == ints_b
    assert choices_a == choices_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.choice(range(1, 101)) for _ in range(5)]
    draws_b = [rng_b.choice(range(1, 101)) for _ in range(5)]

    assert draws_a != draws_b


def test_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        RNG(1).choice(())


def test_choice_accepts_tuples() -> None:
    assert RNG(7).choice(("only",)) == "only"


def test_derive_seed_is_stable_and_label_sensitive() -> None:
    assert derive_seed(1337, "ar", 0) == derive_seed(1337, "ar", 0)
    assert derive_seed(1337, "ar", 0) != derive_seed(1337, "ar", 1)
    assert derive_seed(1337, "ar", 0) != derive_seed(1337, "rm", 0)
    assert 0 <= derive_seed(5, "x") <= 0x7FFFFFFF


def test_child_rng_does_not_consume_parent_state() -> None:
    parent = RNG(42)
    untouched = RNG(42)

    parent.child("unit", 3)

    assert parent.choice(range(1000)) == untouched.choice(range(1000))
    assert parent.child("unit", 3).seed == untouched.child("unit", 3).seed

import pytest

from wordwheel.rng import INCREMENT, MASK64, MULTIPLIER, SeededRandom, derive_seed, lcg_next


class TestSeededRandom:
    """The LCG stream is fully determined by its seed."""

    def test_first_values(self):
        assert SeededRandom(0).next() == INCREMENT
        assert SeededRandom(1).next() == 7806831264735756412

    def test_recurrence_wraps_at_64_bits(self):
        state = MASK64
        assert lcg_next(state) == (state * MULTIPLIER + INCREMENT) % (1 << 64)
        assert 0 <= lcg_next(state) <= MASK64

    def test_same_seed_same_sequence(self):
        a, b = SeededRandom(12345), SeededRandom(12345)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_different_seeds_diverge(self):
        a, b = SeededRandom(1), SeededRandom(2)
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_seed_is_masked(self):
        assert SeededRandom(-1).state == MASK64
        assert SeededRandom(1 << 64).state == 0

    def test_randbelow_in_range(self):
        rng = SeededRandom(99)
        for n in (1, 2, 3, 7, 26, 1000):
            for _ in range(50):
                assert 0 <= rng.randbelow(n) < n

    def test_randbelow_one_is_zero(self):
        assert SeededRandom(5).randbelow(1) == 0

    def test_randbelow_rejects_empty_range(self):
        with pytest.raises(ValueError):
            SeededRandom(5).randbelow(0)

    def test_randbelow_covers_range(self):
        rng = SeededRandom(2024)
        seen = {rng.randbelow(6) for _ in range(300)}
        assert seen == set(range(6))

    def test_choice(self):
        letters = "ABCDEF"
        assert SeededRandom(8).choice(letters) == SeededRandom(8).choice(letters)
        assert SeededRandom(8).choice(letters) in letters

    def test_shuffle_is_permutation(self):
        items = list(range(20))
        shuffled = SeededRandom(3).shuffled(items)
        assert sorted(shuffled) == items
        assert items == list(range(20))  # shuffled() leaves the input alone

    def test_shuffle_deterministic(self):
        assert SeededRandom(3).shuffled("SPRING") == SeededRandom(3).shuffled("SPRING")

    def test_shuffle_in_place(self):
        items = list("SPRING")
        SeededRandom(4).shuffle(items)
        assert sorted(items) == sorted("SPRING")


class TestDeriveSeed:
    def test_level_and_attempt(self):
        assert derive_seed(1, 1) == 1001
        assert derive_seed(6, 3) == 6003

    def test_caller_seed_changes_result(self):
        assert derive_seed(6, 1, 12345) != derive_seed(6, 1)
        assert derive_seed(6, 1, 12345) != derive_seed(6, 1, 12346)

    def test_deterministic(self):
        assert derive_seed(6, 1, 12345) == derive_seed(6, 1, 12345)

    def test_attempts_vary(self):
        seeds = {derive_seed(2, attempt, 77) for attempt in range(1, 51)}
        assert len(seeds) == 50

from collections import Counter

from wordwheel.dictionary import can_form_word
from wordwheel.generator import derive_wheel_letters, letter_requirements
from wordwheel.rng import SeededRandom


class TestLetterRequirements:
    """Per-word maximum, not sum and not union."""

    def test_max_not_sum(self):
        required = letter_requirements(["SPRING", "PIN", "RING"])
        assert required == Counter("SPRING")

    def test_doubled_letters(self):
        required = letter_requirements(["ERRED", "RED", "DEER"])
        assert required == Counter({"E": 2, "R": 2, "D": 1})

    def test_empty(self):
        assert letter_requirements([]) == Counter()


class TestDeriveWheelLetters:
    def test_covers_every_word(self):
        words = ["SPRING", "PIN", "RING", "GRIP"]
        wheel = derive_wheel_letters(words, SeededRandom(1))
        assert sorted(wheel) == sorted("SPRING")
        for word in words:
            assert can_form_word(word, wheel)

    def test_too_many_letters_rejected(self):
        assert derive_wheel_letters(["SPRING", "TRAINS"], SeededRandom(1)) is None

    def test_padding_to_minimum(self):
        wheel = derive_wheel_letters(["CAT"], SeededRandom(7), min_letters=5, max_letters=6)
        assert len(wheel) == 5
        assert len(set(wheel)) == 5
        assert {"C", "A", "T"} <= set(wheel)

    def test_padding_keeps_existing_duplicates(self):
        wheel = derive_wheel_letters(["ERR"], SeededRandom(7), min_letters=5, max_letters=6)
        counts = Counter(wheel)
        assert len(wheel) == 5
        assert counts["R"] == 2
        assert counts["E"] == 1
        assert all(n == 1 for letter, n in counts.items() if letter not in "ER")

    def test_doubled_letter_word(self):
        wheel = derive_wheel_letters(["ERRED"], SeededRandom(3))
        assert Counter(wheel) == Counter("ERRED")

    def test_deterministic(self):
        words = ["MASTER", "TEAM", "STAR"]
        assert derive_wheel_letters(words, SeededRandom(42)) == derive_wheel_letters(words, SeededRandom(42))

    def test_custom_bounds(self):
        assert derive_wheel_letters(["SPRING"], SeededRandom(1), min_letters=3, max_letters=5) is None

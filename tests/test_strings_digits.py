import random

import pytest

from algoset.strings_digits import (
    character_replacement,
    is_power_of_three,
    largest_good_integer,
    maximum_69_number,
    min_max_difference,
    number_of_substrings,
)


def test_maximum_69_number_example():
    assert maximum_69_number(9669) == 9969


def test_maximum_69_number_no_six_unchanged():
    assert maximum_69_number(9999) == 9999


def test_maximum_69_number_changes_at_most_one_digit():
    rng = random.Random(1)
    for _ in range(50):
        num = int("".join(rng.choice("69") for _ in range(rng.randint(1, 6))))
        result = maximum_69_number(num)
        assert result >= num
        diffs = [a != b for a, b in zip(str(num), str(result))]
        assert sum(diffs) == (1 if "6" in str(num) else 0)
        assert "9" * (str(num).find("6") + 1) == str(result)[: str(num).find("6") + 1] or "6" not in str(num)


def test_number_of_substrings_whole_string():
    assert number_of_substrings("abc") == 1
    assert number_of_substrings("aaa") == 0


def test_number_of_substrings_matches_definition():
    rng = random.Random(2)
    for _ in range(40):
        s = "".join(rng.choice("abc") for _ in range(rng.randint(1, 9)))
        expected = sum(
            1
            for i in range(len(s))
            for j in range(i + 1, len(s) + 1)
            if set(s[i:j]) == {"a", "b", "c"}
        )
        assert number_of_substrings(s) == expected


def test_number_of_substrings_rejects_other_letters():
    with pytest.raises(ValueError):
        number_of_substrings("abd")


def test_largest_good_integer_examples():
    assert largest_good_integer("6777133339") == "777"
    assert largest_good_integer("2300019") == "000"
    assert largest_good_integer("42352338") == ""
    assert largest_good_integer("12") == ""


def test_largest_good_integer_invariant():
    rng = random.Random(3)
    for _ in range(50):
        num = "".join(rng.choice("0123") for _ in range(rng.randint(3, 12)))
        result = largest_good_integer(num)
        triples = {num[i:i + 3] for i in range(len(num) - 2) if len(set(num[i:i + 3])) == 1}
        assert result == max(triples, default="")


def test_min_max_difference_all_nines():
    assert min_max_difference(999) == 999


def test_min_max_difference_example():
    assert min_max_difference(11891) == 99009


def test_is_power_of_three_true():
    assert all(is_power_of_three(3**exponent) for exponent in range(20))


@pytest.mark.parametrize("n", [0, -1, -3, -27, 2, 45, 3**5 + 1])
def test_is_power_of_three_false(n):
    assert is_power_of_three(n) is False


def test_character_replacement_enough_budget():
    assert character_replacement("ABAB", 2) == len("ABAB")
    assert character_replacement("ABCDE", 5) == len("ABCDE")


def test_character_replacement_example():
    assert character_replacement("AABABBA", 1) == 4


def test_character_replacement_no_budget_is_longest_run():
    rng = random.Random(4)
    for _ in range(40):
        s = "".join(rng.choice("AB") for _ in range(rng.randint(1, 10)))
        longest = max(
            j - i
            for i in range(len(s))
            for j in range(i + 1, len(s) + 1)
            if len(set(s[i:j])) == 1
        )
        assert character_replacement(s, 0) == longest
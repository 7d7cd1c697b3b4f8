"""String and decimal-digit puzzles."""

from __future__ import annotations

from collections import Counter


def maximum_69_number(num: int) -> int:
    """Turn the first 6 of a number made of 6s and 9s into a 9."""
    return int(str(num).replace("6", "9", 1))


def number_of_substrings(s: str) -> int:
    """Count substrings of s, made of 'a', 'b' and 'c', that contain all three letters."""
    last = {"a": -1, "b": -1, "c": -1}
    total = 0
    for position, char in enumerate(s):
        if char not in last:
            raise ValueError(f"unexpected character {char!r}")
        last[char] = position
        total += 1 + min(last.values())
    return total


def largest_good_integer(num: str) -> str:
    """Return the largest run of three equal digits in num, or '' if there is none."""
    best = max(
        (c for a, b, c in zip(num, num[1:], num[2:]) if a == b == c),
        default="",
    )
    return best * 3


def min_max_difference(num: int) -> int:
    """Return the gap between the largest and smallest numbers made by remapping one digit."""
    text = str(num)
    target = next((digit for digit in text if digit != "9"), None)
    largest = text.replace(target, "9") if target is not None else text
    smallest = text.replace(text[0], "0")
    return int(largest) - int(smallest)


def is_power_of_three(n: int) -> bool:
    """Tell whether n is a power of three."""
    if n < 1:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter reachable by replacing at most k letters."""
    counts: Counter[str] = Counter()
    left = 0
    best = 0
    max_freq = 0
    for right, char in enumerate(s):
        counts[char] += 1
        max_freq = max(max_freq, counts[char])
        while right - left + 1 - max_freq > k:
            counts[s[left]] -= 1
            max_freq = max(counts.values())
            left += 1
        best = max(best, right - left + 1)
    return best
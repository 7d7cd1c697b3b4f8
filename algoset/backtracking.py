"""Backtracking searches: combination sums and the n-queens puzzle."""

from __future__ import annotations

from typing import List, Sequence, Set


def combination_sum(candidates: Sequence[int], target: int) -> List[List[int]]:
    """Return every combination of candidates, each usable repeatedly, that sums to target."""
    pool = list(candidates)
    results: List[List[int]] = []
    chosen: List[int] = []

    def search(index: int, total: int) -> None:
        if total == target:
            results.append(list(chosen))
            return
        if index == len(pool):
            return
        if total < target:
            chosen.append(pool[index])
            search(index, total + pool[index])
            chosen.pop()
        search(index + 1, total)

    search(0, 0)
    return results


def combination_sum2(candidates: Sequence[int], target: int) -> List[List[int]]:
    """Return every distinct combination of candidates, each used once, that sums to target."""
    pool = sorted(candidates)
    results: List[List[int]] = []
    chosen: List[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if index > start and value == pool[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            search(index + 1, remaining - value)
            chosen.pop()

    search(0, target)
    return results


def solve_n_queens(n: int) -> List[List[str]]:
    """Return every placement of n non-attacking queens on an n-by-n board.

    Each board is a list of rows drawn with 'Q' and '.'.
    """
    board = [["."] * n for _ in range(n)]
    rows: Set[int] = set()
    rising: Set[int] = set()
    falling: Set[int] = set()
    solutions: List[List[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in rows or row + col in rising or row - col in falling:
                continue
            rows.add(row)
            rising.add(row + col)
            falling.add(row - col)
            board[row][col] = "Q"
            place(col + 1)
            board[row][col] = "."
            rows.remove(row)
            rising.remove(row + col)
            falling.remove(row - col)

    place(0)
    return solutions
"""Cheapest sequence of jug moves that leaves a goal amount in jug B."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

MAX_CAPACITY = 1000

FILL_A = "fill A"
FILL_B = "fill B"
EMPTY_A = "empty A"
EMPTY_B = "empty B"
POUR_A_B = "pour A B"
POUR_B_A = "pour B A"

State = tuple[int, int]


@dataclass(frozen=True)
class Solution:
    """The moves that reach the goal and their total cost."""

    steps: tuple[str, ...]
    cost: int

    def __str__(self) -> str:
        return "".join(f"{step}\n" for step in self.steps) + f"success {self.cost}"


@dataclass(frozen=True)
class _Label:
    cost: int
    steps: tuple[str, ...]


@dataclass(frozen=True)
class Jug:
    """Two jugs, a goal amount for jug B and the price of each move."""

    capacity_a: int
    capacity_b: int
    goal: int
    fill_a: int
    fill_b: int
    empty_a: int
    empty_b: int
    pour_ab: int
    pour_ba: int

    def _validate(self) -> None:
        costs = (
            self.fill_a,
            self.fill_b,
            self.empty_a,
            self.empty_b,
            self.pour_ab,
            self.pour_ba,
        )
        if any(cost < 0 for cost in costs):
            raise ValueError("move costs must not be negative")
        if self.capacity_a <= 0:
            raise ValueError("jug A must hold something")
        if self.capacity_a > self.capacity_b:
            raise ValueError("jug A must not be larger than jug B")
        if self.goal > self.capacity_b:
            raise ValueError("goal does not fit in jug B")
        if self.capacity_b > MAX_CAPACITY:
            raise ValueError(f"jug B must hold at most {MAX_CAPACITY}")

    def _moves(self, a: int, b: int) -> Iterator[tuple[str, int, int, int]]:
        """Yield (move, new A, new B, price) for every move possible from (a, b)."""
        cap_a, cap_b = self.capacity_a, self.capacity_b
        if 0 <= a < cap_a:
            yield FILL_A, cap_a, b, self.fill_a
        if 0 <= b < cap_b:
            yield FILL_B, a, cap_b, self.fill_b
        if a != 0:
            yield EMPTY_A, 0, b, self.empty_a
        if b != 0:
            yield EMPTY_B, a, 0, self.empty_b
        if a != 0 and b != cap_b:
            if a + b > cap_b:
                yield POUR_A_B, a - (cap_b - b), cap_b, self.pour_ab
            else:
                yield POUR_A_B, 0, a + b, self.pour_ab
        if b != 0 and a != cap_a:
            if a + b > cap_a:
                yield POUR_B_A, cap_a, b - (cap_a - a), self.pour_ba
            else:
                yield POUR_B_A, a + b, 0, self.pour_ba

    def solve(self) -> Solution | None:
        """Return the cheapest way to leave jug A empty and ``goal`` in jug B.

        Returns None when the goal cannot be reached; raises ValueError
        when the jugs or costs are not valid.
        """
        self._validate()
        start: State = (0, 0)
        best: dict[State, _Label] = {start: _Label(0, ())}
        stack: list[tuple[State, Iterator[tuple[str, int, int, int]]]] = [
            (start, self._moves(*start))
        ]
        while stack:
            state, moves = stack[-1]
            move = next(moves, None)
            if move is None:
                stack.pop()
                continue
            name, a, b, price = move
            here = best[state]
            cost = here.cost + price
            target = (a, b)
            known = best.get(target)
            if known is not None and known.cost <= cost:
                continue
            best[target] = _Label(cost, here.steps + (name,))
            stack.append((target, self._moves(a, b)))

        found = best.get((0, self.goal))
        if found is None:
            return None
        return Solution(found.steps, found.cost)


def _solution_text(jug: Jug) -> tuple[bool, str]:
    try:
        solution = jug.solve()
    except ValueError:
        return False, ""
    if solution is None:
        return False, ""
    return True, str(solution)


def main(argv: list[str] | None = None) -> int:
    """Solve two sample puzzles and print their moves."""
    ok, first = _solution_text(Jug(3, 5, 4, 1, 2, 3, 4, 5, 6))
    if not ok:
        print("Error 3")
    print(first)
    print()
    ok, second = _solution_text(Jug(3, 5, 4, 1, 1, 1, 1, 1, 2))
    if not ok:
        print("Error 3")
    print(second)
    return 0
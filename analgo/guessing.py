"""Guess-the-number game where the player reveals only the parity of the number."""

from __future__ import annotations

import argparse
import enum
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

LOW = 0
HIGH = 100
ROUNDS = 5

CORRECT = 0
HIGHER = 1
LOWER = 2

_GUESS_PROMPT = (
    "\nTu numero es: {} \n0 -> Si es tu numero \n1 -> Es mayor \n2 -> Es menor\n\n"
)


class Parity(enum.Enum):
    """Parity of the hidden number; the values are the codes the player types."""

    ODD = 1
    EVEN = 2

    @classmethod
    def from_code(cls, code: int) -> Parity:
        """Code 1 means odd; anything else means even."""
        return cls.ODD if code == cls.ODD.value else cls.EVEN


@dataclass(frozen=True)
class GuessStats:
    """Summary of several rounds: worst, best and mean number of re-guesses."""

    worst: int
    best: int
    average: float


def random_with_parity(
    low: int, high: int, parity: Parity, rng: random.Random | None = None
) -> int:
    """Return a uniformly chosen number in [low, high] with the given parity."""
    rng = rng if rng is not None else random.Random()
    remainder = 1 if parity is Parity.ODD else 0
    first = low if low % 2 == remainder else low + 1
    if first > high:
        raise ValueError(f"no {parity.name.lower()} number between {low} and {high}")
    return rng.choice(range(first, high + 1, 2))


def play_round(
    parity: Parity,
    answer: Callable[[int], int],
    rng: random.Random | None = None,
    low: int = LOW,
    high: int = HIGH,
) -> int:
    """Play one round and return how many times the guess had to be changed.

    *answer* receives each guess and replies 0 (correct), 1 (the number is
    higher) or 2 (the number is lower); any other reply repeats the question.
    Contradictory answers raise ValueError once no candidate is left.
    """
    rng = rng if rng is not None else random.Random()
    guess = random_with_parity(low, high, parity, rng)
    changes = 0
    while True:
        reply = answer(guess)
        if reply == CORRECT:
            return changes
        if reply == HIGHER:
            low = guess + 1
        elif reply == LOWER:
            high = guess - 1
        else:
            continue
        guess = random_with_parity(low, high, parity, rng)
        changes += 1


def summarize(counts: Sequence[int]) -> GuessStats:
    """Summarize round counts.

    Both extremes start from zero before the counts are folded in, so the
    best case never rises above zero.
    """
    if not counts:
        raise ValueError("no rounds to summarize")
    return GuessStats(
        worst=max(0, *counts),
        best=min(0, *counts),
        average=sum(counts) / len(counts),
    )


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Play several interactive rounds on standard input and print the summary."""
    parser = argparse.ArgumentParser(
        prog="analgo-guess", description="Guess a number knowing only its parity."
    )
    parser.add_argument("--rounds", type=int, default=ROUNDS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.rounds < 1:
        parser.error("--rounds must be at least 1")

    rng = random.Random(args.seed)
    counts = []
    for round_number in range(1, args.rounds + 1):
        print(f"\nIteracion: {round_number} \nElige un numero entre el {LOW} y el {HIGH}")
        parity = Parity.from_code(_read_int("Indica si es impar(1) par(2): "))
        count = play_round(
            parity, lambda guess: _read_int(_GUESS_PROMPT.format(guess)), rng
        )
        print(f"\nEl numero de iteraciones fueron: {count}\n")
        counts.append(count)

    stats = summarize(counts)
    print(
        f"\n\nEl peor caso fue: {stats.worst} \nEl mejor caso fue: {stats.best} "
        f"\nEl promedio fue: {stats.average:0.3f}\n"
    )
    return 0
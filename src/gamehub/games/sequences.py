"""Sequence Sprint puzzle generator — twenty integer-sequence families.

The family is picked deterministically from the level; starting values and
coefficients come from the injected ``random.Random`` so a seeded generator
reproduces the same puzzle.

Levels 20 and above all map to the last family (tetrahedral numbers).
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from functools import partial

from gamehub.games.schemas import Pattern

# Sequence type tags (also the hint lookup keys)
ARITHMETIC = "arithmetic"
GEOMETRIC = "geometric"
POWERS = "powers"
SQUARES = "squares"
FIBONACCI = "fibonacci"
TRIBONACCI = "tribonacci"
LUCAS = "lucas"
ALTERNATING = "alternating"
POLYNOMIAL = "polynomial"
FACTORIAL = "factorial"
PRIME = "prime"
CATALAN = "catalan"
COLLATZ = "collatz"
DIGITAL_ROOT = "digital-root"
MODULAR = "modular"
HEXAGONAL = "hexagonal"
CENTERED_TRIANGLE = "centered-triangle"
CUBIC = "cubic"
TETRAHEDRAL = "tetrahedral"

PATTERN_TYPES: tuple[str, ...] = (
    ARITHMETIC, GEOMETRIC, POWERS, SQUARES, FIBONACCI, TRIBONACCI, LUCAS,
    ALTERNATING, POLYNOMIAL, FACTORIAL, PRIME, CATALAN, COLLATZ, DIGITAL_ROOT,
    MODULAR, HEXAGONAL, CENTERED_TRIANGLE, CUBIC, TETRAHEDRAL,
)

FACTORIAL_CAP = 7
PRIME_CAP = 20
# 20 displayable primes plus the one that follows them
PRIMES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73,
)
CATALAN_NUMBERS: tuple[int, ...] = (1, 1, 2, 5, 14, 42, 132, 429)

Generator = Callable[[int, int, random.Random], Pattern]


def _recurrence(seed: list[int], length: int, order: int) -> tuple[list[int], int]:
    """Extend ``seed`` by summing the previous ``order`` terms; return (terms, next)."""
    terms = list(seed)
    while len(terms) <= length:
        terms.append(sum(terms[-order:]))
    return terms[:length], terms[length]


def _collatz_step(n: int) -> int:
    return n // 2 if n % 2 == 0 else n * 3 + 1


def _digital_root(n: int) -> int:
    while n >= 10:
        n = sum(int(digit) for digit in str(n))
    return n


def generate_arithmetic(
    level: int, length: int, rng: random.Random, allow_negative: bool = False,
) -> Pattern:
    start = rng.randint(1, level * 2)
    diff = rng.randint(1, level)
    if allow_negative:
        diff *= rng.choice((1, -1))
    verb = "Add" if diff > 0 else "Subtract"
    return Pattern(
        numbers=tuple(start + i * diff for i in range(length)),
        answer=start + length * diff,
        description=f"{verb} {abs(diff)} each time",
        type=ARITHMETIC,
    )


def generate_geometric(level: int, length: int, rng: random.Random) -> Pattern:
    start = rng.randint(1, 5)
    ratio = rng.randint(2, 4)
    return Pattern(
        numbers=tuple(start * ratio**i for i in range(length)),
        answer=start * ratio**length,
        description=f"Multiply by {ratio} each time",
        type=GEOMETRIC,
    )


def generate_powers(level: int, length: int, rng: random.Random) -> Pattern:
    base = rng.randint(2, 4)
    return Pattern(
        numbers=tuple(base**i for i in range(1, length + 1)),
        answer=base ** (length + 1),
        description=f"Powers of {base}",
        type=POWERS,
    )


def generate_squares(level: int, length: int, rng: random.Random) -> Pattern:
    start = rng.randint(1, 5)
    return Pattern(
        numbers=tuple((start + i) ** 2 for i in range(length)),
        answer=(start + length) ** 2,
        description="Perfect squares sequence",
        type=SQUARES,
    )


def generate_fibonacci(level: int, length: int, rng: random.Random) -> Pattern:
    numbers, answer = _recurrence([rng.randint(1, 3), rng.randint(1, 3)], length, order=2)
    return Pattern(
        numbers=tuple(numbers),
        answer=answer,
        description="Fibonacci-like sequence",
        type=FIBONACCI,
    )


def generate_tribonacci(level: int, length: int, rng: random.Random) -> Pattern:
    numbers, answer = _recurrence([1, 1, 2], length, order=3)
    return Pattern(
        numbers=tuple(numbers),
        answer=answer,
        description="Sum of previous three numbers",
        type=TRIBONACCI,
    )


def generate_lucas(level: int, length: int, rng: random.Random) -> Pattern:
    numbers, answer = _recurrence([2, 1], length, order=2)
    return Pattern(
        numbers=tuple(numbers),
        answer=answer,
        description="Lucas sequence",
        type=LUCAS,
    )


def generate_alternating(level: int, length: int, rng: random.Random) -> Pattern:
    base = rng.randint(5, 14)
    diff = rng.randint(2, 6)

    def term(i: int) -> int:
        return base + i * diff if i % 2 == 0 else base - i * diff

    return Pattern(
        numbers=tuple(term(i) for i in range(length)),
        answer=term(length),
        description="Alternating add/subtract pattern",
        type=ALTERNATING,
    )


def generate_polynomial(level: int, length: int, rng: random.Random) -> Pattern:
    a = rng.randint(1, 3)
    b = rng.randint(0, 4)
    c = rng.randint(0, 4)

    def term(i: int) -> int:
        return a * i * i + b * i + c

    return Pattern(
        numbers=tuple(term(i) for i in range(1, length + 1)),
        answer=term(length + 1),
        description="Quadratic sequence",
        type=POLYNOMIAL,
    )


def generate_factorial(level: int, length: int, rng: random.Random) -> Pattern:
    numbers = tuple(math.factorial(i) for i in range(1, min(length, FACTORIAL_CAP) + 1))
    return Pattern(
        numbers=numbers,
        answer=math.factorial(len(numbers) + 1),
        description="Factorial sequence (n!)",
        type=FACTORIAL,
    )


def generate_prime(level: int, length: int, rng: random.Random) -> Pattern:
    numbers = PRIMES[: min(length, PRIME_CAP)]
    return Pattern(
        numbers=numbers,
        answer=PRIMES[len(numbers)],
        description="Prime numbers sequence",
        type=PRIME,
    )


def generate_catalan(level: int, length: int, rng: random.Random) -> Pattern:
    return Pattern(
        numbers=CATALAN_NUMBERS[: min(length, len(CATALAN_NUMBERS))],
        answer=CATALAN_NUMBERS[min(length, len(CATALAN_NUMBERS) - 1)],
        description="Catalan numbers",
        type=CATALAN,
    )


def generate_collatz(level: int, length: int, rng: random.Random) -> Pattern:
    value = rng.randint(10, 29)
    numbers = [value]
    while len(numbers) < length and value != 1:
        value = _collatz_step(value)
        numbers.append(value)
    return Pattern(
        numbers=tuple(numbers),
        answer=_collatz_step(numbers[-1]),
        description="Collatz conjecture sequence",
        type=COLLATZ,
    )


def generate_digital_root(level: int, length: int, rng: random.Random) -> Pattern:
    current = rng.randint(10, 109)
    numbers = []
    for _ in range(length):
        numbers.append(current)
        current = _digital_root(current) * 10 + rng.randint(0, 9)
    return Pattern(
        numbers=tuple(numbers),
        answer=numbers[-1] + 11,  # simplified continuation, not a digital-root rule
        description="Digital root pattern",
        type=DIGITAL_ROOT,
    )


def generate_modular(level: int, length: int, rng: random.Random) -> Pattern:
    mod = rng.randint(3, 7)
    multiplier = rng.randint(2, 4)
    return Pattern(
        numbers=tuple((i * multiplier) % mod for i in range(1, length + 1)),
        answer=((length + 1) * multiplier) % mod,
        description=f"Modular arithmetic (mod {mod})",
        type=MODULAR,
    )


def _closed_form(
    formula: Callable[[int], int], description: str, pattern_type: str,
) -> Generator:
    """Generator for a family defined by a 1-indexed closed-form term."""

    def generate(level: int, length: int, rng: random.Random) -> Pattern:
        return Pattern(
            numbers=tuple(formula(i) for i in range(1, length + 1)),
            answer=formula(length + 1),
            description=description,
            type=pattern_type,
        )

    return generate


generate_hexagonal = _closed_form(
    lambda i: i * (2 * i - 1), "Hexagonal number sequence", HEXAGONAL,
)
generate_centered_triangle = _closed_form(
    lambda i: (3 * i * i - 3 * i + 2) // 2, "Centered triangular numbers", CENTERED_TRIANGLE,
)
generate_cubic = _closed_form(lambda i: i**3, "Cubic number sequence", CUBIC)
generate_tetrahedral = _closed_form(
    lambda i: i * (i + 1) * (i + 2) // 6, "Tetrahedral number sequence", TETRAHEDRAL,
)

# One entry per level 1..20; order matters
ORDERED_GENERATORS: tuple[Generator, ...] = (
    generate_arithmetic,
    partial(generate_arithmetic, allow_negative=True),
    generate_geometric,
    generate_powers,
    generate_squares,
    generate_fibonacci,
    generate_tribonacci,
    generate_lucas,
    generate_alternating,
    generate_polynomial,
    generate_factorial,
    generate_prime,
    generate_catalan,
    generate_collatz,
    generate_digital_root,
    generate_modular,
    generate_hexagonal,
    generate_centered_triangle,
    generate_cubic,
    generate_tetrahedral,
)


def pattern_index(level: int) -> int:
    """Table index for a level; saturates at the last family."""
    return max(0, min(level - 1, len(ORDERED_GENERATORS) - 1))


def generate_sequence_pattern(
    level: int, length: int, rng: random.Random | None = None,
) -> Pattern:
    """Generate a puzzle of ``length`` terms for ``level``.

    ``length`` below 1 is treated as 1. Factorial, prime and Catalan
    families cap their term count; Collatz stops early when it reaches 1.
    """
    if rng is None:
        rng = random.Random()  # noqa: S311
    generator = ORDERED_GENERATORS[pattern_index(level)]
    return generator(max(level, 1), max(length, 1), rng)

"""Sequence Sprint hints, keyed by pattern type."""

from __future__ import annotations

DEFAULT_HINT = "Look for mathematical relationships between the numbers"

HINTS: dict[str, str] = {
    "arithmetic": "Look for a constant difference between consecutive numbers",
    "geometric": "Check if each number is multiplied by the same value",
    "fibonacci": "Each number might be the sum of previous numbers",
    "powers": "Consider exponential growth patterns",
    "squares": "Think about perfect squares",
    "prime": "These might be prime numbers",
    "factorial": "Consider factorial sequences (n!)",
    "alternating": "Look for alternating patterns",
    "polynomial": "This might follow a quadratic pattern",
    "tribonacci": "Each number is the sum of the three preceding ones",
    "lucas": "Similar to Fibonacci but with different starting values",
    "catalan": "These are Catalan numbers",
    "collatz": "Apply the 3n+1 rule for odd numbers, n/2 for even",
    "digital-root": "Consider the sum of digits",
    "modular": "Look for patterns in remainders",
}


def get_hint(pattern_type: str) -> str:
    return HINTS.get(pattern_type, DEFAULT_HINT)

"""Small number puzzles: reversed sums, powers, divisors and the like."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

SECONDS_PER_DAY = 86400


def reverse_digits(number: int) -> int:
    """Return the number with its decimal digits reversed; zeros at the end are lost."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def add_reversed(a: int, b: int) -> int:
    """Reverse both numbers, add them and reverse the sum."""
    return reverse_digits(reverse_digits(a) + reverse_digits(b))


def add_reversed_trimmed(a: int, b: int) -> int:
    """Add reversed numbers, reading digits only up to the first place where both are zero.

    The sum is reversed only up to its first zero digit from the right.
    """
    if a < 0 or b < 0:
        raise ValueError("numbers must not be negative")
    first = second = 0
    while a % 10 != 0 or b % 10 != 0:
        if a != 0:
            first = 10 * first + a % 10
        if b != 0:
            second = 10 * second + b % 10
        a //= 10
        b //= 10
    total = first + second
    result = 0
    while total % 10 != 0:
        result = 10 * result + total % 10
        total //= 10
    return result


def palindrome_steps(number: int) -> tuple[int, int]:
    """Add the reverse until a palindrome appears; return it and the number of additions."""
    steps = 0
    while True:
        reversed_number = reverse_digits(number)
        if reversed_number == number:
            return number, steps
        number += reversed_number
        steps += 1


def last_digit_of_power(base: int, exponent: int) -> int:
    """Return the last decimal digit of ``base ** exponent``."""
    if base < 0 or exponent < 0:
        raise ValueError("base and exponent must not be negative")
    if exponent == 0:
        return 1
    digit = base % 10
    if exponent == 1 or digit in (1, 5, 6):
        return digit
    if digit in (2, 3, 7, 8):
        exponent = exponent % 4 + 4
    elif digit in (4, 9):
        exponent = exponent % 2 + 2
    return pow(digit, exponent, 10)


def cookie_boxes(eating_times: Iterable[int], box_size: int) -> int:
    """Boxes needed for a day of eating, one cookie per given number of seconds each."""
    if box_size <= 0:
        raise ValueError("box size must be positive")
    cookies = 0
    for seconds in eating_times:
        if seconds <= 0:
            raise ValueError("eating time must be positive")
        cookies += SECONDS_PER_DAY // seconds
    return -(-cookies // box_size)


def prime_factors(number: int) -> list[int]:
    """Return the prime factors in ascending order; 0 and 1 have none."""
    if number < 0:
        raise ValueError("number must not be negative")
    factors: list[int] = []
    divisor = 2
    while number > 1:
        if divisor * divisor > number:
            factors.append(number)
            break
        if number % divisor == 0:
            factors.append(divisor)
            number //= divisor
        else:
            divisor += 1
    return factors


def gcd_by_factors(a: int, b: int) -> int:
    """Product of the prime factors the two numbers share."""
    common = Counter(prime_factors(a)) & Counter(prime_factors(b))
    return math.prod(common.elements())


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transposed matrix."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("rows differ in length")
    return [list(column) for column in zip(*matrix)]


def wow(count: int) -> str:
    """Return 'W', then ``count`` letters 'o', then 'w'."""
    return "W" + "o" * count + "w"


def binary_to_decimal(binary: int) -> int:
    """Read an integer written with binary digits as a decimal number; odd digits count as ones."""
    if binary < 0:
        raise ValueError("number must not be negative")
    return sum(1 << pos for pos, ch in enumerate(reversed(str(binary))) if int(ch) % 2)


def larger_reversed(a: int, b: int) -> int:
    """Return the larger of the two numbers after reversing their digits."""
    return max(reverse_digits(a), reverse_digits(b))


def lcm(a: int, b: int) -> int:
    """Least common multiple by Euclid's algorithm."""
    product = a * b
    while b != 0:
        a, b = b, a % b
    return product // a


def quadratic_root_count(a: float, b: float, c: float) -> int:
    """Number of real roots of ``a*x*x + b*x + c`` judged by the discriminant."""
    delta = b * b - 4 * a * c
    if math.isnan(delta):
        raise ValueError("coefficients must be numbers")
    if delta < 0:
        return 0
    if delta == 0:
        return 1
    return 2
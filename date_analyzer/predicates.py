"""Number-theoretic predicates applied to every candidate"""
import math
from typing import Dict

MIN_POWER = 2
MAX_POWER = 9


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def is_palindrome(n: int) -> bool:
    text = str(n)
    return text == text[::-1]


def is_perfect_power(n: int) -> Dict[str, int]:
    """Finds the smallest power p in 2..9 with n == base ** p.

    Returns ``{'is_power': True, 'base': base, 'power': p}`` on a match,
    ``{'is_power': False}`` otherwise.
    """
    if n < 0:
        return {'is_power': False}

    for power in range(MIN_POWER, MAX_POWER + 1):
        root = round(n ** (1 / power))
        # float roots can land one off for large exact powers
        for base in (root, root - 1, root + 1):
            if base >= 0 and base ** power == n:
                return {'is_power': True, 'base': base, 'power': power}
    return {'is_power': False}


def is_narcissistic(n: int) -> bool:
    """Sum of digits, each raised to the digit count, equals n"""
    digits = [int(digit) for digit in str(n)]
    count = len(digits)
    return sum(digit ** count for digit in digits) == n

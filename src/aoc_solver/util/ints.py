"""Integer number theory helpers."""

from typing import Optional, Sequence, Tuple

Congruence = Tuple[int, int]


def modulus(a: int, n: int) -> int:
    """Remainder of ``a`` modulo ``|n|``, always non-negative."""
    n = abs(n)
    return ((a % n) + n) % n


def gcd(a: int, b: int) -> int:
    x, y = extended_euclidean(a, b)
    return a * x + b * y


def extended_euclidean(a: int, b: int) -> Tuple[int, int]:
    """Return the Bézout coefficients ``(x, y)`` with ``a*x + b*y == gcd(a, b)``."""
    if a < 0:
        x, y = extended_euclidean(-a, b)
        return -x, y
    if b < 0:
        x, y = extended_euclidean(a, -b)
        return x, -y
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_s, old_t


def solve_congruences(congruences: Sequence[Congruence]) -> Optional[Congruence]:
    """Solve a system of congruences ``x = a (mod n)``.

    Moduli need not be coprime.

    Args:
        congruences: Pairs ``(a, n)``

    Returns:
        ``(b, m)`` such that the solutions are exactly ``x = b (mod m)``, or
        None if the system is empty or inconsistent
    """
    if not congruences:
        return None
    acc = congruences[0]
    for congruence in congruences[1:]:
        acc = _solve_congruence_pair(acc, congruence)
        if acc is None:
            return None
    return acc


def _solve_congruence_pair(first: Congruence, second: Congruence) -> Optional[Congruence]:
    a, n = first
    b, m = second
    x, y = extended_euclidean(n, m)
    divisor = n * x + m * y
    # a and b must agree modulo gcd(n, m)
    if (a - b) % divisor != 0:
        return None
    lcm = m // divisor * n
    # x0 = a + n * k where n*k = b - a (mod m)
    k = (b - a) // divisor * x
    return modulus(a + n * k, lcm), lcm

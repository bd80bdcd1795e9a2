from __future__ import annotations

import math
from dataclasses import dataclass

from erato.domain.u64 import check_u64
from erato.ports.primality_test import PrimalityTest


@dataclass(frozen=True, slots=True)
class SieveAlgorithm(PrimalityTest):
    """Exact trial division over 6k +/- 1 candidates up to isqrt(n).

    Time is O(sqrt(n)) with O(1) space; best suited to values below ten million.
    """

    def name(self) -> str:
        return "Sieve of Eratosthenes"

    def is_prime(self, n: int) -> bool:
        return is_prime_sieve(n)


def is_prime_sieve(n: int) -> bool:
    check_u64(n)
    # 0 and 1 are not prime by convention.
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    # Every prime above 3 is 6k - 1 or 6k + 1.
    limit = math.isqrt(n)
    for d in range(5, limit + 1, 6):
        if n % d == 0 or n % (d + 2) == 0:
            return False
    return True

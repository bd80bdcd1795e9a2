"""Interchangeable primality tests for unsigned 64-bit integers.

Each algorithm is available as a standalone ``is_prime_<algorithm>`` function and
as a ``PrimalityTest`` instance that a ``PrimalityRegistry`` can enumerate.
"""

from erato.algorithms import (
    DETERMINISTIC_WITNESSES,
    MillerRabinAlgorithm,
    PrimalityRegistry,
    SieveAlgorithm,
    UnknownAlgorithmError,
    ZetaAlgorithm,
    is_prime_miller_rabin,
    is_prime_sieve,
    is_prime_zeta,
)
from erato.domain import U64_MAX, U64RangeError
from erato.ports import PrimalityTest


def is_prime(n: int) -> bool:
    # Library default test.
    return is_prime_zeta(n)


__all__ = [
    "DETERMINISTIC_WITNESSES",
    "MillerRabinAlgorithm",
    "PrimalityRegistry",
    "PrimalityTest",
    "SieveAlgorithm",
    "U64RangeError",
    "U64_MAX",
    "UnknownAlgorithmError",
    "ZetaAlgorithm",
    "is_prime",
    "is_prime_miller_rabin",
    "is_prime_sieve",
    "is_prime_zeta",
]

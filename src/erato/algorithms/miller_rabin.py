from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from erato.domain.u64 import check_u64
from erato.ports.primality_test import PrimalityTest

# The first twelve primes as witnesses make the test exact for every n < 3.3 * 10**24,
# which covers the whole unsigned 64-bit range.
DETERMINISTIC_WITNESSES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
DEFAULT_ROUNDS = 20


@dataclass(frozen=True, slots=True)
class MillerRabinAlgorithm(PrimalityTest):
    """Miller-Rabin strong probable-prime test.

    With ``rounds >= len(DETERMINISTIC_WITNESSES)`` (the default) the test is exact
    for all 64-bit inputs. Fewer rounds use a fixed prefix of the witness set and
    are not exact: strong pseudoprimes to those bases (2047 for ``rounds=1``,
    1373653 for ``rounds=2``) are always reported prime.
    """

    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError("Miller-Rabin rounds must be >= 1")

    def name(self) -> str:
        return "Miller-Rabin"

    def is_prime(self, n: int) -> bool:
        return is_prime_miller_rabin(n, self.rounds)


def is_prime_miller_rabin(
    n: int,
    rounds: int = DEFAULT_ROUNDS,
    *,
    witnesses: Sequence[int] | None = None,
) -> bool:
    """Return True if n passes Miller-Rabin for every selected witness.

    Witnesses are ``witnesses`` when given, otherwise the first ``rounds`` entries of
    ``DETERMINISTIC_WITNESSES``. The witness list for a round count is always a prefix
    of the list for any larger count, so raising ``rounds`` never turns a composite
    verdict into a prime one.
    """
    check_u64(n)
    bases = _select_witnesses(rounds, witnesses)

    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    d, s = _decompose(n - 1)
    for a in bases:
        a %= n
        if a == 0:
            continue
        if not _passes_witness(a, d, s, n):
            return False
    return True


def _select_witnesses(rounds: int, witnesses: Sequence[int] | None) -> tuple[int, ...]:
    if witnesses is not None:
        bases = tuple(witnesses)
        if not bases:
            raise ValueError("Miller-Rabin witness set must not be empty")
        return bases
    if rounds < 1:
        raise ValueError("Miller-Rabin rounds must be >= 1")
    return DETERMINISTIC_WITNESSES[:rounds]


def _decompose(m: int) -> tuple[int, int]:
    # m = d * 2**s with d odd; m is even and positive here.
    s = 0
    while m % 2 == 0:
        m //= 2
        s += 1
    return m, s


def _passes_witness(a: int, d: int, s: int, n: int) -> bool:
    # Python ints are unbounded, so a*a never wraps before the reduction mod n.
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False

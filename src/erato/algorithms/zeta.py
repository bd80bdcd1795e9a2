from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from erato.algorithms.miller_rabin import DETERMINISTIC_WITNESSES, is_prime_miller_rabin
from erato.domain.u64 import check_u64
from erato.ports.primality_test import PrimalityTest

# Imaginary parts of the first 50 non-trivial zeros of zeta(s) on the critical line.
# Under RH each zero is 1/2 + i*gamma; gamma sets an oscillation frequency in the
# explicit formula for psi(x). Fixed literals, built once at import.
ZETA_ZEROS: tuple[float, ...] = (
    14.134725142, 21.022039639, 25.010857580, 30.424876126, 32.935061588,
    37.586178159, 40.918719012, 43.327073281, 48.005150881, 49.773832478,
    52.970321478, 56.446247697, 59.347044003, 60.831778525, 65.112544048,
    67.079810529, 69.546401711, 72.067157674, 75.704690699, 77.144840069,
    79.337375020, 82.910380854, 84.735492981, 87.425274613, 88.809111208,
    92.491899271, 94.651344041, 95.870634228, 98.831194218, 101.317851006,
    103.725538040, 105.446623052, 107.168611184, 111.029535543, 111.874659177,
    114.320220915, 116.226680321, 118.790782866, 121.370125002, 122.946829294,
    124.256818554, 127.516683880, 129.578704200, 131.087688531, 133.497737203,
    134.756509753, 138.116042055, 139.736208952, 141.123707404, 143.111845808,
)

COHERENCE_THRESHOLD = 0.0

# Screening primes for the composite-leaning path.
_SMALL_PRIMES: tuple[int, ...] = (
    3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)
# Smallest prime above the screening table; an odd n below its square with no
# small factor is prime.
_SCREEN_BOUND = 101 * 101
# Trial divisors tried by the deep screen before falling back to witnesses.
DEEP_SCREEN_LIMIT = 5_000


class VerificationStrategy(str, Enum):
    # Coherent signature: go straight to the deterministic witness pass.
    WITNESS_FIRST = "witness_first"
    # Incoherent score but the oscillation peaks at n: cheap small-prime screen first.
    SMALL_FACTORS_FIRST = "small_factors_first"
    # Incoherent score and flat oscillation: trial-divide up to DEEP_SCREEN_LIMIT first.
    DEEP_SCREEN_FIRST = "deep_screen_first"


@dataclass(frozen=True, slots=True)
class ZetaAlgorithm(PrimalityTest):
    """Spectral pre-filter over zeta zeros, finished by exact verification.

    The coherence score and the local oscillation shape only pick the order of the
    exact checks; the verdict is always the one an exact test would give.
    """

    def name(self) -> str:
        return "Riemann Zeta"

    def is_prime(self, n: int) -> bool:
        return is_prime_zeta(n)


def is_prime_zeta(n: int) -> bool:
    check_u64(n)
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    score = coherence_score(n)
    # The extremum check costs three oscillation sums; only the incoherent branch needs it.
    extremum = score < COHERENCE_THRESHOLD and is_local_extremum(n)
    return _verify(n, choose_strategy(score, local_extremum=extremum))


def coherence_score(n: int) -> float:
    """Sum of cos(gamma * ln n) over the zero table; lies in [-50, 50]."""
    if n < 1:
        raise ValueError("coherence_score requires n >= 1")
    log_n = math.log(n)
    return math.fsum(math.cos(gamma * log_n) for gamma in ZETA_ZEROS)


def choose_strategy(score: float, *, local_extremum: bool = False) -> VerificationStrategy:
    if score >= COHERENCE_THRESHOLD:
        return VerificationStrategy.WITNESS_FIRST
    if local_extremum:
        return VerificationStrategy.SMALL_FACTORS_FIRST
    return VerificationStrategy.DEEP_SCREEN_FIRST


def zeta_oscillation(x: float, num_zeros: int = len(ZETA_ZEROS)) -> float:
    """Oscillatory term of the explicit formula at x, normalised by sqrt(x).

    Computes sum(cos(gamma * ln x) / sqrt(gamma**2 + 1/4)) / sqrt(x) over the first
    ``num_zeros`` zeros (capped at the table size).
    """
    if x <= 0:
        raise ValueError("zeta_oscillation requires x > 0")
    log_x = math.log(x)
    terms = (
        math.cos(gamma * log_x) / math.sqrt(gamma * gamma + 0.25)
        for gamma in ZETA_ZEROS[: max(num_zeros, 0)]
    )
    return math.fsum(terms) / math.sqrt(x)


def oscillation_zeros(n: int) -> int:
    # Larger n resolve finer structure, so more zeros contribute.
    if n < 1_000:
        return 20
    if n < 10_000:
        return 30
    return 40


def is_local_extremum(n: int) -> bool:
    """True if the oscillation at n is strictly above or below both neighbours.

    Near 2**64 the neighbours round to the same float, so the answer is False there.
    """
    if n < 2:
        raise ValueError("is_local_extremum requires n >= 2")
    num_zeros = oscillation_zeros(n)
    x = float(n)
    here = zeta_oscillation(x, num_zeros)
    before = zeta_oscillation(x - 1.0, num_zeros)
    after = zeta_oscillation(x + 1.0, num_zeros)
    return (here > before and here > after) or (here < before and here < after)


def _verify(n: int, strategy: VerificationStrategy) -> bool:
    # n is odd and >= 5 here.
    if strategy is VerificationStrategy.SMALL_FACTORS_FIRST:
        for p in _SMALL_PRIMES:
            if n == p:
                return True
            if n % p == 0:
                return False
        if n < _SCREEN_BOUND:
            return True
    elif strategy is VerificationStrategy.DEEP_SCREEN_FIRST:
        if n % 3 == 0:
            return False
        root = math.isqrt(n)
        limit = min(root, DEEP_SCREEN_LIMIT)
        for d in range(5, limit + 1, 6):
            if n % d == 0 or n % (d + 2) == 0:
                return False
        if root <= DEEP_SCREEN_LIMIT:
            return True
    return is_prime_miller_rabin(n, witnesses=DETERMINISTIC_WITNESSES)

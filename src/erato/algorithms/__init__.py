from erato.algorithms.miller_rabin import (
    DETERMINISTIC_WITNESSES,
    MillerRabinAlgorithm,
    is_prime_miller_rabin,
)
from erato.algorithms.sieve import SieveAlgorithm, is_prime_sieve
from erato.algorithms.zeta import (
    DEEP_SCREEN_LIMIT,
    ZETA_ZEROS,
    VerificationStrategy,
    ZetaAlgorithm,
    choose_strategy,
    coherence_score,
    is_local_extremum,
    is_prime_zeta,
    oscillation_zeros,
    zeta_oscillation,
)
from erato.algorithms.registry import PrimalityRegistry, UnknownAlgorithmError

__all__ = [
    "DEEP_SCREEN_LIMIT",
    "DETERMINISTIC_WITNESSES",
    "MillerRabinAlgorithm",
    "PrimalityRegistry",
    "SieveAlgorithm",
    "UnknownAlgorithmError",
    "VerificationStrategy",
    "ZETA_ZEROS",
    "ZetaAlgorithm",
    "choose_strategy",
    "coherence_score",
    "is_local_extremum",
    "is_prime_miller_rabin",
    "is_prime_sieve",
    "is_prime_zeta",
    "oscillation_zeros",
    "zeta_oscillation",
]

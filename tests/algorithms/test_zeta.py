from __future__ import annotations

import math

import pytest

from erato.algorithms.zeta import (
    COHERENCE_THRESHOLD,
    ZETA_ZEROS,
    VerificationStrategy,
    ZetaAlgorithm,
    _verify,
    choose_strategy,
    coherence_score,
    is_local_extremum,
    is_prime_zeta,
    oscillation_zeros,
    zeta_oscillation,
)
from erato.algorithms import zeta as zeta_module
from erato.algorithms.sieve import is_prime_sieve
from erato.domain.u64 import U64_MAX, U64RangeError


def _reference_flags(limit: int) -> list[bool]:
    flags = [True] * (limit + 1)
    flags[0] = flags[1] = False
    for p in range(2, int(limit**0.5) + 1):
        if flags[p]:
            flags[p * p :: p] = [False] * len(range(p * p, limit + 1, p))
    return flags


def test_zeta_scenarios() -> None:
    assert is_prime_zeta(1_000_000_007) is True
    assert is_prime_zeta(1_000_000_008) is False
    assert is_prime_zeta(0) is False
    assert is_prime_zeta(1) is False
    assert is_prime_zeta(2) is True
    assert is_prime_zeta(3) is True
    assert is_prime_zeta(13) is True
    assert is_prime_zeta(100) is False


def test_zeta_is_exact_up_to_one_million() -> None:
    # The spectral score never overrides exact verification.
    flags = _reference_flags(1_000_000)
    for n in range(1_000_001):
        assert is_prime_zeta(n) is flags[n], n


def test_zero_table_is_fixed_and_increasing() -> None:
    assert len(ZETA_ZEROS) == 50
    assert isinstance(ZETA_ZEROS, tuple)
    assert ZETA_ZEROS[0] == pytest.approx(14.134725142)
    assert ZETA_ZEROS[-1] == pytest.approx(143.111845808)
    assert all(a < b for a, b in zip(ZETA_ZEROS, ZETA_ZEROS[1:]))


def test_coherence_score_is_bounded_sum_of_cosines() -> None:
    # ln(1) = 0 puts every term at cos(0) = 1.
    assert coherence_score(1) == pytest.approx(50.0)
    for n in (5, 97, 1_000_000_007, U64_MAX):
        score = coherence_score(n)
        assert -50.0 <= score <= 50.0
        expected = sum(math.cos(gamma * math.log(n)) for gamma in ZETA_ZEROS)
        assert score == pytest.approx(expected, abs=1e-9)
    with pytest.raises(ValueError):
        coherence_score(0)


def test_choose_strategy_splits_on_threshold_and_extremum() -> None:
    assert choose_strategy(COHERENCE_THRESHOLD) is VerificationStrategy.WITNESS_FIRST
    assert choose_strategy(12.5, local_extremum=True) is VerificationStrategy.WITNESS_FIRST
    assert choose_strategy(-0.001, local_extremum=True) is VerificationStrategy.SMALL_FACTORS_FIRST
    assert choose_strategy(-0.001) is VerificationStrategy.DEEP_SCREEN_FIRST


def _strategy_for(n: int) -> VerificationStrategy:
    score = coherence_score(n)
    extremum = score < COHERENCE_THRESHOLD and is_local_extremum(n)
    return choose_strategy(score, local_extremum=extremum)


def test_every_strategy_occurs_for_real_inputs() -> None:
    strategies = {_strategy_for(n) for n in range(5, 20_000, 2)}
    assert strategies == set(VerificationStrategy)


def test_is_prime_zeta_routes_through_oscillation_shape(monkeypatch: pytest.MonkeyPatch) -> None:
    # With an incoherent score the oscillation extremum decides between the two screens.
    seen: list[VerificationStrategy] = []
    real_verify = zeta_module._verify

    def _recording_verify(n: int, strategy: VerificationStrategy) -> bool:
        seen.append(strategy)
        return real_verify(n, strategy)

    monkeypatch.setattr(zeta_module, "_verify", _recording_verify)
    monkeypatch.setattr(zeta_module, "coherence_score", lambda n: -1.0)
    monkeypatch.setattr(zeta_module, "is_local_extremum", lambda n: True)
    assert is_prime_zeta(10_007) is True
    monkeypatch.setattr(zeta_module, "is_local_extremum", lambda n: False)
    assert is_prime_zeta(10_007) is True
    assert is_prime_zeta(10_007 * 10_009) is False
    monkeypatch.setattr(zeta_module, "coherence_score", lambda n: 1.0)
    assert is_prime_zeta(10_007) is True
    assert seen == [
        VerificationStrategy.SMALL_FACTORS_FIRST,
        VerificationStrategy.DEEP_SCREEN_FIRST,
        VerificationStrategy.DEEP_SCREEN_FIRST,
        VerificationStrategy.WITNESS_FIRST,
    ]


def test_deep_screen_covers_both_sides_of_its_limit() -> None:
    # Below the limit squared the screen decides alone; above it witnesses finish the job.
    deep = VerificationStrategy.DEEP_SCREEN_FIRST
    assert _verify(4_999 * 4_999, deep) is False
    assert _verify(24_999_983, deep) is is_prime_sieve(24_999_983)
    assert _verify(5_003 * 5_009, deep) is False
    assert _verify(1_000_000_007, deep) is True
    assert _verify(18_446_744_073_709_551_557, deep) is True
    assert _verify(4_294_967_291 * 4_294_967_279, deep) is False


def test_local_extremum_uses_growing_zero_count() -> None:
    assert [oscillation_zeros(n) for n in (5, 999, 1_000, 9_999, 10_000, U64_MAX)] == [20, 20, 30, 30, 40, 40]
    here = zeta_oscillation(97.0, 20)
    before = zeta_oscillation(96.0, 20)
    after = zeta_oscillation(98.0, 20)
    expected = (here > before and here > after) or (here < before and here < after)
    assert is_local_extremum(97) is expected
    # Neighbours of values near 2**64 collapse to the same float.
    assert is_local_extremum(U64_MAX) is False
    with pytest.raises(ValueError):
        is_local_extremum(1)


def test_each_strategy_is_exact_on_its_own() -> None:
    # Whichever order the score picks, verification reaches the same verdict.
    flags = _reference_flags(50_000)
    for strategy in VerificationStrategy:
        for n in range(5, 50_001, 2):
            assert _verify(n, strategy) is flags[n], (strategy, n)


def test_zeta_handles_u64_boundary() -> None:
    assert is_prime_zeta(18_446_744_073_709_551_557) is True
    assert is_prime_zeta(U64_MAX) is False
    assert is_prime_zeta(4_294_967_291 * 4_294_967_279) is False
    assert is_prime_zeta(10_007 * 10_009) is False
    with pytest.raises(U64RangeError):
        is_prime_zeta(-1)
    with pytest.raises(TypeError):
        is_prime_zeta(7.0)  # type: ignore[arg-type]


def test_zeta_oscillation_explicit_formula_term() -> None:
    expected_at_one = sum(1.0 / math.sqrt(gamma * gamma + 0.25) for gamma in ZETA_ZEROS)
    assert zeta_oscillation(1.0) == pytest.approx(expected_at_one)
    assert zeta_oscillation(1.0, num_zeros=1) == pytest.approx(1.0 / math.sqrt(14.134725142**2 + 0.25))
    assert zeta_oscillation(1000.0, num_zeros=0) == 0.0
    # More zeros than the table holds are capped at the table size.
    assert zeta_oscillation(97.0, num_zeros=500) == pytest.approx(zeta_oscillation(97.0))
    with pytest.raises(ValueError):
        zeta_oscillation(0.0)


def test_zeta_algorithm_delegates_to_function() -> None:
    algorithm = ZetaAlgorithm()
    assert algorithm.name() == "Riemann Zeta"
    assert algorithm.is_prime(1_000_000_007) is True
    assert algorithm.is_prime(561) is False

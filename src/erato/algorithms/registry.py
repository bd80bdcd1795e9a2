from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from types import TracebackType
from typing import TYPE_CHECKING

from erato.algorithms.miller_rabin import MillerRabinAlgorithm
from erato.algorithms.sieve import SieveAlgorithm
from erato.algorithms.zeta import ZetaAlgorithm
from erato.config.errors import ConfigError
from erato.observability.logging import registration_message
from erato.ports.log_sink import LogSink
from erato.ports.primality_test import PrimalityTest

if TYPE_CHECKING:
    from erato.config.models import AlgorithmDecl, RegistryConfig


class UnknownAlgorithmError(KeyError):
    # Raised when no registered algorithm carries the requested name.
    pass


# Config kinds map to factories; keys match AlgorithmDecl.kind.
_ALGORITHM_FACTORIES: dict[str, Callable[[AlgorithmDecl], PrimalityTest]] = {
    "sieve": lambda decl: SieveAlgorithm(),
    "miller_rabin": lambda decl: MillerRabinAlgorithm(rounds=decl.rounds),
    "zeta": lambda decl: ZetaAlgorithm(),
}


@dataclass
class PrimalityRegistry:
    """Ordered collection of primality tests.

    Iteration order is registration order. Names are display labels: duplicates are
    allowed and ``get_by_name`` returns the first match.
    """

    log_sink: LogSink | None = None
    _algorithms: list[PrimalityTest] = field(default_factory=list)

    @classmethod
    def with_all_algorithms(cls, *, log_sink: LogSink | None = None) -> PrimalityRegistry:
        # Fixed order: sieve, Miller-Rabin, zeta. New algorithms are appended here.
        registry = cls(log_sink=log_sink)
        registry.register(SieveAlgorithm())
        registry.register(MillerRabinAlgorithm())
        registry.register(ZetaAlgorithm())
        return registry

    @classmethod
    def from_config(cls, config: RegistryConfig, *, log_sink: LogSink | None = None) -> PrimalityRegistry:
        registry = cls(log_sink=log_sink)
        for decl in config.algorithms:
            factory = _ALGORITHM_FACTORIES.get(decl.kind)
            if factory is None:
                raise ConfigError(f"Unknown algorithm kind: {decl.kind}")
            registry.register(factory(decl))
        return registry

    def register(self, algorithm: PrimalityTest) -> None:
        # No duplicate detection: registering the same instance twice yields two entries.
        if not isinstance(algorithm, PrimalityTest):
            raise TypeError(f"{type(algorithm).__name__} does not implement PrimalityTest")
        self._algorithms.append(algorithm)
        self._log_registered(algorithm, len(self._algorithms) - 1)

    def algorithms(self) -> tuple[PrimalityTest, ...]:
        # Snapshot so callers cannot mutate registry contents.
        return tuple(self._algorithms)

    def get_by_name(self, name: str) -> PrimalityTest:
        for algorithm in self._algorithms:
            if algorithm.name() == name:
                return algorithm
        raise UnknownAlgorithmError(name)

    def __iter__(self) -> Iterator[PrimalityTest]:
        return iter(self.algorithms())

    def __len__(self) -> int:
        return len(self._algorithms)

    def close(self) -> None:
        # The registry owns its sink; closing twice is harmless.
        if self.log_sink is not None:
            self.log_sink.close()

    def __enter__(self) -> PrimalityRegistry:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _log_registered(self, algorithm: PrimalityTest, position: int) -> None:
        if self.log_sink is not None:
            self.log_sink.emit(registration_message(algorithm, position))

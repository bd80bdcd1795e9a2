from erato.ports.log_sink import LogSink
from erato.ports.primality_test import PrimalityTest

__all__ = ["LogSink", "PrimalityTest"]

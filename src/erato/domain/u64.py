from __future__ import annotations

# Inputs are fixed-width unsigned 64-bit values; Python ints are checked at the boundary.
U64_MAX = 2**64 - 1


class U64RangeError(ValueError):
    # Raised when an integer falls outside [0, 2**64 - 1].
    def __init__(self, value: int) -> None:
        super().__init__(f"{value} is outside the unsigned 64-bit range [0, {U64_MAX}]")
        self.value = value


def check_u64(n: object) -> int:
    # bool is an int subclass but never a meaningful candidate.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected int, got {type(n).__name__}")
    if n < 0 or n > U64_MAX:
        raise U64RangeError(n)
    return n

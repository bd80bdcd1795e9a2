from .u64 import U64_MAX, U64RangeError, check_u64

__all__ = ["U64_MAX", "U64RangeError", "check_u64"]

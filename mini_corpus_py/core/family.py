"""
变异族选择

Hamming 族产生等长变体；Levenshtein 族产生变长变体。
"""
from __future__ import annotations

from enum import Enum

from .errors import PreconditionError
from ..mutators.hamming_mutator import HammingMutator
from ..mutators.levenshtein_mutator import LevenshteinMutator


class Family(str, Enum):
    HAMMING = "hamming"
    LEVENSHTEIN = "levenshtein"

    @classmethod
    def parse(cls, value) -> "Family":
        """接受 Family 或其名称字符串（不区分大小写）。"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        known = ", ".join(f.value for f in cls)
        raise PreconditionError(f"unknown mutation family {value!r} (expected one of: {known})")


_MUTATORS = {
    Family.HAMMING: HammingMutator,
    Family.LEVENSHTEIN: LevenshteinMutator,
}


def mutator_for(family, k: int, rng):
    """返回与 family 对应的变异器实例。"""
    return _MUTATORS[Family.parse(family)](k, rng)


__all__ = ["Family", "mutator_for"]

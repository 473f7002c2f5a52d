"""
可复现随机源

所有生成函数都显式接收一个 `CorpusRng`，不使用全局 `random` 状态。
同一种子、同一参数、同一抽样顺序下产出的字节完全一致。

注意：随机源必须被顺序使用；两个生成调用并发共享同一个实例会打乱抽样顺序。
"""
from __future__ import annotations

import random
from typing import List, Sequence, TypeVar

from .errors import PreconditionError

T = TypeVar("T")

SEED_BITS = 64


class CorpusRng:
    """对 `random.Random` 的薄封装，只暴露语料生成需要的三种操作。

    参数:
      seed: 无符号 64 位整数种子。
    """

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise PreconditionError(f"seed must be an integer, got {type(seed).__name__}")
        if not 0 <= seed < (1 << SEED_BITS):
            raise PreconditionError(f"seed must fit in an unsigned {SEED_BITS}-bit integer, got {seed}")
        self.seed = seed
        self._random = random.Random(seed)

    def uniform_int(self, lo: int, hi: int) -> int:
        """返回 [lo, hi] 闭区间内的均匀整数。"""
        return self._random.randint(lo, hi)

    def choice(self, population: Sequence[T]) -> T:
        """从非空有限序列中均匀选取一个元素。"""
        if not population:
            raise PreconditionError("cannot choose from an empty population")
        return self._random.choice(population)

    def permutation(self, n: int) -> List[int]:
        """返回 0..n-1 的均匀随机排列。"""
        if n < 0:
            raise PreconditionError(f"permutation size must be non-negative, got {n}")
        idx = list(range(n))
        self._random.shuffle(idx)
        return idx

    def __repr__(self) -> str:
        return f"CorpusRng(seed={self.seed})"


def as_rng(seed_or_rng) -> CorpusRng:
    """接受 CorpusRng（原样返回）或整数种子（新建 CorpusRng）。"""
    if isinstance(seed_or_rng, CorpusRng):
        return seed_or_rng
    if isinstance(seed_or_rng, int) and not isinstance(seed_or_rng, bool):
        return CorpusRng(seed_or_rng)
    raise PreconditionError(f"expected a CorpusRng or an integer seed, got {type(seed_or_rng).__name__}")


__all__ = ["CorpusRng", "as_rng", "SEED_BITS"]

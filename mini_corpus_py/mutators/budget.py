"""
编辑预算

名义预算 k 到实际编辑数的映射，以及变异位置的选取。

实际编辑数在 [k // 2, k] 内均匀抽取：同一个 k 在多次调用中会产生不同难度的样本，
而不是固定难度。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.errors import PreconditionError


@dataclass
class MutationReport:
    """单次变异的统计。

    字段：
      actual_k: 本次抽取的实际编辑数
      substitutions / insertions / deletions: 各类编辑的数量
    """

    actual_k: int
    substitutions: int = 0
    insertions: int = 0
    deletions: int = 0

    @property
    def length_delta(self) -> int:
        return self.insertions - self.deletions


def check_budget(length: int, k: int) -> None:
    """k 必须是非负整数且不超过输入长度 length。"""
    if isinstance(k, bool) or not isinstance(k, int):
        raise PreconditionError(f"edit budget must be an integer, got {type(k).__name__}")
    if k < 0:
        raise PreconditionError(f"edit budget must be non-negative, got {k}")
    if k > length:
        raise PreconditionError(f"edit budget {k} exceeds sequence length {length}")


def sample_budget(k: int, rng) -> int:
    return rng.uniform_int(k // 2, k)


def pick_positions(n: int, count: int, rng) -> List[int]:
    """对 0..n-1 做随机排列并取前 count 个，位置互不重复。"""
    return rng.permutation(n)[:count]


__all__ = ["MutationReport", "check_budget", "sample_budget", "pick_positions"]

"""
Hamming mutator

等长替换变异器：在随机选出的 actual_k 个位置写入保留字节 SENTINEL。

因为 SENTINEL 不在字母表中，而输入来自字母表，所以每个被改写的位置必然失配、
其余位置原样复制，结果与输入的 Hamming 距离恰好等于 actual_k。
"""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

from ..core.alphabet import SENTINEL
from .budget import MutationReport, check_budget, pick_positions, sample_budget

logger = logging.getLogger(__name__)


class HammingMutator:
    """生成与输入等长、Hamming 距离在 [k // 2, k] 内的变体。

    参数:
      k: 名义编辑预算（不得超过输入长度）。
      rng: CorpusRng 随机源。
    """

    def __init__(self, k: int, rng):
        self.k = k
        self.rng = rng

    def mutate_with_report(self, data: bytes) -> Tuple[bytes, MutationReport]:
        check_budget(len(data), self.k)
        actual_k = sample_budget(self.k, self.rng)
        out = bytearray(data)
        for pos in pick_positions(len(data), actual_k, self.rng):
            out[pos] = SENTINEL
        logger.debug(f"hamming mutate len={len(data)} k={self.k} actual_k={actual_k}")
        return bytes(out), MutationReport(actual_k=actual_k, substitutions=actual_k)

    def mutate(self, data: bytes) -> bytes:
        return self.mutate_with_report(data)[0]

    def variants(self, data: bytes, count: int) -> Iterable[bytes]:
        """连续产出 count 个相互独立的变体。"""
        for _ in range(count):
            yield self.mutate(data)

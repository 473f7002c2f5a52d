"""
Levenshtein mutator

变长编辑变异器。先为每个位置生成编辑标签（SAME / SUBSTITUTE / INSERT / DELETE），
再对输入做一次从左到右的扫描构造输出：

- SAME: 原字节
- SUBSTITUTE: 保留字节 SENTINEL
- INSERT: 一个新的随机字母表字节，随后是原字节
- DELETE: 不输出

输出长度为 len(a) + #INSERT - #DELETE。构造的编辑数 actual_k 只是编辑距离的上界：
相邻的插入与删除在最优对齐下可能相互抵消，实际距离可能更小。
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple, assert_never

from ..core.alphabet import ALPHABET, SENTINEL
from ..core.errors import PreconditionError
from .budget import MutationReport, check_budget, pick_positions, sample_budget

logger = logging.getLogger(__name__)


class EditTag(IntEnum):
    SAME = 0
    SUBSTITUTE = 1
    INSERT = 2
    DELETE = 3


class LevenshteinMutator:
    """生成编辑距离不超过 actual_k（actual_k 在 [k // 2, k] 内）的变体。

    参数:
      k: 名义编辑预算（不得超过输入长度）。
      rng: CorpusRng 随机源。
    """

    def __init__(self, k: int, rng):
        self.k = k
        self.rng = rng

    def plan(self, length: int) -> List[EditTag]:
        """为长度为 length 的输入生成编辑标签。

        抽样顺序：实际编辑数 -> 位置排列 -> 按排列顺序为每个选中位置抽取标签。
        """
        check_budget(length, self.k)
        actual_k = sample_budget(self.k, self.rng)
        tags = [EditTag.SAME] * length
        for pos in pick_positions(length, actual_k, self.rng):
            tags[pos] = EditTag(self.rng.uniform_int(EditTag.SUBSTITUTE, EditTag.DELETE))
        return tags

    def apply(self, data: bytes, tags: Sequence[EditTag]) -> bytes:
        """按标签对 data 做一次从左到右的扫描。tags 必须与 data 等长。"""
        if len(tags) != len(data):
            raise PreconditionError(f"expected {len(data)} edit tags, got {len(tags)}")
        out = bytearray()
        for byte, tag in zip(data, tags):
            if tag is EditTag.SAME:
                out.append(byte)
            elif tag is EditTag.SUBSTITUTE:
                out.append(SENTINEL)
            elif tag is EditTag.INSERT:
                out.append(self.rng.choice(ALPHABET))
                out.append(byte)
            elif tag is EditTag.DELETE:
                pass
            else:
                assert_never(tag)
        return bytes(out)

    def mutate_with_report(self, data: bytes) -> Tuple[bytes, MutationReport]:
        tags = self.plan(len(data))
        report = MutationReport(
            actual_k=sum(1 for t in tags if t is not EditTag.SAME),
            substitutions=tags.count(EditTag.SUBSTITUTE),
            insertions=tags.count(EditTag.INSERT),
            deletions=tags.count(EditTag.DELETE),
        )
        out = self.apply(data, tags)
        logger.debug(f"levenshtein mutate len={len(data)} k={self.k} report={report}")
        return out, report

    def mutate(self, data: bytes) -> bytes:
        return self.mutate_with_report(data)[0]

    def variants(self, data: bytes, count: int) -> Iterable[bytes]:
        """连续产出 count 个相互独立的变体。"""
        for _ in range(count):
            yield self.mutate(data)

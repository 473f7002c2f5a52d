"""
校验对生成

生成 (a, b)：a 为随机序列，b 为按所选族变异后的序列。
外部的多个距离实现对同一对输入求值并断言结果一致，本模块只负责产出输入。
"""
from __future__ import annotations

import logging
from typing import NamedTuple

from .alphabet import random_sequence
from .family import Family, mutator_for
from .rng import as_rng

logger = logging.getLogger(__name__)


class Pair(NamedTuple):
    a: bytes
    b: bytes


def generate_pair(length: int, k: int, family, rng) -> Pair:
    """生成长度为 length 的随机序列及其在预算 k 下的变体。

    `rng` 可以是 CorpusRng，也可以是 64 位整数种子。
    """
    family = Family.parse(family)
    rng = as_rng(rng)
    a = random_sequence(length, rng)
    b = mutator_for(family, k, rng).mutate(a)
    logger.debug(f"pair family={family.value} len_a={len(a)} len_b={len(b)} k={k}")
    return Pair(a, b)


__all__ = ["Pair", "generate_pair"]

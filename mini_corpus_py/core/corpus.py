"""
Needle / haystack 语料生成

把 haystack 划分为 haystack_len 个“槽位”：
- 随机排列中的前 num_match 个槽位各放入一份 needle 的变异副本；
- 其余槽位各放入一个独立抽取的字母表字节（噪声）。

Hamming 族每个匹配槽位恰好写入 needle_len 字节；Levenshtein 族写入变异副本的实际长度，
因此 haystack 总字节数不固定。匹配位置不被记录，语料只保证匹配存在。
"""
from __future__ import annotations

import logging
from typing import NamedTuple

from .alphabet import ALPHABET, random_sequence
from .errors import PreconditionError
from .family import Family, mutator_for
from .rng import as_rng

logger = logging.getLogger(__name__)


class Corpus(NamedTuple):
    needle: bytes
    haystack: bytes


def _check_corpus_args(needle_len: int, haystack_len: int, num_match: int, k: int) -> None:
    if needle_len < 0:
        raise PreconditionError(f"needle_len must be non-negative, got {needle_len}")
    if haystack_len < 0:
        raise PreconditionError(f"haystack_len must be non-negative, got {haystack_len}")
    if not 0 <= num_match <= haystack_len:
        raise PreconditionError(
            f"num_match must be in [0, haystack_len={haystack_len}], got {num_match}")
    if k < 0:
        raise PreconditionError(f"edit budget must be non-negative, got {k}")
    # 没有匹配槽位时不会发生变异，k 不受 needle 长度约束
    if num_match > 0 and k > needle_len:
        raise PreconditionError(f"edit budget {k} exceeds needle_len {needle_len}")


def generate_corpus(needle_len: int, haystack_len: int, num_match: int, k: int,
                    family, rng) -> Corpus:
    """生成 needle 以及包含 num_match 个近似出现的 haystack。

    `rng` 可以是 CorpusRng，也可以是 64 位整数种子。
    """
    _check_corpus_args(needle_len, haystack_len, num_match, k)
    family = Family.parse(family)
    rng = as_rng(rng)

    needle = random_sequence(needle_len, rng)
    match_slots = set(rng.permutation(haystack_len)[:num_match])
    mutator = mutator_for(family, k, rng)

    haystack = bytearray()
    for i in range(haystack_len):
        if i in match_slots:
            haystack.extend(mutator.mutate(needle))
        else:
            haystack.append(rng.choice(ALPHABET))

    logger.debug(f"corpus family={family.value} needle_len={needle_len} slots={haystack_len} "
                 f"matches={num_match} k={k} haystack_bytes={len(haystack)}")
    return Corpus(needle, bytes(haystack))


__all__ = ["Corpus", "generate_corpus"]

"""
Alphabet source

字母表与随机序列生成。

- `ALPHABET`：可打印 ASCII 字节 33..126，共 94 个，进程内只读。
- `SENTINEL`：替换操作写入的保留字节（空格 0x20），保证不在字母表中，
  因此与任何字母表字节比较都必然失配，失配数可以精确验证。
"""
from __future__ import annotations

import logging

from .errors import PreconditionError

logger = logging.getLogger(__name__)

ALPHABET: bytes = bytes(range(33, 127))

# 保留字节：不属于 ALPHABET
SENTINEL: int = 32


def alphabet() -> bytes:
    return ALPHABET


def random_sequence(length: int, rng) -> bytes:
    """从字母表中独立均匀抽取 `length` 个字节。

    length 为 0 时返回空序列；为负时抛出 PreconditionError。
    """
    if length < 0:
        raise PreconditionError(f"sequence length must be non-negative, got {length}")
    out = bytes(rng.choice(ALPHABET) for _ in range(length))
    logger.debug(f"random_sequence length={length}")
    return out


__all__ = ["ALPHABET", "SENTINEL", "alphabet", "random_sequence"]

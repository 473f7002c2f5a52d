"""
配置模块

提供默认生成参数与基准场景表。所有场景默认使用种子 1234，
与基准测试中固定种子的做法一致，保证跨次运行逐字节可复现。

场景表中省略的参数（以及为 None 的 family）取自 DEFAULTS。
"""
from __future__ import annotations

from typing import Optional

from ..core.errors import PreconditionError

DEFAULTS = {
    "seed": 1234,
    "family": "hamming",
    "length": 1000,  # 校验对序列长度
    "k": 30,  # 名义编辑预算
}

# needle / haystack 语料的默认尺寸
DEFAULTS.update({
    "needle_len": 32,
    "haystack_len": 1000,  # 槽位数，不是字节数
    "num_match": 50,
})

# 每种场景需要的参数键
KIND_PARAMS = {
    "pair": ("length", "k"),
    "corpus": ("needle_len", "haystack_len", "num_match", "k"),
}

# 基准场景：name -> (kind, family, 参数覆盖)
SCENARIOS = {
    "rand_hamming": ("pair", None, {}),
    "rand_hamming_search": ("corpus", None, {"k": 16}),
    "rand_levenshtein": ("pair", "levenshtein", {"k": 100}),
    "rand_levenshtein_k": ("pair", "levenshtein", {}),
    "rand_levenshtein_search": ("corpus", "levenshtein", {"k": 16}),
}


def load_config(overrides: Optional[dict] = None) -> dict:
    """返回 DEFAULTS 的副本，并合并调用方覆盖项。

    未知键会抛出 PreconditionError，以免拼写错误被静默忽略。
    """
    cfg = DEFAULTS.copy()
    if overrides:
        unknown = sorted(set(overrides) - set(DEFAULTS))
        if unknown:
            raise PreconditionError(f"unknown config keys: {', '.join(unknown)}")
        cfg.update(overrides)
    return cfg

"""core 子模块

- alphabet: 字母表与随机序列
- rng: 可复现随机源
- family: 变异族选择
- pair: 校验对生成
- corpus: needle / haystack 语料生成
- scenarios: 命名基准场景
- errors: 前置条件错误
"""

__all__ = [
    "alphabet",
    "rng",
    "family",
    "pair",
    "corpus",
    "scenarios",
    "errors",
]

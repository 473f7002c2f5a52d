"""mutators 子模块

受距离约束的变异器：
- hamming_mutator: 等长替换，Hamming 距离精确等于实际编辑数
- levenshtein_mutator: 替换/插入/删除，编辑距离以实际编辑数为上界
"""

__all__ = [
    "budget",
    "hamming_mutator",
    "levenshtein_mutator",
]

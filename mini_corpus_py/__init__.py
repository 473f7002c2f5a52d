"""
mini_corpus_py

近似字符串匹配（Hamming / Levenshtein）基准用的可复现合成语料生成器。

子模块：
- core: 字母表、随机源、校验对与 needle/haystack 语料生成、基准场景
- mutators: 受距离约束的变异器
- utils: 默认配置
"""

from .core.alphabet import ALPHABET, SENTINEL, random_sequence
from .core.corpus import Corpus, generate_corpus
from .core.errors import PreconditionError
from .core.family import Family
from .core.pair import Pair, generate_pair
from .core.rng import CorpusRng
from .core.scenarios import build_scenario, get_scenario, iter_scenarios
from .mutators.hamming_mutator import HammingMutator
from .mutators.levenshtein_mutator import EditTag, LevenshteinMutator

__all__ = [
    "ALPHABET",
    "SENTINEL",
    "Corpus",
    "CorpusRng",
    "EditTag",
    "Family",
    "HammingMutator",
    "LevenshteinMutator",
    "Pair",
    "PreconditionError",
    "build_scenario",
    "generate_corpus",
    "generate_pair",
    "get_scenario",
    "iter_scenarios",
    "random_sequence",
]

__version__ = "0.1.0"

"""
基准场景

把基准测试中注册的固定场景（校验对 / needle-haystack 语料）整理为命名表。
计时框架先调用 `build_scenario` 一次性生成输入，再在相同输入上反复调用各个实现。

注册表中的场景是共享对象，其 `params` 为只读映射。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .corpus import Corpus, generate_corpus
from .errors import PreconditionError
from .family import Family
from .pair import Pair, generate_pair
from ..utils.config import DEFAULTS, KIND_PARAMS, SCENARIOS, load_config


@dataclass(frozen=True)
class Scenario:
    """一个命名场景。

    字段：
      name: 场景名
      kind: "pair" 或 "corpus"
      family: 变异族
      params: 生成参数（不含种子）
      seed: 默认种子
    """

    name: str
    kind: str
    family: Family
    params: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    seed: int = DEFAULTS["seed"]

    @property
    def k(self) -> int:
        return self.params["k"]


@dataclass
class ScenarioInputs:
    scenario: Scenario
    seed: int
    data: Union[Pair, Corpus]

    @property
    def k(self) -> int:
        """消费者应传给有界算法的 k。"""
        return self.scenario.k


def _load_scenarios(cfg: dict) -> Dict[str, Scenario]:
    registry = {}
    for name, (kind, family, overrides) in SCENARIOS.items():
        if kind not in KIND_PARAMS:
            raise PreconditionError(f"scenario {name!r} has unsupported kind {kind!r}")
        params = {key: overrides.get(key, cfg[key]) for key in KIND_PARAMS[kind]}
        registry[name] = Scenario(
            name=name,
            kind=kind,
            family=Family.parse(family if family is not None else cfg["family"]),
            params=MappingProxyType(params),
            seed=cfg["seed"],
        )
    return registry


_REGISTRY = _load_scenarios(load_config())


def get_scenario(name: str) -> Scenario:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown scenario {name!r} (known: {', '.join(_REGISTRY)})") from None


def iter_scenarios() -> Iterator[Scenario]:
    yield from _REGISTRY.values()


def build_scenario(scenario: Union[str, Scenario], seed: Optional[int] = None) -> ScenarioInputs:
    """为场景生成输入；seed 为 None 时使用场景默认种子。"""
    if isinstance(scenario, str):
        scenario = get_scenario(scenario)
    seed = scenario.seed if seed is None else seed
    p = scenario.params
    if scenario.kind == "pair":
        data = generate_pair(p["length"], p["k"], scenario.family, seed)
    elif scenario.kind == "corpus":
        data = generate_corpus(p["needle_len"], p["haystack_len"], p["num_match"], p["k"],
                               scenario.family, seed)
    else:
        raise PreconditionError(f"unsupported scenario kind {scenario.kind!r}")
    return ScenarioInputs(scenario=scenario, seed=seed, data=data)


__all__ = ["Scenario", "ScenarioInputs", "get_scenario", "iter_scenarios", "build_scenario"]

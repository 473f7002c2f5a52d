"""
错误类型

库内所有显式校验的前置条件（长度为负、编辑预算越界、匹配数超过槽位数、种子非法等）
统一抛出 `PreconditionError`。
"""


class PreconditionError(ValueError):
    """调用参数不满足前置条件。"""

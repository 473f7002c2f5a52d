"""utils 子模块：默认配置与场景表。"""

__all__ = ["config"]

"""链条相关的异常类型。"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """参数缺失或类型不对。

    例如：值节点没有词元、随机源为空、传入的序列本身为 None。
    """

"""节点注册表：一条链上所有不同词元的节点册。"""

from __future__ import annotations

from typing import Dict, Iterator, List

from ..models.node import ChainNode
from .errors import InvalidArgumentError


class NodeRegistry:
    """按登记顺序保存节点，并提供按值查找。

    只增不减；锚点总是第 0 个。
    """

    def __init__(self, anchor: ChainNode | None = None) -> None:
        self.anchor = anchor if anchor is not None else ChainNode.anchor()
        self._nodes: List[ChainNode] = []
        self._by_value: Dict[str, ChainNode] = {}
        self.register(self.anchor)

    def lookup_or_none(self, token: str | None) -> ChainNode | None:
        """按值查找已有节点。锚点的空值不参与匹配。"""

        if token is None:
            return None
        return self._by_value.get(token)

    def register(self, node: ChainNode) -> None:
        """追加节点，不做去重；调用方需先 lookup_or_none。"""

        self._nodes.append(node)
        if node.value is not None:
            # 重复登记时查找仍指向最早的节点
            self._by_value.setdefault(node.value, node)

    def create(self, token: str) -> ChainNode:
        """新建值节点并登记。"""

        if token is None:
            raise InvalidArgumentError("词元不能为空。")
        node = ChainNode(token)
        self.register(node)
        return node

    def resolve(self, token: str) -> ChainNode:
        """获取或创建词元对应的节点。"""

        node = self.lookup_or_none(token)
        if node is None:
            node = self.create(token)
        return node

    def count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ChainNode]:
        return iter(self._nodes)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token in self._by_value

"""链条节点与后继边。"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from ..core.errors import InvalidArgumentError


@dataclass
class SuccessorEdge:
    """后继边：目标节点与观测到的转移次数。"""

    target: "ChainNode"
    transition_count: int = 0


class ChainNode:
    """一个不同词元对应一个节点。

    说明：
    - 相等性按值判断（两个锚点也相等），哈希与之保持一致；
    - 后继表以词元字符串为键；
    - 节点不持有注册表引用，注册表由链条统一持有。
    """

    __slots__ = ("value", "successors")

    def __init__(self, value: str | None) -> None:
        if value is None:
            raise InvalidArgumentError("值节点必须带有词元，锚点请用 ChainNode.anchor()。")
        if not isinstance(value, str):
            raise InvalidArgumentError(f"词元必须是字符串，收到 {type(value).__name__}。")
        self.value: Optional[str] = value
        self.successors: Dict[str, SuccessorEdge] = {}

    @classmethod
    def anchor(cls) -> "ChainNode":
        """创建没有词元的锚点。"""

        node = cls.__new__(cls)
        node.value = None
        node.successors = {}
        return node

    @property
    def is_anchor(self) -> bool:
        return self.value is None

    def add_successor(self, target: "ChainNode") -> None:
        """登记一次 self → target 的转移，已存在则次数加一。"""

        edge = self.successors.get(target.value)
        if edge is None:
            edge = SuccessorEdge(target=target, transition_count=0)
            self.successors[target.value] = edge
        edge.transition_count += 1

    def next_successor(self, rng: random.Random) -> "ChainNode | None":
        """随机挑一个后继。

        注意：按不同后继的个数等概率抽取，不按转移次数加权。
        次数只做统计，不参与抽样。
        """

        if rng is None:
            raise InvalidArgumentError("随机源不能为空。")
        if not self.successors:
            return None
        edges = list(self.successors.values())
        return edges[rng.randrange(len(edges))].target

    def transition_count(self, token: str) -> int:
        edge = self.successors.get(token)
        return edge.transition_count if edge is not None else 0

    @property
    def successor_count(self) -> int:
        return len(self.successors)

    def iter_successors(self) -> Iterator[SuccessorEdge]:
        return iter(self.successors.values())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ChainNode):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value or ""

    def __repr__(self) -> str:
        label = "<anchor>" if self.value is None else repr(self.value)
        return f"ChainNode({label}, successors={len(self.successors)})"

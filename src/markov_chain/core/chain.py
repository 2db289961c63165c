"""一阶马尔可夫链：摄入词元序列，随机游走生成新序列。"""

from __future__ import annotations

import random
from typing import Iterable, List

from ..models.node import ChainNode
from .errors import InvalidArgumentError
from .registry import NodeRegistry


class MarkovChain:
    """持有锚点、注册表与默认随机源的链条。

    关键约定：
    - 每个不同词元只有一个节点（按值去重）；
    - 边的转移次数等于该后继词元紧跟在本词元之后出现的次数；
    - 生成是无记忆的，只看当前节点；"n-gram" 参数只限制跳数。
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.registry = NodeRegistry()
        self.rng = rng if rng is not None else random.Random(seed)

    @property
    def anchor(self) -> ChainNode:
        return self.registry.anchor

    def set_random(self, rng: random.Random) -> None:
        if rng is None:
            raise InvalidArgumentError("随机源不能为空。")
        self.rng = rng

    def count(self) -> int:
        """不同节点数（含锚点）。"""

        return self.registry.count()

    def lookup_or_none(self, token: str) -> ChainNode | None:
        return self.registry.lookup_or_none(token)

    def _start_node(self, start: str | ChainNode | None) -> ChainNode:
        if start is None:
            return self.anchor
        if isinstance(start, ChainNode):
            if start.is_anchor:
                return self.anchor
            start = start.value
        node = self.registry.lookup_or_none(start)
        if node is None:
            raise InvalidArgumentError(f"链中没有词元 {start!r}。")
        return node

    def ingest_sequence(
        self, tokens: Iterable[str] | None, start: str | ChainNode | None = None
    ) -> None:
        """把一条词元序列挂到起点（默认锚点）之后。

        逐个词元：按值获取或创建节点，从当前节点连一条边（次数加一），
        再以该节点为当前节点继续。空序列不做任何事。

        注意：第 k 个词元出错时，前 k 个词元已建立的节点与边不会回滚。
        """

        if tokens is None:
            raise InvalidArgumentError("词元序列不能为空引用。")
        current = self._start_node(start)
        for position, token in enumerate(tokens):
            if not isinstance(token, str):
                raise InvalidArgumentError(
                    f"第 {position} 个词元必须是字符串，收到 {type(token).__name__}。"
                )
            node = self.registry.resolve(token)
            current.add_successor(node)
            current = node

    def walk(
        self,
        max_hops: int,
        start: str | ChainNode | None = None,
        rng: random.Random | None = None,
    ) -> List[ChainNode]:
        """从起点出发最多走 max_hops 步，返回经过的节点（含起点）。"""

        rng = rng if rng is not None else self.rng
        current = self._start_node(start)
        visited = [current]
        hops = max_hops
        while hops > 0:
            current = current.next_successor(rng)
            if current is None:
                break
            visited.append(current)
            hops -= 1
        return visited

    def generate_sequence(
        self,
        max_hops: int,
        start: str | ChainNode | None = None,
        separator: str = " ",
        rng: random.Random | None = None,
    ) -> str:
        """生成一段文本。

        锚点本身没有词元，不输出内容；其余节点的词元用 separator 连接。
        结果最多包含 max_hops + 1 个词元，遇到没有后继的节点提前结束。
        """

        visited = self.walk(max_hops, start=start, rng=rng)
        return separator.join(node.value for node in visited if node.value is not None)

    def generate_sequence_no_space(
        self,
        max_hops: int,
        start: str | ChainNode | None = None,
        rng: random.Random | None = None,
    ) -> str:
        return self.generate_sequence(max_hops, start=start, separator="", rng=rng)

"""基于词元序列的一阶马尔可夫链文本生成。"""

from .config import ChainConfig
from .core.chain import MarkovChain
from .core.errors import InvalidArgumentError
from .core.registry import NodeRegistry
from .models.node import ChainNode, SuccessorEdge

__all__ = [
    "ChainConfig",
    "ChainNode",
    "InvalidArgumentError",
    "MarkovChain",
    "NodeRegistry",
    "SuccessorEdge",
]

"""把一行文本切成词元序列。"""

from __future__ import annotations

import importlib.util
import re
import warnings
from typing import List

from ..config import ChainConfig
from .errors import InvalidArgumentError


class TokenMask:
    """正则掩码分词：每个完整匹配（group 0）就是一个词元。"""

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        try:
            self.pattern = re.compile(pattern)
        except re.error as exc:
            raise InvalidArgumentError(f"无效的词元掩码 {pattern!r}：{exc}") from exc
        self._warned_empty = False

    def tokenize(self, line: str) -> List[str]:
        if not line:
            return []
        tokens = [match.group(0) for match in self.pattern.finditer(line)]
        if all(tokens):
            return tokens
        if not self._warned_empty:
            warnings.warn(
                f"词元掩码 {self.pattern.pattern!r} 会匹配空串，空词元已丢弃。",
                RuntimeWarning,
            )
            self._warned_empty = True
        return [token for token in tokens if token]


class JiebaTokenizer:
    """jieba 精确模式分词，去掉纯空白词元。"""

    def tokenize(self, line: str) -> List[str]:
        if not line:
            return []
        import jieba

        return [token for token in jieba.cut(line, cut_all=False) if token.strip()]


def create_tokenizer(config: ChainConfig) -> TokenMask | JiebaTokenizer:
    """按配置选择分词后端。

    后端顺序：auto 时优先 jieba，缺失则退回正则掩码。
    """

    backend = config.tokenizer_backend
    if backend == "auto":
        backend = "jieba" if _has_jieba() else "regex"
    if backend == "jieba":
        if _has_jieba():
            return JiebaTokenizer()
        warnings.warn(
            "缺少 jieba，改用正则掩码分词。",
            RuntimeWarning,
        )
        return TokenMask(config.regexp_mask)
    if backend == "regex":
        return TokenMask(config.regexp_mask)
    raise InvalidArgumentError(f"未知的分词后端：{config.tokenizer_backend}")


def _has_jieba() -> bool:
    return importlib.util.find_spec("jieba") is not None

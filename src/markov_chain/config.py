"""全局配置与默认参数。"""

from __future__ import annotations

from dataclasses import dataclass

from .core.errors import InvalidArgumentError


@dataclass
class ChainConfig:
    """运行参数集合。

    命令行参数会覆盖这些默认值。
    """

    # 输入语料路径，逐行读取
    input_path: str | None = None
    # 生成结果输出路径；为空时只打印到控制台
    output_path: str | None = None
    # 词元掩码：每个完整匹配即一个词元（默认每 2~3 个字符一段）
    regexp_mask: str = "(...?)"
    # 只读取前 N 行，0 表示读完整个文件
    top_lines: int = 0
    # 生成多少行
    output_lines: int = 10
    # "n-gram" 深度：实际只是生成时的最大跳数，不是链的阶数
    ngram: int = 3
    # 生成时词元之间的连接符，默认不加空格
    separator: str = ""
    # 分词后端：regex / jieba / auto
    tokenizer_backend: str = "regex"
    # 每读多少行报告一次进度
    progress_interval: int = 1000
    # 随机种子；为空时每次运行结果不同
    seed: int | None = None
    # 读写文件的编码
    encoding: str = "utf-8"

    def validate(self) -> "ChainConfig":
        for name in ("top_lines", "output_lines", "ngram", "progress_interval"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidArgumentError(f"{name} 不能为负数：{value}")
        if not self.regexp_mask:
            raise InvalidArgumentError("词元掩码不能为空。")
        return self

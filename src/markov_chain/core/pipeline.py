"""语料读取、摄入与批量生成流程。"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Protocol

from ..config import ChainConfig
from .chain import MarkovChain
from .errors import InvalidArgumentError
from .tokenizer import create_tokenizer

ProgressCallback = Callable[[int, float], None]


class Tokenizer(Protocol):
    def tokenize(self, line: str) -> List[str]: ...


@dataclass
class IngestReport:
    """一次摄入的统计。"""

    line_count: int
    elapsed_seconds: float
    unique_tokens: int


@dataclass
class RunResult:
    """完整运行的结果。"""

    chain: MarkovChain
    ingest: IngestReport
    lines: List[str] = field(default_factory=list)


def iter_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """逐行读取，去掉行尾换行符。"""

    with open(path, "r", encoding=encoding) as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def ingest_lines(
    chain: MarkovChain,
    lines: Iterable[str],
    tokenizer: Tokenizer,
    top_lines: int = 0,
    progress_interval: int = 1000,
    report: ProgressCallback | None = None,
) -> IngestReport:
    """每行切词后作为一条序列挂到锚点上。

    top_lines 为 0 时读完全部行；progress_interval 为 0 时不报告进度。
    """

    started = time.perf_counter()
    line_number = 0
    for line in lines:
        chain.ingest_sequence(tokenizer.tokenize(line))
        line_number += 1
        if report is not None and progress_interval and line_number % progress_interval == 0:
            report(line_number, time.perf_counter() - started)
        if top_lines and line_number >= top_lines:
            break
    return IngestReport(
        line_count=line_number,
        elapsed_seconds=time.perf_counter() - started,
        unique_tokens=chain.count(),
    )


def generate_lines(
    chain: MarkovChain, count: int, max_hops: int, separator: str = ""
) -> List[str]:
    """从锚点出发生成 count 行。"""

    return [chain.generate_sequence(max_hops, separator=separator) for _ in range(count)]


def write_lines(path: str | Path, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """覆盖写入，每个元素一行。"""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding=encoding) as handle:
        for line in lines:
            handle.write(f"{line}\n")


def run(config: ChainConfig, report: ProgressCallback | None = None) -> RunResult:
    """读语料、建链、生成并（可选）写文件。"""

    config.validate()
    if not config.input_path:
        raise InvalidArgumentError("需要输入文件路径。")
    chain = MarkovChain(seed=config.seed)
    tokenizer = create_tokenizer(config)
    ingest = ingest_lines(
        chain,
        iter_lines(config.input_path, config.encoding),
        tokenizer,
        top_lines=config.top_lines,
        progress_interval=config.progress_interval,
        report=report,
    )
    lines = generate_lines(chain, config.output_lines, config.ngram, config.separator)
    if config.output_path:
        write_lines(config.output_path, lines, config.encoding)
    return RunResult(chain=chain, ingest=ingest, lines=lines)

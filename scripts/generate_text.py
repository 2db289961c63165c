"""读取语料建链，并随机生成若干行文本。"""

from __future__ import annotations

import argparse
from datetime import timedelta
from pathlib import Path

from markov_chain.config import ChainConfig
from markov_chain.core.errors import InvalidArgumentError
from markov_chain.core.pipeline import run


def _report_progress(line_number: int, elapsed: float) -> None:
    print(f"Line number : {line_number}\t\tTime elapsed: {timedelta(seconds=elapsed)}")


def build_parser() -> argparse.ArgumentParser:
    defaults = ChainConfig()
    parser = argparse.ArgumentParser(description="马尔可夫链文本生成")
    parser.add_argument("--input", required=True, help="输入语料文件")
    parser.add_argument("--output", default=None, help="生成结果写入的文件")
    parser.add_argument(
        "--mask",
        default=defaults.regexp_mask,
        help=f"词元正则掩码，默认 {defaults.regexp_mask!r}",
    )
    parser.add_argument(
        "--top-lines",
        type=int,
        default=defaults.top_lines,
        help="只读取前 N 行，0 表示全部读取",
    )
    parser.add_argument(
        "--output-lines",
        type=int,
        default=defaults.output_lines,
        help="生成多少行",
    )
    parser.add_argument(
        "--ngram",
        type=int,
        default=defaults.ngram,
        help="生成时的最大跳数",
    )
    parser.add_argument("--separator", default=defaults.separator, help="词元连接符")
    parser.add_argument(
        "--tokenizer",
        choices=("regex", "jieba", "auto"),
        default=defaults.tokenizer_backend,
        help="分词后端",
    )
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    if not Path(args.input).exists():
        raise SystemExit(f"找不到输入文件：{args.input}")

    config = ChainConfig(
        input_path=args.input,
        output_path=args.output,
        regexp_mask=args.mask,
        top_lines=args.top_lines,
        output_lines=args.output_lines,
        ngram=args.ngram,
        separator=args.separator,
        tokenizer_backend=args.tokenizer,
        seed=args.seed,
    )
    try:
        result = run(config, report=_report_progress)
    except InvalidArgumentError as exc:
        raise SystemExit(str(exc)) from exc

    print(f"Total unique words:{result.ingest.unique_tokens}\n\n\nAuto generated text:")
    for line in result.lines:
        print(line)
    if config.output_path:
        print(f"已写入：{config.output_path}")


if __name__ == "__main__":
    main()

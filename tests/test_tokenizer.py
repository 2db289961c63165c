import pytest

from markov_chain.config import ChainConfig
from markov_chain.core import tokenizer as tokenizer_module
from markov_chain.core.errors import InvalidArgumentError
from markov_chain.core.tokenizer import TokenMask, create_tokenizer


def test_default_mask_takes_two_or_three_chars():
    mask = TokenMask(ChainConfig().regexp_mask)
    assert mask.tokenize("abcdefg") == ["abc", "def"]
    assert mask.tokenize("abcde") == ["abc", "de"]
    assert mask.tokenize("") == []


def test_whole_match_is_the_token():
    mask = TokenMask(r"(\w)\w*")
    assert mask.tokenize("hello big world") == ["hello", "big", "world"]


def test_empty_matches_are_dropped_with_warning():
    mask = TokenMask("a*")
    with pytest.warns(RuntimeWarning):
        assert mask.tokenize("baa") == ["aa"]


def test_invalid_mask():
    with pytest.raises(InvalidArgumentError):
        TokenMask("(")


def test_missing_jieba_falls_back_to_regex(monkeypatch):
    monkeypatch.setattr(tokenizer_module, "_has_jieba", lambda: False)
    with pytest.warns(RuntimeWarning):
        result = create_tokenizer(ChainConfig(tokenizer_backend="jieba"))
    assert isinstance(result, TokenMask)
    assert isinstance(create_tokenizer(ChainConfig(tokenizer_backend="auto")), TokenMask)


def test_unknown_backend():
    with pytest.raises(InvalidArgumentError):
        create_tokenizer(ChainConfig(tokenizer_backend="nope"))


def test_jieba_backend():
    pytest.importorskip("jieba")
    result = create_tokenizer(ChainConfig(tokenizer_backend="jieba"))
    tokens = result.tokenize("我爱北京 天安门")
    assert "".join(tokens) == "我爱北京天安门"
    assert all(token.strip() for token in tokens)

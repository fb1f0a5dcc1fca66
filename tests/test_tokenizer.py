"""
Tests for the delimiter tokenizer.
"""
import pytest

from simple_nat.utils.tokenizer import split_tokens


def test_split_consumes_every_delimiter():
    assert split_tokens("10.0.1.1", ".") == ["10", "0", "1", "1"]


def test_no_delimiter_yields_whole_string():
    assert split_tokens("192.168.0.1:80", ",") == ["192.168.0.1:80"]


def test_empty_fields_are_kept():
    assert split_tokens("a,,b,", ",") == ["a", "", "b", ""]
    assert split_tokens("", ":") == [""]


def test_multi_character_delimiter_is_literal():
    assert split_tokens("a->b->c", "->") == ["a", "b", "c"]
    assert split_tokens("1.2.3", ".*") == ["1.2.3"]


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split_tokens("abc", "")

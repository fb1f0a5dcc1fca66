"""
Delimiter tokenizer shared by the rule, endpoint and address parsers.
"""
from typing import List


def split_tokens(text: str, delimiter: str) -> List[str]:
    """
    Split text on a literal delimiter.

    Every occurrence of the delimiter is consumed and the remainder after the
    last one is kept as the final token, so empty fields survive
    ("a,,b" -> ["a", "", "b"]) and text without the delimiter yields [text].

    Args:
        text: String to split
        delimiter: Non-empty literal separator (no regex semantics)

    Returns:
        Ordered list of tokens
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    return text.split(delimiter)

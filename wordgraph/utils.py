# wordgraph/utils.py
"""
Text normalization helpers shared by indexing and querying.

Documents and queries go through the same folding so their vocabularies can
be compared word-for-word:

    "Hello, World!"  ->  "hello world"  ->  ["hello", "world"]

No stemming and no stop-words: two words match only if their folded forms
are identical.
"""

import re
from typing import List

# Anything that is not a lowercase ASCII letter, a digit or whitespace
_STRIP_PATTERN = re.compile(r"[^a-z0-9\s]")


def normalize_text(text: str) -> str:
    """
    Lowercase the text and drop every non-alphanumeric, non-whitespace char.

    Whitespace is kept as-is (runs of spaces are not collapsed).

    Args:
        text: raw document or query text

    Returns:
        Folded string; "" for "".
    """
    return _STRIP_PATTERN.sub("", text.lower())


def tokenize(text: str) -> List[str]:
    """
    Normalize the text and split it on single spaces.

    Empty text gives [""] and doubled spaces give "" tokens; callers
    rely on this to keep query and document vocabularies consistent.

    Args:
        text: raw document or query text

    Returns:
        List of tokens in text order (may contain duplicates).
    """
    return normalize_text(text).split(" ")

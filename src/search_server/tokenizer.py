"""
Tokenizer for search server text processing.

Splitting rules:
1. Split on the single space character only
2. Keep empty tokens produced by leading, trailing or repeated spaces
3. No lowercasing, no punctuation stripping, no stemming

Documents and queries go through the same function, so a term indexed from a
document is always spelled exactly like the same term typed in a query.
"""

from typing import List

WORD_DELIMITER = " "


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on single spaces.

    Args:
        text: Raw document or query text

    Returns:
        Ordered list of words, possibly containing empty strings

    Examples:
        >>> split_into_words("cat in the city")
        ['cat', 'in', 'the', 'city']

        >>> split_into_words("cat  city")
        ['cat', '', 'city']

        >>> split_into_words("")
        ['']
    """
    return text.split(WORD_DELIMITER)

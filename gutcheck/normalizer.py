"""
Text Normalizer - whitespace cleanup, word list and character count
"""

import re
from typing import List

_WHITESPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Strip the ends and collapse interior whitespace runs to one space"""
    return _WHITESPACE.sub(' ', text.strip())


def words_of(text: str) -> List[str]:
    return [w for w in normalize(text).split(' ') if w]


def char_count(text: str) -> int:
    """Length of the normalized text, spaces included"""
    return len(normalize(text))

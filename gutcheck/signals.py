"""
Gut Check Signals - Boolean structural signals detected from a name

This module handles all text analysis for signal detection. Every
detector is a total predicate: empty or odd Unicode input never raises.
"""

from dataclasses import dataclass
from typing import Dict

from .config import GutcheckConfig, DEFAULT_CONFIG
from .normalizer import normalize, words_of, char_count
from .taxonomies import CAUTION_SIGNALS


@dataclass(frozen=True)
class NameSignals:
    """Signals detected for one candidate name"""
    long: bool
    short: bool
    imagery: bool
    generic: bool
    spelling: bool
    trendy: bool

    @property
    def caution_count(self) -> int:
        """Negative-leaning signals (imagery and short never count)"""
        return sum(getattr(self, name) for name in CAUTION_SIGNALS)

    def to_dict(self) -> Dict:
        return {
            'long': self.long,
            'short': self.short,
            'imagery': self.imagery,
            'generic': self.generic,
            'spelling': self.spelling,
            'trendy': self.trendy,
            'caution_count': self.caution_count,
        }


def detect_signals(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> NameSignals:
    """Run every detector over the text"""

    return NameSignals(
        long=is_long(text, config),
        short=is_short(text, config),
        imagery=has_imagery_word(text, config),
        generic=has_generic_word(text, config),
        spelling=has_hard_to_spell_signals(text, config),
        trendy=has_trend_pattern(text, config),
    )


def is_long(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> bool:
    """Either dimension alone makes a name long"""
    return (
        len(words_of(text)) >= config.long_word_threshold or
        char_count(text) >= config.long_char_threshold
    )


def is_short(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> bool:
    """Both dimensions are required for a name to be short"""
    return (
        len(words_of(text)) <= config.short_word_threshold and
        char_count(text) <= config.short_char_threshold
    )


def has_imagery_word(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> bool:
    """Substring match, so 'starlight' counts for 'star'"""
    text_lower = normalize(text).lower()
    return any(word in text_lower for word in config.imagery_words)


def has_generic_word(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> bool:
    """Exact token match only"""
    tokens = normalize(text).lower().split(' ')
    return any(token in config.generic_words for token in tokens)


def has_hard_to_spell_signals(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> bool:
    """Doubled letters, q without u, uncommon clusters"""
    return any(p.search(text) for p in config.compiled_spelling)


def has_trend_pattern(text: str, config: GutcheckConfig = DEFAULT_CONFIG) -> bool:
    if not config.trend_suffixes:
        return False
    return normalize(text).lower().endswith(config.trend_suffixes)

"""
Gut Check Config - Vocabulary and threshold configuration

Handles:
- Immutable configuration shared by all detectors
- Building a config from partial overrides (dict / JSON file)
- Validating thresholds, patterns and practical style
"""

import re
import json
import logging
from dataclasses import dataclass, field, fields
from typing import Dict, FrozenSet, Tuple

from .errors import ConfigError
from .taxonomies import (
    IMAGERY_WORDS, GENERIC_WORDS, SPELLING_PATTERNS,
    TREND_SUFFIXES, LENGTH_THRESHOLDS, PRACTICAL_STYLES
)

logger = logging.getLogger(__name__)

_THRESHOLD_FIELDS = (
    'long_word_threshold', 'long_char_threshold',
    'short_word_threshold', 'short_char_threshold',
)
_VOCABULARY_FIELDS = ('imagery_words', 'generic_words')
_ORDERED_FIELDS = ('spelling_patterns', 'trend_suffixes')


@dataclass(frozen=True)
class GutcheckConfig:
    """Read-only vocabularies and thresholds for the signal detectors"""
    imagery_words: FrozenSet[str] = frozenset(IMAGERY_WORDS)
    generic_words: FrozenSet[str] = frozenset(GENERIC_WORDS)
    long_word_threshold: int = LENGTH_THRESHOLDS['long']['words']
    long_char_threshold: int = LENGTH_THRESHOLDS['long']['chars']
    short_word_threshold: int = LENGTH_THRESHOLDS['short']['words']
    short_char_threshold: int = LENGTH_THRESHOLDS['short']['chars']
    spelling_patterns: Tuple[str, ...] = tuple(SPELLING_PATTERNS)
    trend_suffixes: Tuple[str, ...] = tuple(TREND_SUFFIXES)
    practical_style: str = 'clauses'

    # Compiled once at construction; not part of equality
    compiled_spelling: Tuple[re.Pattern, ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self):
        for name in _THRESHOLD_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")

        # Short and long bands must not overlap on either dimension
        if self.short_word_threshold >= self.long_word_threshold:
            raise ConfigError(
                f"short_word_threshold ({self.short_word_threshold}) must be below "
                f"long_word_threshold ({self.long_word_threshold})"
            )
        if self.short_char_threshold >= self.long_char_threshold:
            raise ConfigError(
                f"short_char_threshold ({self.short_char_threshold}) must be below "
                f"long_char_threshold ({self.long_char_threshold})"
            )

        if self.practical_style not in PRACTICAL_STYLES:
            raise ConfigError(
                f"Unknown practical_style: '{self.practical_style}'. "
                f"Available: {', '.join(PRACTICAL_STYLES)}"
            )

        # Vocabularies are matched lowercase
        for name in _VOCABULARY_FIELDS:
            words = frozenset(w.lower() for w in getattr(self, name) if w)
            object.__setattr__(self, name, words)
        suffixes = tuple(s.lower() for s in self.trend_suffixes if s)
        object.__setattr__(self, 'trend_suffixes', suffixes)

        compiled = []
        for pattern in self.spelling_patterns:
            try:
                compiled.append(re.compile(pattern, re.IGNORECASE))
            except re.error as e:
                raise ConfigError(f"Invalid spelling pattern {pattern!r}: {e}") from e
        object.__setattr__(self, 'spelling_patterns', tuple(self.spelling_patterns))
        object.__setattr__(self, 'compiled_spelling', tuple(compiled))

    @classmethod
    def from_dict(cls, data: Dict) -> 'GutcheckConfig':
        """Build a config from partial overrides on top of the defaults"""

        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a JSON object, got {type(data).__name__}")

        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown config keys: {', '.join(unknown)}. "
                f"Available: {', '.join(sorted(known))}"
            )

        kwargs = {}
        for key, value in data.items():
            if key in _VOCABULARY_FIELDS or key in _ORDERED_FIELDS:
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise ConfigError(f"{key} must be a list of strings")
                if not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"{key} must be a list of strings")
                value = frozenset(value) if key in _VOCABULARY_FIELDS else tuple(value)
            kwargs[key] = value

        return cls(**kwargs)

    def to_dict(self) -> Dict:
        """JSON-ready view (sorted vocabularies, ordered lists kept in order)"""
        return {
            'imagery_words': sorted(self.imagery_words),
            'generic_words': sorted(self.generic_words),
            'long_word_threshold': self.long_word_threshold,
            'long_char_threshold': self.long_char_threshold,
            'short_word_threshold': self.short_word_threshold,
            'short_char_threshold': self.short_char_threshold,
            'spelling_patterns': list(self.spelling_patterns),
            'trend_suffixes': list(self.trend_suffixes),
            'practical_style': self.practical_style,
        }


DEFAULT_CONFIG = GutcheckConfig()


def load_config(config_path: str) -> GutcheckConfig:
    """Load config overrides from a JSON file"""

    with open(config_path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e

    config = GutcheckConfig.from_dict(data)

    logger.info(
        "Loaded config from %s (%d imagery words, %d generic words, %d spelling patterns)",
        config_path, len(config.imagery_words), len(config.generic_words),
        len(config.spelling_patterns)
    )
    return config

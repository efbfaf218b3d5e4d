"""
Tests for the normalizer and signal detectors

Covers:
- Whitespace normalization (idempotence, word list, char count)
- Length thresholds at their edges
- Imagery (substring) vs generic (exact token) matching
- Spelling and trend heuristics
- Empty input
"""

import pytest
from gutcheck import (
    GutcheckConfig,
    normalize,
    words_of,
    char_count,
    detect_signals,
    is_long,
    is_short,
    has_imagery_word,
    has_generic_word,
    has_hard_to_spell_signals,
    has_trend_pattern,
)


SAMPLE_TEXTS = [
    "",
    "   ",
    "Lantern Ridge",
    "  Lantern   Ridge  ",
    "\tNova\n Labs ",
    "\u00a0Ember\u2003Works\u00a0",
    "Synergy Solutions Group Labs",
    "a",
]


class TestNormalizer:
    """Test whitespace normalization"""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, text):
        assert normalize(normalize(text)) == normalize(text)

    def test_collapses_interior_whitespace(self):
        assert normalize("  Lantern \t\n  Ridge ") == "Lantern Ridge"

    def test_unicode_spaces(self):
        assert normalize("\u00a0Ember\u2003\u2009Works\u00a0") == "Ember Works"

    def test_whitespace_only_is_empty(self):
        assert normalize(" \t\n ") == ""

    def test_words_of(self):
        assert words_of("  Lantern   Ridge ") == ["Lantern", "Ridge"]

    def test_words_of_empty(self):
        assert words_of("") == []
        assert words_of("    ") == []

    def test_char_count_counts_normalized_spaces(self):
        assert char_count("  Lantern   Ridge ") == 13


class TestLength:
    """Test long/short thresholds"""

    def test_four_words_is_long(self):
        assert is_long("one two three four")

    def test_three_short_words_not_long(self):
        assert not is_long("one two three")

    def test_exactly_28_chars_is_long(self):
        text = "abcdefghij abcdefghij abcdef"
        assert char_count(text) == 28
        assert is_long(text)

    def test_27_chars_not_long(self):
        text = "abcdefghij abcdefghij abcde"
        assert char_count(text) == 27
        assert not is_long(text)

    def test_two_words_18_chars_is_short(self):
        text = "abcdefgh abcdefghi"
        assert char_count(text) == 18
        assert is_short(text)

    def test_19_chars_not_short(self):
        text = "abcdefgh abcdefghij"
        assert char_count(text) == 19
        assert not is_short(text)

    def test_three_words_not_short(self):
        assert not is_short("a b c")

    @pytest.mark.parametrize("words", range(0, 7))
    @pytest.mark.parametrize("chars", [1, 5, 17, 18, 19, 27, 28, 29, 40])
    def test_never_both_long_and_short(self, words, chars):
        if words == 0:
            text = ""
        else:
            # words separated by single spaces, padded to roughly `chars`
            per_word = max(1, (chars - (words - 1)) // words)
            text = " ".join(["x" * per_word] * words)
        assert not (is_long(text) and is_short(text))

    def test_custom_thresholds(self):
        config = GutcheckConfig(long_word_threshold=3)
        assert is_long("one two three", config)


class TestVocabulary:
    """Test imagery and generic word matching"""

    def test_imagery_word(self):
        assert has_imagery_word("Lantern Ridge")

    def test_imagery_is_substring_match(self):
        assert has_imagery_word("Starlight")

    def test_imagery_case_insensitive(self):
        assert has_imagery_word("MOONBEAM")

    def test_no_imagery(self):
        assert not has_imagery_word("Zoox")

    def test_generic_token(self):
        assert has_generic_word("Acme Solutions")
        assert has_generic_word("Bright CO")

    def test_generic_requires_exact_token(self):
        assert not has_generic_word("Solutionsy")
        assert not has_generic_word("Mediaworks")

    def test_alternative_vocabulary(self):
        config = GutcheckConfig(imagery_words=frozenset({'pixel'}))
        assert has_imagery_word("Pixel Forge", config)
        assert not has_imagery_word("Lantern Ridge", config)


class TestSpelling:
    """Test hard-to-spell heuristics"""

    def test_doubled_letter(self):
        assert has_hard_to_spell_signals("Zoox")

    def test_q_without_u(self):
        assert has_hard_to_spell_signals("Qatar")

    def test_q_with_u_is_fine(self):
        assert not has_hard_to_spell_signals("Quest")

    def test_uncommon_cluster(self):
        assert has_hard_to_spell_signals("Blitz")
        assert has_hard_to_spell_signals("Kaeil")

    def test_plain_name(self):
        assert not has_hard_to_spell_signals("Lantern Ridge")


class TestTrend:
    """Test trend suffix matching"""

    def test_trend_suffix(self):
        assert has_trend_pattern("Pixel Labs")
        assert has_trend_pattern("pixel HUB")

    def test_suffix_not_token(self):
        assert has_trend_pattern("Matlab")

    def test_prefix_does_not_count(self):
        assert not has_trend_pattern("Studio Nine")

    def test_trailing_whitespace_ignored(self):
        assert has_trend_pattern("Pixel Labs   ")


class TestDetectSignals:
    """Test the combined signal record"""

    def test_empty_string(self):
        signals = detect_signals("")
        assert signals.short
        assert not signals.long
        assert not signals.imagery
        assert not signals.generic
        assert not signals.spelling
        assert not signals.trendy
        assert signals.caution_count == 0

    @pytest.mark.parametrize("text", SAMPLE_TEXTS + ["Zoox", "Qatar Labs Group Media Hub"])
    def test_caution_count_matches_flags(self, text):
        signals = detect_signals(text)
        expected = sum([signals.long, signals.spelling, signals.generic, signals.trendy])
        assert signals.caution_count == expected
        assert 0 <= signals.caution_count <= 4

    def test_imagery_and_short_never_count(self):
        signals = detect_signals("Ember")
        assert signals.short and signals.imagery
        assert signals.caution_count == 0

    def test_to_dict(self):
        data = detect_signals("Pixel Labs").to_dict()
        assert data['trendy'] is True
        assert data['generic'] is True
        assert data['caution_count'] == 2

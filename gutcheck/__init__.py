"""
Name Gut Check Package v1.0

Rule-based structural feedback for short candidate names:
- Signals: long, short, imagery, generic, spelling, trendy
- Caution count (long + spelling + generic + trendy) drives the gut check
- Two-name comparison with a fixed tie-break policy

Usage:
    from gutcheck import NameEvaluator

    evaluator = NameEvaluator()
    result = evaluator.evaluate("Lantern Ridge")
    print(result.memorability)

    report = evaluator.compare("Zoox", "Quaze Labs Solutions")
    print(report.comparison.summary, report.preferred_name)
"""

from .config import GutcheckConfig, DEFAULT_CONFIG, load_config
from .errors import GutcheckError, MissingNameError, ConfigError
from .normalizer import normalize, words_of, char_count
from .signals import (
    NameSignals, detect_signals,
    is_long, is_short, has_imagery_word, has_generic_word,
    has_hard_to_spell_signals, has_trend_pattern
)
from .scoring import caution_flags, gutcheck_tier, score_signals
from .feedback import NarrativeRule, build_rules, generate_feedback
from .comparison import (
    ComparisonResult, rank_candidates,
    compare_summary, pick_better_name, compare_results
)
from .evaluator import NameEvaluator, EvaluationResult, CompareReport, evaluate_name
from .links import build_next_step_links

__version__ = '1.0.0'

__all__ = [
    'NameEvaluator',
    'EvaluationResult',
    'CompareReport',
    'ComparisonResult',
    'NameSignals',
    'NarrativeRule',
    'GutcheckConfig',
    'DEFAULT_CONFIG',
    'GutcheckError',
    'MissingNameError',
    'ConfigError',
    'load_config',
    'normalize',
    'words_of',
    'char_count',
    'detect_signals',
    'is_long',
    'is_short',
    'has_imagery_word',
    'has_generic_word',
    'has_hard_to_spell_signals',
    'has_trend_pattern',
    'caution_flags',
    'gutcheck_tier',
    'score_signals',
    'build_rules',
    'generate_feedback',
    'evaluate_name',
    'rank_candidates',
    'compare_summary',
    'pick_better_name',
    'compare_results',
    'build_next_step_links',
]

"""
Gut Check Comparison - pick between two evaluated names

One tie-break policy feeds both the summary text and the preferred name:
1. Lower caution count wins ("structurally smoother")
2. Tied caution: the only short name wins ("slightly easier to use")
3. Otherwise no winner; the preferred name falls back to A
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Tuple

if TYPE_CHECKING:
    from .evaluator import EvaluationResult

logger = logging.getLogger(__name__)

REASON_CAUTION = 'caution'
REASON_SHORT = 'short'
REASON_TIE = 'tie'

SMOOTHER_TEXT = 'Between the two, "{name}" appears structurally smoother with fewer practical trade-offs.'
EASIER_TEXT = 'Both options are broadly workable. "{name}" may be slightly easier to use and remember in everyday contexts.'
TIE_TEXT = "Both options appear structurally similar. The better choice may depend on audience fit and how you plan to present it."


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two names"""
    summary: str
    preferred_name: str
    reason: str  # "caution", "short", "tie"

    def to_dict(self) -> Dict:
        return {
            'comparison_summary': self.summary,
            'preferred_name': self.preferred_name,
            'reason': self.reason,
        }


def rank_candidates(
    result_a: 'EvaluationResult',
    result_b: 'EvaluationResult'
) -> Tuple[Optional[int], str]:
    """
    Apply the tie-break policy

    Returns: (winner, reason) where winner is 0 for A, 1 for B, None on a full tie
    """
    a, b = result_a.signals, result_b.signals

    if a.caution_count < b.caution_count:
        return 0, REASON_CAUTION
    if b.caution_count < a.caution_count:
        return 1, REASON_CAUTION

    if a.short and not b.short:
        return 0, REASON_SHORT
    if b.short and not a.short:
        return 1, REASON_SHORT

    return None, REASON_TIE


def compare_summary(name_a: str, result_a: 'EvaluationResult',
                    name_b: str, result_b: 'EvaluationResult') -> str:
    winner, reason = rank_candidates(result_a, result_b)
    if winner is None:
        return TIE_TEXT

    name = name_a if winner == 0 else name_b
    template = SMOOTHER_TEXT if reason == REASON_CAUTION else EASIER_TEXT
    return template.format(name=name)


def pick_better_name(name_a: str, result_a: 'EvaluationResult',
                     name_b: str, result_b: 'EvaluationResult') -> str:
    """Name to carry forward (e.g. into the domain link); A on a full tie"""
    winner, _ = rank_candidates(result_a, result_b)
    return name_b if winner == 1 else name_a


def compare_results(name_a: str, result_a: 'EvaluationResult',
                    name_b: str, result_b: 'EvaluationResult') -> ComparisonResult:
    """Summary and preferred name from the same ranking"""

    _, reason = rank_candidates(result_a, result_b)
    comparison = ComparisonResult(
        summary=compare_summary(name_a, result_a, name_b, result_b),
        preferred_name=pick_better_name(name_a, result_a, name_b, result_b),
        reason=reason,
    )

    logger.debug(
        "Compared %r (caution %d) with %r (caution %d): preferred %r by %s",
        name_a, result_a.signals.caution_count,
        name_b, result_b.signals.caution_count,
        comparison.preferred_name, reason
    )
    return comparison

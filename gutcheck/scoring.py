"""
Gut Check Scoring - caution flags and the three-tier gut check

caution_count 0 -> sound, 1 -> refine, 2+ -> mixed
"""

from typing import List, Tuple

from .signals import NameSignals
from .taxonomies import CAUTION_SIGNALS, GUTCHECK_TIERS


def caution_flags(signals: NameSignals) -> List[str]:
    """Names of the caution signals that fired, in fixed order"""
    return [name for name in CAUTION_SIGNALS if getattr(signals, name)]


def gutcheck_tier(caution_count: int) -> str:
    if caution_count <= 0:
        return 'sound'
    elif caution_count == 1:
        return 'refine'
    else:
        return 'mixed'


def score_signals(signals: NameSignals) -> Tuple[int, str, str]:
    """
    Returns: (caution_count, tier, tier_label)
    """
    count = signals.caution_count
    tier = gutcheck_tier(count)
    return count, tier, GUTCHECK_TIERS[tier]

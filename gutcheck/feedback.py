"""
Gut Check Feedback Generation

Turns a name's signals into four narrative judgments: memorability,
clarity, practical and gutcheck.

Each field is built by walking an ordered rule list. A rule whose
condition holds either overwrites the field or appends a clause to it,
so later rules take precedence (e.g. 'long' overrides 'short'/'imagery'
for memorability).
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from .config import GutcheckConfig, DEFAULT_CONFIG
from .scoring import caution_flags, gutcheck_tier
from .signals import NameSignals

OVERWRITE = 'overwrite'
APPEND = 'append'

FEEDBACK_FIELDS = ('memorability', 'clarity', 'practical', 'gutcheck')

# ==================== NARRATIVE TEXT ====================

MEMORABILITY_MIXED = (
    "The name has some memorable elements, though certain aspects of its "
    "structure may make it slightly harder to retain at first."
)
MEMORABILITY_EASY = (
    "The name is relatively easy to remember, supported by its structure "
    "and overall feel."
)
MEMORABILITY_VISUAL = (
    "The use of visual language supports memorability by giving the mind "
    "something concrete to hold onto."
)
MEMORABILITY_HARD = (
    "The name may be harder to remember on first exposure, as its length "
    "offers fewer natural memory anchors."
)

CLARITY_MOOD = (
    "The name suggests a mood or style, though it may not immediately "
    "communicate what it represents without additional context."
)
CLARITY_TONE = (
    "The name gives a general sense of tone or direction, helping new "
    "audiences form an initial impression."
)

PRACTICAL_SMOOTH = (
    "There are no obvious structural concerns. The name should function "
    "smoothly in everyday use."
)
PRACTICAL_WORKABLE = (
    "The name is workable in practical terms, though certain elements may "
    "require occasional clarification in spelling or wording."
)
PRACTICAL_CLAUSES = {
    'spelling': (
        "Some parts may be difficult to spell on first hearing, which could "
        "create minor friction in search or sharing."
    ),
    'generic': (
        "One or more terms are commonly used, which may reduce distinctiveness "
        "but does not prevent effective use."
    ),
    'trendy': (
        "The structure follows a currently popular pattern that may date more "
        "quickly over time."
    ),
}
# Noun phrases for the single-sentence practical style
PRACTICAL_CONCERNS = {
    'spelling': "its spelling",
    'generic': "its commonly used terms",
    'trendy': "its currently popular structure",
}

GUTCHECK_TEXT = {
    'sound': (
        "Gut check: The name feels structurally sound with manageable "
        "trade-offs. It is likely workable in most contexts."
    ),
    'refine': (
        "Gut check: The name has several strengths, with a few areas that may "
        "benefit from refinement depending on your goals."
    ),
    'mixed': (
        "Gut check: The name presents a mix of strengths and trade-offs. It is "
        "usable as-is, though adjustments could improve clarity or memorability."
    ),
}


# ==================== RULES ====================

@dataclass(frozen=True)
class NarrativeRule:
    """condition -> overwrite | append for one feedback field"""
    field: str
    condition: Callable[[NameSignals], bool]
    text: Union[str, Callable[[NameSignals], str]]
    mode: str = OVERWRITE

    def render(self, signals: NameSignals) -> str:
        return self.text(signals) if callable(self.text) else self.text


def _always(signals: NameSignals) -> bool:
    return True


def _has_practical_concern(signals: NameSignals) -> bool:
    return signals.spelling or signals.generic or signals.trendy


def _practical_flags(signals: NameSignals) -> List[str]:
    return [f for f in caution_flags(signals) if f in PRACTICAL_CLAUSES]


def _combined_practical(signals: NameSignals) -> str:
    concerns = [PRACTICAL_CONCERNS[f] for f in _practical_flags(signals)]
    if len(concerns) > 1:
        joined = ", ".join(concerns[:-1]) + " and " + concerns[-1]
    else:
        joined = concerns[0]
    return (
        f"The name is workable in practical terms, though {joined} may "
        f"require occasional clarification."
    )


MEMORABILITY_RULES = [
    NarrativeRule('memorability', _always, MEMORABILITY_MIXED),
    NarrativeRule('memorability', lambda s: s.short or s.imagery, MEMORABILITY_EASY),
    NarrativeRule('memorability', lambda s: s.imagery, MEMORABILITY_VISUAL, APPEND),
    NarrativeRule('memorability', lambda s: s.long, MEMORABILITY_HARD),
]

CLARITY_RULES = [
    NarrativeRule('clarity', _always, CLARITY_MOOD),
    NarrativeRule('clarity', lambda s: s.imagery, CLARITY_TONE),
]

PRACTICAL_CLAUSE_RULES = [
    NarrativeRule('practical', _always, PRACTICAL_SMOOTH),
    NarrativeRule('practical', _has_practical_concern, PRACTICAL_WORKABLE),
    NarrativeRule('practical', lambda s: s.spelling, PRACTICAL_CLAUSES['spelling'], APPEND),
    NarrativeRule('practical', lambda s: s.generic, PRACTICAL_CLAUSES['generic'], APPEND),
    NarrativeRule('practical', lambda s: s.trendy, PRACTICAL_CLAUSES['trendy'], APPEND),
]

PRACTICAL_COMBINED_RULES = [
    NarrativeRule('practical', _always, PRACTICAL_SMOOTH),
    NarrativeRule('practical', _has_practical_concern, _combined_practical),
]

GUTCHECK_RULES = [
    NarrativeRule('gutcheck', _always, GUTCHECK_TEXT['sound']),
    NarrativeRule('gutcheck', lambda s: gutcheck_tier(s.caution_count) == 'refine', GUTCHECK_TEXT['refine']),
    NarrativeRule('gutcheck', lambda s: gutcheck_tier(s.caution_count) == 'mixed', GUTCHECK_TEXT['mixed']),
]


def build_rules(practical_style: str = 'clauses') -> List[NarrativeRule]:
    """Full ordered rule list for the given practical style"""
    practical = PRACTICAL_COMBINED_RULES if practical_style == 'combined' else PRACTICAL_CLAUSE_RULES
    return MEMORABILITY_RULES + CLARITY_RULES + practical + GUTCHECK_RULES


def apply_rules(rules: List[NarrativeRule], signals: NameSignals) -> Dict[str, str]:
    """Walk the rules in order, overwriting or appending per field"""

    feedback = {name: "" for name in FEEDBACK_FIELDS}

    for rule in rules:
        if not rule.condition(signals):
            continue
        text = rule.render(signals)
        if rule.mode == APPEND and feedback.get(rule.field):
            feedback[rule.field] += " " + text
        else:
            feedback[rule.field] = text

    return feedback


def generate_feedback(
    signals: NameSignals,
    config: GutcheckConfig = DEFAULT_CONFIG
) -> Dict[str, str]:
    """
    Generate all four judgments for one name

    Returns:
        Dict with memorability, clarity, practical, gutcheck
    """
    return apply_rules(build_rules(config.practical_style), signals)

"""
Gut Check Evaluator - Main evaluation class

This is the primary interface. It coordinates:
- Name validation (the only failure callers see)
- Signal detection
- Scoring (caution count, gut check tier)
- Feedback generation
- Two-name comparison
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from .comparison import ComparisonResult, compare_results
from .config import GutcheckConfig, DEFAULT_CONFIG
from .errors import MissingNameError
from .feedback import generate_feedback
from .links import build_next_step_links
from .normalizer import normalize
from .scoring import score_signals
from .signals import NameSignals, detect_signals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Complete evaluation output for one name"""
    name: str  # normalized
    signals: NameSignals
    memorability: str
    clarity: str
    practical: str
    gutcheck: str
    tier: str  # "sound", "refine", "mixed"

    @property
    def caution_count(self) -> int:
        return self.signals.caution_count

    @property
    def feedback(self) -> Dict[str, str]:
        return {
            'memorability': self.memorability,
            'clarity': self.clarity,
            'practical': self.practical,
            'gutcheck': self.gutcheck,
        }

    def to_dict(self) -> Dict:
        data = {'normalized_name': self.name}
        data.update(self.feedback)
        data['tier'] = self.tier
        data['caution_count'] = self.caution_count
        data['signals'] = self.signals.to_dict()
        return data


@dataclass(frozen=True)
class CompareReport:
    """Two evaluations plus the comparison between them"""
    result_a: EvaluationResult
    result_b: EvaluationResult
    comparison: ComparisonResult

    @property
    def preferred_name(self) -> str:
        return self.comparison.preferred_name

    def to_dict(self) -> Dict:
        return {
            'a': self.result_a.to_dict(),
            'b': self.result_b.to_dict(),
            'comparison_summary': self.comparison.summary,
            'preferred_name': self.comparison.preferred_name,
        }


def evaluate_name(name: str, config: GutcheckConfig = DEFAULT_CONFIG) -> EvaluationResult:
    """
    Evaluate one name. Total over every string, including ''.

    Detectors run on the normalized name, so stray whitespace never
    reads as a doubled character.
    """

    normalized = normalize(name)
    signals = detect_signals(normalized, config)
    _, tier, _ = score_signals(signals)
    feedback = generate_feedback(signals, config)

    logger.debug("Evaluated %r: %s", normalized, signals.to_dict())

    return EvaluationResult(
        name=normalized,
        signals=signals,
        memorability=feedback['memorability'],
        clarity=feedback['clarity'],
        practical=feedback['practical'],
        gutcheck=feedback['gutcheck'],
        tier=tier,
    )


def validate_name(name: Optional[str], field: str = 'name') -> str:
    """Normalized name, or MissingNameError when blank"""
    normalized = normalize(name or '')
    if not normalized:
        logger.warning("Rejected request: missing %s", field)
        raise MissingNameError(field)
    return normalized


class NameEvaluator:
    """
    Main evaluator class

    Usage:
        evaluator = NameEvaluator()
        result = evaluator.evaluate("Lantern Ridge")
        print(result.memorability)

        report = evaluator.compare("Zoox", "Quaze Labs Solutions")
        print(report.preferred_name)
    """

    def __init__(self, config: GutcheckConfig = DEFAULT_CONFIG):
        self.config = config

    def evaluate(self, name: Optional[str]) -> EvaluationResult:
        """
        Single mode

        Raises:
            MissingNameError: name is empty or whitespace-only
        """
        return evaluate_name(validate_name(name, 'name'), self.config)

    def compare(self, name_a: Optional[str], name_b: Optional[str]) -> CompareReport:
        """
        Compare mode. Both names are validated before either is evaluated.

        Raises:
            MissingNameError: either name is empty or whitespace-only
        """
        normalized_a = validate_name(name_a, 'name_a')
        normalized_b = validate_name(name_b, 'name_b')

        result_a = evaluate_name(normalized_a, self.config)
        result_b = evaluate_name(normalized_b, self.config)
        comparison = compare_results(normalized_a, result_a, normalized_b, result_b)

        return CompareReport(result_a=result_a, result_b=result_b, comparison=comparison)

    def evaluate_batch(self, names: Iterable[str]) -> Dict[str, EvaluationResult]:
        """
        Evaluate multiple names, skipping blanks

        Returns:
            Dict of {normalized_name: EvaluationResult}
        """
        results = {}
        for name in names:
            normalized = normalize(name or '')
            if not normalized:
                logger.warning("Skipping blank name in batch")
                continue
            results[normalized] = evaluate_name(normalized, self.config)
        return results

    def generate_report(self, result: EvaluationResult) -> str:
        """
        Markdown report card for one name

        Args:
            result: EvaluationResult from evaluate()
        """

        report = f"""# Name Gut Check: {result.name}

## Memorability

{result.memorability}

## Clarity

{result.clarity}

## Practical Use

{result.practical}

---

**{result.gutcheck}**

{_format_links(result.name)}"""

        return report

    def generate_comparison_report(self, report: CompareReport) -> str:
        """Side-by-side markdown for two names"""

        sections = []
        for label, result in (('A', report.result_a), ('B', report.result_b)):
            sections.append(f"""## Option {label}: {result.name}

- **Memorability:** {result.memorability}
- **Clarity:** {result.clarity}
- **Practical use:** {result.practical}
- **{result.gutcheck}**
""")

        body = "\n".join(sections)
        summary = f"""# Name Gut Check: {report.result_a.name} vs {report.result_b.name}

{body}
---

## Comparison

{report.comparison.summary}

**Preferred name:** {report.preferred_name}

{_format_links(report.preferred_name)}"""

        return summary


def _format_links(name: str) -> str:
    links = build_next_step_links(name)
    return f"""## Next Steps

- Check domain availability: {links['domain']}
- Build a landing page: {links['landing_page']}
- Sketch a logo: {links['logo']}
- Search trademarks: {links['trademark']}
"""

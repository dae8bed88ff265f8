"""
Scoring Policies

The named rules that decide a dormer's raw score on one criterion and whether
that score leaves a trace in the results:

- SUBJECTIVE PRECEDES OBJECTIVE: when peer (subjective) scores exist for a
  (dormer, criterion) pair, any objective score for the same pair is ignored.
- ZERO SCORES PRODUCE NO ROW: a raw score <= 0 emits no per-criterion row,
  and a dormer whose total is <= 0 gets no result row.
"""

from typing import List, Optional

from .contracts import PeriodCriterion, SubjectiveScore, ObjectiveScore


def mean_score(scores: List[SubjectiveScore]) -> float:
    """Plain arithmetic mean across evaluators. Missing scores count as 0."""
    if not scores:
        return 0.0
    return sum((s.score or 0) for s in scores) / len(scores)


def resolve_raw_score(
    subjective: List[SubjectiveScore],
    objective: Optional[ObjectiveScore]
) -> float:
    """Apply subjective-precedes-objective to one (dormer, criterion) pair."""
    if subjective:
        return mean_score(subjective)
    if objective is not None:
        return objective.score or 0.0
    return 0.0


def weighted_score(raw_score: float, period_criterion: PeriodCriterion) -> float:
    """Normalize against max score, then scale by the percentage weight."""
    normalized = raw_score / period_criterion.max_score
    return normalized * period_criterion.weight


def emits_criterion_row(raw_score: float) -> bool:
    return raw_score > 0


def emits_result_row(total_weighted_score: float) -> bool:
    return total_weighted_score > 0

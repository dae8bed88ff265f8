"""
Results Aggregator

Combines subjective and objective scores into weighted per-criterion scores
and per-dormer totals for one evaluation period.

Pure compute step: NO DB reads, NO DB writes.
"""

from collections import defaultdict
from typing import Dict, List, Tuple

from .contracts import (
    Dormer,
    PeriodCriterion,
    SubjectiveScore,
    ObjectiveScore,
    ResultPerCriterion,
    Result,
    AggregationOutput,
)
from .policies import (
    resolve_raw_score,
    weighted_score,
    emits_criterion_row,
    emits_result_row,
)

PairKey = Tuple[str, str]  # (period_criteria_id, target_dormer_id)


def _index_subjective(
    scores: List[SubjectiveScore],
    period_id: str
) -> Dict[PairKey, List[SubjectiveScore]]:
    index: Dict[PairKey, List[SubjectiveScore]] = defaultdict(list)
    for s in scores:
        if s.evaluation_period_id != period_id:
            continue
        index[(s.period_criteria_id, s.target_dormer_id)].append(s)
    return index


def _index_objective(
    scores: List[ObjectiveScore],
    period_id: str
) -> Dict[PairKey, ObjectiveScore]:
    index: Dict[PairKey, ObjectiveScore] = {}
    for s in scores:
        if s.evaluation_period_id != period_id:
            continue
        # at most one row per pair is expected; the first one wins
        index.setdefault((s.period_criteria_id, s.target_dormer_id), s)
    return index


def aggregate_period(
    evaluation_period_id: str,
    dormers: List[Dormer],
    period_criteria: List[PeriodCriterion],
    subjective_scores: List[SubjectiveScore],
    objective_scores: List[ObjectiveScore]
) -> AggregationOutput:
    """
    Compute weighted scores per (dormer, criterion) and totals per dormer.

    Args:
        evaluation_period_id: Period being aggregated
        dormers: All residents
        period_criteria: Criteria attached to the period, with weight and max score
        subjective_scores: Peer scores for the period
        objective_scores: Authoritative scores for the period

    Returns:
        AggregationOutput with rows ordered by dormer, then period criterion
    """
    subjective_index = _index_subjective(subjective_scores, evaluation_period_id)
    objective_index = _index_objective(objective_scores, evaluation_period_id)

    results_per_criteria: List[ResultPerCriterion] = []
    results: List[Result] = []

    for dormer in dormers:
        dormer_rows: List[ResultPerCriterion] = []

        for pc in period_criteria:
            key = (pc.id, dormer.id)
            raw_score = resolve_raw_score(
                subjective_index.get(key, []),
                objective_index.get(key),
            )
            if not emits_criterion_row(raw_score):
                continue

            dormer_rows.append(ResultPerCriterion(
                period_criteria_id=pc.id,
                target_dormer_id=dormer.id,
                total_score=weighted_score(raw_score, pc),
                evaluation_period_id=evaluation_period_id,
            ))

        results_per_criteria.extend(dormer_rows)

        total_weighted_score = sum(row.total_score for row in dormer_rows)
        if emits_result_row(total_weighted_score):
            results.append(Result(
                target_dormer_id=dormer.id,
                total_weighted_score=total_weighted_score,
                evaluation_period_id=evaluation_period_id,
            ))

    return AggregationOutput(
        evaluation_period_id=evaluation_period_id,
        results_per_criteria=results_per_criteria,
        results=results,
    )

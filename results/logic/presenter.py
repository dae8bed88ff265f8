"""
Results Presenter

Joins stored results with dormers for display: room filter, sort by score,
display rounding. Stored totals are never modified.
"""

from typing import List, Dict, Optional

from .contracts import (
    Dormer,
    PeriodCriterion,
    Result,
    ResultPerCriterion,
    RankedResult,
    CriterionBreakdown,
)
from .constants import (
    SortOrder,
    DEFAULT_SORT_ORDER,
    DISPLAY_PRECISION,
    ALL_ROOMS,
    UNKNOWN_DORMER_NAME,
)


def parse_sort_order(order: Optional[str]) -> SortOrder:
    """Raises ValueError for anything other than 'asc' or 'desc'."""
    if not order:
        return DEFAULT_SORT_ORDER
    try:
        return SortOrder(order.lower())
    except ValueError:
        raise ValueError(f"Invalid sort order: {order!r} (expected 'asc' or 'desc')")


def unique_rooms(dormers: List[Dormer]) -> List[str]:
    return sorted({d.room for d in dormers if d.room})


def present_results(
    results: List[Result],
    dormers: List[Dormer],
    room: Optional[str] = None,
    order: Optional[str] = None
) -> List[RankedResult]:
    """
    Build the display list of a period's results.

    Args:
        results: Stored results of the period
        dormers: All dormers, used for names and rooms
        room: Only keep dormers of this room ('all' or None keeps everyone)
        order: 'desc' (default, best first) or 'asc'

    Returns:
        List of RankedResult sorted by total weighted score
    """
    sort_order = parse_sort_order(order)
    by_id: Dict[str, Dormer] = {d.id: d for d in dormers}

    ranked: List[RankedResult] = []
    for r in results:
        dormer = by_id.get(r.target_dormer_id)
        if room and room != ALL_ROOMS:
            if dormer is None or dormer.room != room:
                continue
        ranked.append(RankedResult(
            target_dormer_id=r.target_dormer_id,
            dormer_name=dormer.full_name if dormer else UNKNOWN_DORMER_NAME,
            room=dormer.room if dormer else None,
            total_weighted_score=r.total_weighted_score,
            display_score=round(r.total_weighted_score, DISPLAY_PRECISION),
        ))

    ranked.sort(
        key=lambda x: x.total_weighted_score,
        reverse=(sort_order == SortOrder.DESC),
    )
    return ranked


def present_criteria_breakdown(
    rows: List[ResultPerCriterion],
    period_criteria: List[PeriodCriterion],
    dormer_id: Optional[str] = None
) -> List[CriterionBreakdown]:
    criteria_by_id = {pc.id: pc for pc in period_criteria}
    breakdown = []
    for row in rows:
        if dormer_id and row.target_dormer_id != dormer_id:
            continue
        pc = criteria_by_id.get(row.period_criteria_id)
        breakdown.append(CriterionBreakdown(
            period_criteria_id=row.period_criteria_id,
            target_dormer_id=row.target_dormer_id,
            weight=pc.weight if pc else None,
            max_score=pc.max_score if pc else None,
            total_score=row.total_score,
            display_score=round(row.total_score, DISPLAY_PRECISION),
        ))
    return breakdown

"""
Results API Routes

Exposes the results aggregation engine via REST API.
Recompute endpoint: POST /results/{period_id}/recompute
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_session
from .logic.adapter import (
    list_dormers,
    list_period_criteria,
    list_evaluation_periods,
    fetch_results,
    fetch_results_per_criteria,
)
from .logic.errors import AggregationError
from .logic.presenter import (
    parse_sort_order,
    present_results,
    present_criteria_breakdown,
    unique_rooms,
)
from .logic.runner import recompute_period_results

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/results", tags=["results"])


def _check_order(order: Optional[str]) -> None:
    try:
        parse_sort_order(order)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# HEALTH CHECK / PERIODS
# =============================================================================

@router.get("/health", summary="Results engine health check")
def health_check():
    """Check if results engine is operational."""
    return {"status": "ok", "engine": "results", "version": "1.0.0"}


@router.get("/periods", summary="List evaluation periods")
def get_periods(db: Session = Depends(get_session)):
    """Evaluation periods, newest first."""
    periods = list_evaluation_periods(db)
    return {"periods": [p.model_dump() for p in periods]}


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/{period_id}/recompute", summary="Recompute results of a period")
def recompute_results(
    period_id: str,
    room: Optional[str] = Query(default=None),
    order: Optional[str] = Query(default="desc"),
    db: Session = Depends(get_session)
):
    """
    Clear and recompute a period's results, then return them ranked.

    **Response (200):**
    - Ranked results (filtered by `room`, sorted by `order`)
    - Row counts of both output tables

    **Response (500):** the aggregation failed and was rolled back;
    `results` holds the previously persisted rows.
    """
    _check_order(order)
    try:
        output = recompute_period_results(db, period_id)
    except AggregationError as e:
        logger.error(f"Failed to update results for period {period_id}: {e}")
        previous = present_results(fetch_results(db, period_id), list_dormers(db), room, order)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to update results",
                "stage": e.stage.value,
                "detail": e.message,
                "results": [r.model_dump() for r in previous],
            },
        )

    ranked = present_results(output.results, list_dormers(db), room, order)
    return {
        "evaluation_period_id": period_id,
        "summary": {
            "results_per_criteria": len(output.results_per_criteria),
            "results": len(output.results),
        },
        "results": [r.model_dump() for r in ranked],
    }


@router.get("/{period_id}", summary="Get stored results of a period")
def get_results(
    period_id: str,
    room: Optional[str] = Query(default=None),
    order: Optional[str] = Query(default="desc"),
    db: Session = Depends(get_session)
):
    _check_order(order)
    dormers = list_dormers(db)
    ranked = present_results(fetch_results(db, period_id), dormers, room, order)
    return {
        "evaluation_period_id": period_id,
        "rooms": unique_rooms(dormers),
        "results": [r.model_dump() for r in ranked],
    }


@router.get("/{period_id}/criteria", summary="Get per-criterion results of a period")
def get_results_per_criteria(
    period_id: str,
    dormer_id: Optional[str] = Query(default=None),
    db: Session = Depends(get_session)
):
    rows = fetch_results_per_criteria(db, period_id, dormer_id)
    breakdown = present_criteria_breakdown(rows, list_period_criteria(db, period_id), dormer_id)
    return {
        "evaluation_period_id": period_id,
        "results_per_criteria": [b.model_dump() for b in breakdown],
    }

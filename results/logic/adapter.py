"""
Stores Adapter for the Results Engine

Reads the four input record streams of an evaluation period and writes the two
output tables. Converts ORM rows to the engine's contracts.

This is a pure READ + WRITE layer:
- NO scoring logic
- NO error translation (SQLAlchemy errors propagate to the runner)
"""

import logging
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from results.models import (
    Dormer as DormerRow,
    EvaluationPeriod as EvaluationPeriodRow,
    PeriodCriterion as PeriodCriterionRow,
    SubjectiveScore as SubjectiveScoreRow,
    ObjectiveScore as ObjectiveScoreRow,
    ResultPerCriterion as ResultPerCriterionRow,
    Result as ResultRow,
)
from .contracts import (
    Dormer,
    EvaluationPeriod,
    PeriodCriterion,
    SubjectiveScore,
    ObjectiveScore,
    ResultPerCriterion,
    Result,
)

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT STORES
# =============================================================================

def list_dormers(db: Session) -> List[Dormer]:
    rows = db.execute(select(DormerRow)).scalars().all()
    return [Dormer.model_validate(r) for r in rows]


def list_period_criteria(db: Session, period_id: str) -> List[PeriodCriterion]:
    rows = db.execute(
        select(PeriodCriterionRow).where(PeriodCriterionRow.evaluation_period_id == period_id)
    ).scalars().all()
    return [PeriodCriterion.model_validate(r) for r in rows]


def list_subjective_scores(db: Session, period_id: str) -> List[SubjectiveScore]:
    rows = db.execute(
        select(SubjectiveScoreRow).where(SubjectiveScoreRow.evaluation_period_id == period_id)
    ).scalars().all()
    return [SubjectiveScore.model_validate(r) for r in rows]


def list_objective_scores(db: Session, period_id: str) -> List[ObjectiveScore]:
    rows = db.execute(
        select(ObjectiveScoreRow).where(ObjectiveScoreRow.evaluation_period_id == period_id)
    ).scalars().all()
    return [ObjectiveScore.model_validate(r) for r in rows]


def list_evaluation_periods(db: Session) -> List[EvaluationPeriod]:
    """All evaluation periods, newest first."""
    rows = db.execute(
        select(EvaluationPeriodRow).order_by(EvaluationPeriodRow.created_at.desc())
    ).scalars().all()
    return [EvaluationPeriod.model_validate(r) for r in rows]


# =============================================================================
# OUTPUT STORES
# =============================================================================

def delete_results_for_period(db: Session, period_id: str) -> None:
    """Remove both output tables' rows for a period."""
    deleted_results = db.execute(
        delete(ResultRow).where(ResultRow.evaluation_period_id == period_id)
    ).rowcount
    deleted_per_criteria = db.execute(
        delete(ResultPerCriterionRow).where(ResultPerCriterionRow.evaluation_period_id == period_id)
    ).rowcount
    logger.info(
        f"Cleared period {period_id}: {deleted_results} results, "
        f"{deleted_per_criteria} results per criteria"
    )


def insert_results_per_criteria(
    db: Session,
    rows: List[ResultPerCriterion]
) -> List[ResultPerCriterion]:
    """Insert rows and return them as stored (with ids)."""
    orm_rows = [ResultPerCriterionRow(**r.model_dump(exclude={"id"})) for r in rows]
    db.add_all(orm_rows)
    db.flush()
    return [ResultPerCriterion.model_validate(r) for r in orm_rows]


def insert_results(db: Session, rows: List[Result]) -> List[Result]:
    """Insert rows and return them as stored (with ids)."""
    orm_rows = [ResultRow(**r.model_dump(exclude={"id"})) for r in rows]
    db.add_all(orm_rows)
    db.flush()
    return [Result.model_validate(r) for r in orm_rows]


def fetch_results(db: Session, period_id: str) -> List[Result]:
    """Previously persisted totals of a period."""
    rows = db.execute(
        select(ResultRow).where(ResultRow.evaluation_period_id == period_id)
    ).scalars().all()
    return [Result.model_validate(r) for r in rows]


def fetch_results_per_criteria(
    db: Session,
    period_id: str,
    dormer_id: Optional[str] = None
) -> List[ResultPerCriterion]:
    stmt = select(ResultPerCriterionRow).where(ResultPerCriterionRow.evaluation_period_id == period_id)
    if dormer_id:
        stmt = stmt.where(ResultPerCriterionRow.target_dormer_id == dormer_id)
    rows = db.execute(stmt).scalars().all()
    return [ResultPerCriterion.model_validate(r) for r in rows]

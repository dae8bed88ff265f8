"""
Results Runner

Orchestrates one aggregation run for an evaluation period:
1. Reads dormers, period criteria, subjective and objective scores via adapter
2. Runs the aggregator
3. Inserts results per criteria, then results (totals depend on them)
4. Returns the inserted rows

Recomputation is a two-phase protocol: clear the period's prior rows, then
store. `recompute_period_results` runs both phases in one savepoint.
This is a pure orchestration layer - NO scoring.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .adapter import (
    list_dormers,
    list_period_criteria,
    list_subjective_scores,
    list_objective_scores,
    delete_results_for_period,
    insert_results_per_criteria,
    insert_results,
)
from .aggregator import aggregate_period
from .constants import AggregationStage
from .contracts import AggregationOutput
from .errors import AggregationError

logger = logging.getLogger(__name__)


def store_results_per_dormer(db: Session, evaluation_period_id: str) -> AggregationOutput:
    """
    Aggregate one period and persist both output tables.

    The caller must have cleared prior rows for the period. No rollback
    happens here: if inserting totals fails, the per-criteria rows of this
    run stay in the session.

    Args:
        db: Database session
        evaluation_period_id: Period to aggregate

    Returns:
        AggregationOutput holding the inserted rows

    Raises:
        AggregationError: any read or write failure, tagged with its stage
    """
    logger.info(f"🚀 Aggregating results for period: {evaluation_period_id}")

    try:
        dormers = list_dormers(db)
        period_criteria = list_period_criteria(db, evaluation_period_id)
        subjective_scores = list_subjective_scores(db, evaluation_period_id)
        objective_scores = list_objective_scores(db, evaluation_period_id)
    except SQLAlchemyError as e:
        logger.error(f"Error reading scores for period {evaluation_period_id}: {e}")
        raise AggregationError(str(e), AggregationStage.READ, evaluation_period_id) from e

    logger.info(
        f"📦 Loaded {len(dormers)} dormers, {len(period_criteria)} criteria, "
        f"{len(subjective_scores)} subjective / {len(objective_scores)} objective scores"
    )

    computed = aggregate_period(
        evaluation_period_id,
        dormers,
        period_criteria,
        subjective_scores,
        objective_scores,
    )

    try:
        stored_per_criteria = insert_results_per_criteria(db, computed.results_per_criteria)
    except SQLAlchemyError as e:
        logger.error(f"Error storing results per criteria: {e}")
        raise AggregationError(str(e), AggregationStage.WRITE_PER_CRITERIA, evaluation_period_id) from e

    try:
        stored_results = insert_results(db, computed.results)
    except SQLAlchemyError as e:
        logger.error(f"Error storing results: {e}")
        raise AggregationError(str(e), AggregationStage.WRITE_RESULTS, evaluation_period_id) from e

    logger.info(
        f"✅ Stored {len(stored_per_criteria)} results per criteria and "
        f"{len(stored_results)} results for period {evaluation_period_id}"
    )
    return AggregationOutput(
        evaluation_period_id=evaluation_period_id,
        results_per_criteria=stored_per_criteria,
        results=stored_results,
    )


def clear_period_results(db: Session, evaluation_period_id: str) -> None:
    """Phase 1 of recomputation: delete prior output rows of the period."""
    try:
        delete_results_for_period(db, evaluation_period_id)
    except SQLAlchemyError as e:
        logger.error(f"Error clearing results for period {evaluation_period_id}: {e}")
        raise AggregationError(str(e), AggregationStage.CLEAR, evaluation_period_id) from e


def recompute_period_results(db: Session, evaluation_period_id: str) -> AggregationOutput:
    """
    Clear and re-store a period's results inside a savepoint.

    On failure only the savepoint is rolled back: rows persisted by an
    earlier run survive, and so does work the caller added to the session
    before this call. Committing is up to the session owner.
    """
    with db.begin_nested():
        clear_period_results(db, evaluation_period_id)
        return store_results_per_dormer(db, evaluation_period_id)

"""
Test the runner against a SQLite database: storing, recomputing, and the
behaviour of each failure stage.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError

import results.logic.runner as runner
import results.models as m
from results.logic import (
    store_results_per_dormer,
    recompute_period_results,
    clear_period_results,
    AggregationError,
    AggregationStage,
)
from results.logic.adapter import fetch_results, fetch_results_per_criteria


def _totals(rows):
    return {r.target_dormer_id: r.total_weighted_score for r in rows}


def test_store_results_per_dormer(db, seeded):
    output = store_results_per_dormer(db, seeded)
    db.commit()

    assert _totals(output.results) == pytest.approx({"d-ana": 66.5, "d-cara": 30.0})
    assert all(r.id for r in output.results)
    assert all(r.id for r in output.results_per_criteria)

    per_criteria = {
        (r.target_dormer_id, r.period_criteria_id): r.total_score
        for r in fetch_results_per_criteria(db, seeded)
    }
    assert per_criteria == pytest.approx({
        ("d-ana", "pc-conduct"): 42.5,
        ("d-ana", "pc-clean"): 24.0,
        ("d-cara", "pc-conduct"): 30.0,
    })
    assert _totals(fetch_results(db, seeded)) == pytest.approx({"d-ana": 66.5, "d-cara": 30.0})


def test_unknown_period_stores_nothing(db, seeded):
    output = store_results_per_dormer(db, "no-such-period")
    assert output.results == []
    assert output.results_per_criteria == []


def test_recompute_replaces_rows(db, seeded):
    recompute_period_results(db, seeded)
    db.commit()
    recompute_period_results(db, seeded)
    db.commit()

    assert len(fetch_results(db, seeded)) == 2
    assert len(fetch_results_per_criteria(db, seeded)) == 3
    assert _totals(fetch_results(db, seeded)) == pytest.approx({"d-ana": 66.5, "d-cara": 30.0})


def test_clear_only_touches_its_period(db, seeded):
    store_results_per_dormer(db, seeded)
    store_results_per_dormer(db, "p2")
    db.commit()
    assert len(fetch_results(db, "p2")) == 1

    clear_period_results(db, seeded)
    db.commit()
    assert fetch_results(db, seeded) == []
    assert fetch_results_per_criteria(db, seeded) == []
    assert len(fetch_results(db, "p2")) == 1


def test_read_failure_aborts_before_writes(db, seeded, monkeypatch):
    def broken(session):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(runner, "list_dormers", broken)
    with pytest.raises(AggregationError) as exc:
        store_results_per_dormer(db, seeded)

    assert exc.value.stage == AggregationStage.READ
    assert exc.value.period_id == seeded
    assert isinstance(exc.value.__cause__, SQLAlchemyError)
    assert fetch_results_per_criteria(db, seeded) == []


def test_per_criteria_write_failure(db, seeded, monkeypatch):
    def broken(session, rows):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(runner, "insert_results_per_criteria", broken)
    with pytest.raises(AggregationError) as exc:
        store_results_per_dormer(db, seeded)
    assert exc.value.stage == AggregationStage.WRITE_PER_CRITERIA


def test_totals_write_failure_leaves_per_criteria_rows(db, seeded, monkeypatch):
    def broken(session, rows):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(runner, "insert_results", broken)
    with pytest.raises(AggregationError) as exc:
        store_results_per_dormer(db, seeded)

    assert exc.value.stage == AggregationStage.WRITE_RESULTS
    # no compensating delete at this level
    assert len(fetch_results_per_criteria(db, seeded)) == 3
    assert fetch_results(db, seeded) == []


def test_failed_recompute_keeps_previous_results(db, seeded, monkeypatch):
    recompute_period_results(db, seeded)
    db.commit()

    def broken(session, rows):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(runner, "insert_results", broken)
    with pytest.raises(AggregationError):
        recompute_period_results(db, seeded)

    assert _totals(fetch_results(db, seeded)) == pytest.approx({"d-ana": 66.5, "d-cara": 30.0})
    assert len(fetch_results_per_criteria(db, seeded)) == 3


def test_error_message_carries_stage():
    err = AggregationError("boom", AggregationStage.CLEAR, "p1")
    assert str(err) == "[clear] boom"


def test_failed_recompute_keeps_callers_pending_work(db, seeded, monkeypatch):
    """Only the recompute's own savepoint is undone on failure."""
    recompute_period_results(db, seeded)
    db.commit()

    db.add(m.Dormer(id="d-new", first_name="Dee", last_name="Santos", room="103"))

    def broken(session, rows):
        raise SQLAlchemyError("insert failed")

    monkeypatch.setattr(runner, "insert_results", broken)
    with pytest.raises(AggregationError):
        recompute_period_results(db, seeded)
    db.commit()

    assert db.get(m.Dormer, "d-new") is not None
    assert _totals(fetch_results(db, seeded)) == pytest.approx({"d-ana": 66.5, "d-cara": 30.0})

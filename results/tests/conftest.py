"""
Shared fixtures for results engine tests.

Every test gets a fresh in-memory SQLite database.
"""

import os

# must be set before db.py is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
import results.models as m


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )

    # pysqlite needs explicit BEGIN for SAVEPOINT (begin_nested) to work
    @event.listens_for(eng, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(eng, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """
    One period, three dormers, two criteria:
    - ana: subjective [80, 90] on conduct, objective 8 on cleanliness -> 42.5 + 24
    - ben: objective 0 on cleanliness only -> nothing emitted
    - cara: subjective [60] on conduct AND objective 10 on conduct -> objective ignored
    """
    period = m.EvaluationPeriod(id="p1", title="First Semester")
    other = m.EvaluationPeriod(id="p2", title="Second Semester")
    conduct = m.Criterion(id="c-conduct", name="Conduct", type="subjective")
    cleanliness = m.Criterion(id="c-clean", name="Cleanliness", type="objective")
    db.add_all([period, other, conduct, cleanliness])

    ana = m.Dormer(id="d-ana", first_name="Ana", last_name="Reyes", email="ana@dorm.edu", room="101")
    ben = m.Dormer(id="d-ben", first_name="Ben", last_name="Cruz", email="ben@dorm.edu", room="102")
    cara = m.Dormer(id="d-cara", first_name="Cara", last_name="Lim", email="cara@dorm.edu", room="101")
    db.add_all([ana, ben, cara])

    pc_conduct = m.PeriodCriterion(id="pc-conduct", evaluation_period_id="p1",
                                   criterion_id="c-conduct", weight=50, max_score=100)
    pc_clean = m.PeriodCriterion(id="pc-clean", evaluation_period_id="p1",
                                 criterion_id="c-clean", weight=30, max_score=10)
    pc_other = m.PeriodCriterion(id="pc-other", evaluation_period_id="p2",
                                 criterion_id="c-conduct", weight=100, max_score=10)
    db.add_all([pc_conduct, pc_clean, pc_other])

    ev1 = m.PeriodEvaluator(id="ev-1", evaluation_period_id="p1", evaluator_dormer_id="d-ben")
    ev2 = m.PeriodEvaluator(id="ev-2", evaluation_period_id="p1", evaluator_dormer_id="d-cara")
    db.add_all([ev1, ev2])

    db.add_all([
        m.SubjectiveScore(period_criteria_id="pc-conduct", period_evaluator_id="ev-1",
                          target_dormer_id="d-ana", evaluation_period_id="p1", score=80),
        m.SubjectiveScore(period_criteria_id="pc-conduct", period_evaluator_id="ev-2",
                          target_dormer_id="d-ana", evaluation_period_id="p1", score=90),
        m.SubjectiveScore(period_criteria_id="pc-conduct", period_evaluator_id="ev-1",
                          target_dormer_id="d-cara", evaluation_period_id="p1", score=60),
        m.ObjectiveScore(period_criteria_id="pc-clean", target_dormer_id="d-ana",
                         evaluation_period_id="p1", score=8),
        m.ObjectiveScore(period_criteria_id="pc-clean", target_dormer_id="d-ben",
                         evaluation_period_id="p1", score=0),
        m.ObjectiveScore(period_criteria_id="pc-conduct", target_dormer_id="d-cara",
                         evaluation_period_id="p1", score=10),
        # belongs to another period and must not leak into p1
        m.ObjectiveScore(period_criteria_id="pc-other", target_dormer_id="d-ben",
                         evaluation_period_id="p2", score=9),
    ])
    db.commit()
    return "p1"

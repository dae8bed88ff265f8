import uuid

from sqlalchemy import Column, String, Float, ForeignKey

from .base import Base


class PeriodEvaluator(Base):
    __tablename__ = "period_evaluators"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    evaluation_period_id = Column(String(36), ForeignKey("evaluation_period.id"), index=True, nullable=False)
    evaluator_dormer_id = Column(String(36), ForeignKey("dormers.id"))
    status = Column(String, default="pending")


class SubjectiveScore(Base):
    __tablename__ = "subjective_scores"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    period_criteria_id = Column(String(36), ForeignKey("period_criteria.id"), nullable=False)
    period_evaluator_id = Column(String(36), ForeignKey("period_evaluators.id"))
    target_dormer_id = Column(String(36), ForeignKey("dormers.id"), nullable=False)
    evaluation_period_id = Column(String(36), ForeignKey("evaluation_period.id"), index=True, nullable=False)
    score = Column(Float)


class ObjectiveScore(Base):
    __tablename__ = "objective_scores"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    period_criteria_id = Column(String(36), ForeignKey("period_criteria.id"), nullable=False)
    target_dormer_id = Column(String(36), ForeignKey("dormers.id"), nullable=False)
    evaluation_period_id = Column(String(36), ForeignKey("evaluation_period.id"), index=True, nullable=False)
    score = Column(Float)

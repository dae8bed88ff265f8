import uuid

from sqlalchemy import Column, String, Float, ForeignKey

from .base import Base


class ResultPerCriterion(Base):
    __tablename__ = "results_per_criteria"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    period_criteria_id = Column(String(36), ForeignKey("period_criteria.id"), nullable=False)
    target_dormer_id = Column(String(36), ForeignKey("dormers.id"), nullable=False)
    total_score = Column(Float, nullable=False)
    evaluation_period_id = Column(String(36), ForeignKey("evaluation_period.id"), index=True, nullable=False)


class Result(Base):
    __tablename__ = "results"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    target_dormer_id = Column(String(36), ForeignKey("dormers.id"), nullable=False)
    total_weighted_score = Column(Float, nullable=False)
    evaluation_period_id = Column(String(36), ForeignKey("evaluation_period.id"), index=True, nullable=False)

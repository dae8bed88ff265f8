import uuid

from sqlalchemy import Column, String, Text, Float, ForeignKey

from .base import Base


class Criterion(Base):
    __tablename__ = "criteria"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    description = Column(Text)
    type = Column(String, nullable=False, default="subjective")  # objective/subjective


class PeriodCriterion(Base):
    __tablename__ = "period_criteria"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    evaluation_period_id = Column(String(36), ForeignKey("evaluation_period.id"), index=True, nullable=False)
    criterion_id = Column(String(36), ForeignKey("criteria.id"))
    weight = Column(Float, nullable=False)     # percentage, 0-100
    max_score = Column(Float, nullable=False)

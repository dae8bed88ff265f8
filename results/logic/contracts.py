"""
Data Contracts for the Results Aggregation Engine

Defines Pydantic models for the four input record streams (dormers, period
criteria, subjective scores, objective scores) and the two output record sets
(results per criteria, results). These contracts are the boundary between the
stores adapter and the aggregator.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class Dormer(BaseModel):
    """Resident identity record. Residents may also act as evaluators."""
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    room: Optional[str] = None
    course_year: Optional[str] = None

    class Config:
        from_attributes = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class EvaluationPeriod(BaseModel):
    id: str
    title: str
    school_year_id: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PeriodCriterion(BaseModel):
    """A criterion attached to one evaluation period."""
    id: str
    evaluation_period_id: str
    criterion_id: Optional[str] = None
    weight: float  # percentage, 20 means 20%
    max_score: float

    class Config:
        from_attributes = True


class SubjectiveScore(BaseModel):
    """One peer evaluator's score for a target dormer on one criterion."""
    period_criteria_id: str
    period_evaluator_id: Optional[str] = None
    target_dormer_id: str
    evaluation_period_id: str
    score: Optional[float] = None

    class Config:
        from_attributes = True


class ObjectiveScore(BaseModel):
    """Single authoritative score for a target dormer on one criterion."""
    period_criteria_id: str
    target_dormer_id: str
    evaluation_period_id: str
    score: Optional[float] = None

    class Config:
        from_attributes = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ResultPerCriterion(BaseModel):
    """Weighted score of one dormer on one period criterion."""
    id: Optional[str] = None  # set once persisted
    period_criteria_id: str
    target_dormer_id: str
    total_score: float
    evaluation_period_id: str

    class Config:
        from_attributes = True


class Result(BaseModel):
    """Overall weighted score of one dormer for one period."""
    id: Optional[str] = None  # set once persisted
    target_dormer_id: str
    total_weighted_score: float
    evaluation_period_id: str

    class Config:
        from_attributes = True


class AggregationOutput(BaseModel):
    """Both output record sets of one aggregation run."""
    evaluation_period_id: str
    results_per_criteria: List[ResultPerCriterion] = Field(default_factory=list)
    results: List[Result] = Field(default_factory=list)


# =============================================================================
# PRESENTATION CONTRACTS
# =============================================================================

class RankedResult(BaseModel):
    """Result row joined with its dormer, ready for display."""
    target_dormer_id: str
    dormer_name: str
    room: Optional[str] = None
    total_weighted_score: float
    display_score: float  # rounded to 2 decimals


class CriterionBreakdown(BaseModel):
    period_criteria_id: str
    target_dormer_id: str
    weight: Optional[float] = None
    max_score: Optional[float] = None
    total_score: float
    display_score: float

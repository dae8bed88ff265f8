# Export all results models for easy imports
from .base import Base
from .dormer import Dormer
from .evaluation_period import EvaluationPeriod
from .criteria import Criterion, PeriodCriterion
from .scores import PeriodEvaluator, SubjectiveScore, ObjectiveScore
from .results import ResultPerCriterion, Result

__all__ = [
    "Base",
    "Dormer",
    "EvaluationPeriod",
    "Criterion",
    "PeriodCriterion",
    "PeriodEvaluator",
    "SubjectiveScore",
    "ObjectiveScore",
    "ResultPerCriterion",
    "Result",
]

"""
Results Logic Module

Provides the aggregation engine that turns evaluation scores into weighted
per-criterion results and per-dormer totals.
"""

from .contracts import (
    Dormer,
    EvaluationPeriod,
    PeriodCriterion,
    SubjectiveScore,
    ObjectiveScore,
    ResultPerCriterion,
    Result,
    AggregationOutput,
    RankedResult,
    CriterionBreakdown,
)
from .aggregator import aggregate_period
from .runner import store_results_per_dormer, clear_period_results, recompute_period_results
from .presenter import present_results, present_criteria_breakdown, unique_rooms
from .constants import SortOrder, AggregationStage
from .errors import AggregationError

__all__ = [
    # Engine
    "aggregate_period",
    "store_results_per_dormer",
    "clear_period_results",
    "recompute_period_results",

    # Presentation
    "present_results",
    "present_criteria_breakdown",
    "unique_rooms",

    # Contracts
    "Dormer",
    "EvaluationPeriod",
    "PeriodCriterion",
    "SubjectiveScore",
    "ObjectiveScore",
    "ResultPerCriterion",
    "Result",
    "AggregationOutput",
    "RankedResult",
    "CriterionBreakdown",

    # Enums / errors
    "SortOrder",
    "AggregationStage",
    "AggregationError",
]

"""
Results Engine Constants

Sort orders, display precision, and failure stages used by the results engine.
"""

from enum import Enum


# =============================================================================
# PRESENTATION
# =============================================================================

class SortOrder(str, Enum):
    """Order of results by total weighted score."""
    ASC = "asc"
    DESC = "desc"


DEFAULT_SORT_ORDER = SortOrder.DESC

# Rounding applied for display only; stored totals are never rounded
DISPLAY_PRECISION = 2

# Room filter value meaning "no filter"
ALL_ROOMS = "all"

UNKNOWN_DORMER_NAME = "Unknown Dormer"


# =============================================================================
# FAILURE STAGES
# =============================================================================

class AggregationStage(str, Enum):
    """Where an aggregation run failed."""
    CLEAR = "clear"
    READ = "read"
    WRITE_PER_CRITERIA = "write_per_criteria"
    WRITE_RESULTS = "write_results"

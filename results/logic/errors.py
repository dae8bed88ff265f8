from typing import Optional

from .constants import AggregationStage


class AggregationError(Exception):
    """Raised when a read or write against the stores aborts an aggregation run."""

    def __init__(self, message: str, stage: AggregationStage, period_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.period_id = period_id

    def __str__(self) -> str:
        return f"[{self.stage.value}] {self.message}"

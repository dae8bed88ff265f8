import uuid
from datetime import datetime

from sqlalchemy import Column, String, DateTime

from .base import Base


class EvaluationPeriod(Base):
    __tablename__ = "evaluation_period"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    school_year_id = Column(String(36))
    status = Column(String, default="pending")
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)

import uuid

from sqlalchemy import Column, String

from .base import Base


class Dormer(Base):
    __tablename__ = "dormers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True)
    room = Column(String)
    course_year = Column(String)

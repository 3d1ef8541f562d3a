"""
SQLAlchemy model for confirmed tips.
"""
from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from app.tips.database import Base


class TipModel(Base):
    __tablename__ = "tips"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    amount = Column(Float, nullable=False)
    source = Column(String(20), nullable=False, default="cash")
    occurred_at = Column(DateTime, nullable=False, index=True)
    notes = Column(Text)

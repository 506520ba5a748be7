from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Match(Base):
    __tablename__ = "matches"

    spinner_id = Column(String, primary_key=True)
    receiver_id = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("receiver_id", name="uq_matches_receiver_id"),
    )

    def __repr__(self) -> str:
        return f"<Match(spinner_id={self.spinner_id}, receiver_id={self.receiver_id})>"


class MatchHistory(Base):
    __tablename__ = "assignment_history"

    id = Column(Integer, primary_key=True)
    spinner_id = Column(String, nullable=False, index=True)
    receiver_id = Column(String, nullable=False)
    archived_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

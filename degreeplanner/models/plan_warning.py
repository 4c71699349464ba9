from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from degreeplanner.models.base import Base


class PlanWarning(Base):
    __tablename__ = "plan_warnings"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("plans.id"), nullable=False)
    kind = Column(String, nullable=False)  # planner/validation
    message = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

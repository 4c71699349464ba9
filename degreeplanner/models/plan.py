from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from degreeplanner.models.base import Base
from degreeplanner.models.plan_warning import PlanWarning


class Plan(Base):
    __tablename__ = "plans"

    id = Column(Integer, primary_key=True, index=True)
    institution = Column(String, nullable=False)
    program = Column(String, nullable=False, index=True)
    target_grad_term = Column(String, nullable=False)
    min_credits = Column(Float, nullable=False)
    max_credits = Column(Float, nullable=False)
    include_summers = Column(Boolean, default=False)
    total_credits = Column(Float, default=0)
    status = Column(String, default="queued")  # queued/complete
    created_at = Column(DateTime, default=datetime.utcnow)

    terms = relationship("PlanTerm", back_populates="plan", order_by="PlanTerm.position")
    warnings = relationship("PlanWarning", backref="plan", order_by=PlanWarning.id)


class PlanTerm(Base):
    __tablename__ = "plan_terms"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("plans.id"), nullable=False)
    position = Column(Integer, nullable=False)
    term_name = Column(String, nullable=False)
    credits = Column(Float, default=0)

    plan = relationship("Plan", back_populates="terms")
    items = relationship("PlanItem", back_populates="term", order_by="PlanItem.id")


class PlanItem(Base):
    __tablename__ = "plan_items"

    id = Column(Integer, primary_key=True, index=True)
    term_id = Column(Integer, ForeignKey("plan_terms.id"), nullable=False)
    course_code = Column(String, nullable=False)
    course_title = Column(String, nullable=True)
    credits = Column(Float, nullable=True)

    term = relationship("PlanTerm", back_populates="items")

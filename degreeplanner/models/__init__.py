from degreeplanner.models.plan import Plan, PlanItem, PlanTerm
from degreeplanner.models.plan_warning import PlanWarning

__all__ = ["Plan", "PlanItem", "PlanTerm", "PlanWarning"]

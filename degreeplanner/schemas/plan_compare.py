from pydantic import BaseModel


class PlanCompareResponse(BaseModel):
    baseline_plan_id: int
    other_plan_id: int
    term_count_diff: int
    credit_diff: float
    added_courses: list[str]
    removed_courses: list[str]

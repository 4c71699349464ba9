from datetime import datetime

from pydantic import BaseModel


class PlanItemResponse(BaseModel):
    id: int
    term_id: int
    course_code: str
    course_title: str | None = None
    credits: float | None = None

    model_config = {"from_attributes": True}


class PlanTermResponse(BaseModel):
    id: int
    plan_id: int
    position: int
    term_name: str
    credits: float
    items: list[PlanItemResponse] = []

    model_config = {"from_attributes": True}


class PlanDetailResponse(BaseModel):
    id: int
    institution: str
    program: str
    target_grad_term: str
    min_credits: float
    max_credits: float
    include_summers: bool
    total_credits: float
    status: str
    created_at: datetime | None = None
    terms: list[PlanTermResponse] = []

    model_config = {"from_attributes": True}

from pydantic import BaseModel, Field, model_validator

from degreeplanner.schemas.requirements import Course, DegreeRequirements


class PlanningConstraints(BaseModel):
    min_credits: float = Field(..., ge=1, le=30)
    max_credits: float = Field(..., ge=1, le=30)
    target_grad_term: str = Field(..., max_length=50)
    include_summers: bool = False

    @model_validator(mode="after")
    def check_credit_bounds(self) -> "PlanningConstraints":
        if self.max_credits < self.min_credits:
            raise ValueError("Maximum credits must be greater than or equal to minimum credits")
        return self


class PlanRequest(BaseModel):
    degree_requirements: DegreeRequirements
    constraints: PlanningConstraints


class Term(BaseModel):
    name: str
    courses: list[Course] = []
    total_credits: float = 0


class PlannerOutput(BaseModel):
    terms: list[Term] = []
    warnings: list[str] = []
    total_credits: float = 0


class PlanGenerateResponse(PlannerOutput):
    plan_id: int | None = None


class PlanValidateRequest(BaseModel):
    plan: PlannerOutput
    degree_requirements: DegreeRequirements


class PlanValidateResponse(BaseModel):
    warnings: list[str] = []
